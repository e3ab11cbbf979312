from pyparsing import OpAssoc, ParseException, ParserElement, Regex, infix_notation, one_of

from intinf.errors import ExpressionSyntaxError

ParserElement.set_default_whitespace_chars(' \t')


class Parser:
    """Parses infix integer expressions into plain dict trees."""

    def __init__(self):
        self.text = ""
        self.expr = self.build_grammar()

    def make_integer(self, tokens):
        return {'type': 'integer', 'value': str(tokens[0])}

    def enrich_unary_expr(self, tokens):
        token_list = list(tokens[0])

        # Repeated prefix operators arrive flattened: ['-', '-', atom].
        inner = token_list[-1]
        for op in reversed(token_list[:-1]):
            inner = {
                'type': 'un_expr',
                'op': str(op),
                'inner': inner
            }
        return inner

    def enrich_binary_expr(self, tokens):
        token_list = list(tokens[0])

        # Left associative chains arrive flattened: [a, '+', b, '-', c].
        left = token_list[0]
        for i in range(1, len(token_list), 2):
            left = {
                'type': 'gen_expr',
                'left': left,
                'op': str(token_list[i]),
                'right': token_list[i + 1]
            }
        return left

    def build_grammar(self) -> ParserElement:
        integer = Regex(r'[0-9]+')
        integer.set_parse_action(self.make_integer)
        return infix_notation(integer, [
            ('-', 1, OpAssoc.RIGHT, self.enrich_unary_expr),
            ('*', 2, OpAssoc.LEFT, self.enrich_binary_expr),
            (one_of('+ -'), 2, OpAssoc.LEFT, self.enrich_binary_expr),
        ])

    def parse_expression(self, text: str) -> dict:
        self.text = text
        try:
            return self.expr.parse_string(self.text, parse_all=True)[0]
        except ParseException as e:
            raise ExpressionSyntaxError(text, e.lineno, e.col, e.msg) from e


def parse_expression(text: str) -> dict:
    """Convenience function to parse an expression."""
    return Parser().parse_expression(text)
