PRECEDENCE = {'+': 1, '-': 1, '*': 2}
UNARY_PRECEDENCE = 3


class Formatter:
    def __init__(self, spacing=1):
        self.spacing = spacing

    def format(self, expr) -> str:
        return self.format_expression(expr)

    def format_expression(self, expr, parent_precedence=0, is_right=False):
        """Format an expression tree, adding parentheses only where they are needed"""
        expr_type = expr['type']

        if expr_type == 'integer':
            return str(expr['value'])
        elif expr_type == 'un_expr':
            inner = self.format_expression(expr['inner'], UNARY_PRECEDENCE)
            return f"{expr['op']}{inner}"
        elif expr_type == 'gen_expr':
            precedence = PRECEDENCE[expr['op']]
            left = self.format_expression(expr['left'], precedence)
            right = self.format_expression(expr['right'], precedence, is_right=True)
            gap = ' ' * self.spacing
            text = f"{left}{gap}{expr['op']}{gap}{right}"
            # Operators are left associative, so an equal-precedence right operand keeps its parentheses.
            if precedence < parent_precedence or (precedence == parent_precedence and is_right):
                return f"({text})"
            return text
        else:
            raise ValueError(f"Unknown expression type: {expr_type}")
