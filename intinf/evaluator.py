import logging

from intinf.bigint import BigInt, parse_bigint
from intinf.calc_parser import parse_expression
from intinf.errors import UnsupportedOperatorError

logger = logging.getLogger(__name__)


class Evaluator:
    """Computes parsed expression trees with BigInt arithmetic."""

    def __init__(self):
        self.steps = 0

    def evaluate(self, expr: dict) -> BigInt:
        self.steps = 0
        return self._evaluate(expr)

    def _evaluate(self, expr: dict) -> BigInt:
        expr_type = expr['type']
        if expr_type == 'integer':
            return parse_bigint(expr['value'])
        elif expr_type == 'un_expr':
            inner = self._evaluate(expr['inner'])
            if expr['op'] != '-':
                raise UnsupportedOperatorError(expr['op'])
            return self._record(expr['op'], -inner, inner)
        elif expr_type == 'gen_expr':
            left = self._evaluate(expr['left'])
            right = self._evaluate(expr['right'])
            op = expr['op']
            if op == '+':
                res = left + right
            elif op == '-':
                res = left - right
            elif op == '*':
                res = left * right
            else:
                raise UnsupportedOperatorError(op)
            return self._record(op, res, left, right)
        else:
            raise ValueError(f"Unknown expression type: {expr_type}")

    def _record(self, op: str, res: BigInt, *operands: BigInt) -> BigInt:
        self.steps += 1
        logger.debug("step %d: %s %s -> %s", self.steps, op, " ".join(str(o) for o in operands), res)
        return res


def evaluate_text(text: str) -> BigInt:
    """Convenience function to parse and evaluate an expression."""
    return Evaluator().evaluate(parse_expression(text))
