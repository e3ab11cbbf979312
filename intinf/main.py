import logging
import sys

from intinf.bigint import BigInt, parse_bigint
from intinf.calc_parser import parse_expression
from intinf.errors import IntInfError
from intinf.evaluator import Evaluator
from intinf.formatter import Formatter

logger = logging.getLogger(__name__)

# u64::MAX rendered as text, paired with the operands the demo applies to it.
DEMO_OPERANDS = [
    ('+', str(2 ** 64 - 1), '1'),
    ('*', str(2 ** 64 - 1), '71'),
]

OPERATIONS = {
    '+': BigInt.add,
    '-': BigInt.subtract,
    '*': BigInt.multiply,
}


def binary(op: str, a_text: str, b_text: str) -> str:
    a = parse_bigint(a_text)
    b = parse_bigint(b_text)
    res = OPERATIONS[op](a, b)
    logger.debug("%s %s %s has %d digits", a, op, b, len(res.digits))
    return f"{a} {op} {b} = {res}"


def demo():
    for op, a_text, b_text in DEMO_OPERANDS:
        print(binary(op, a_text, b_text))


def evaluate(text: str) -> str:
    expr = parse_expression(text)
    evaluator = Evaluator()
    res = evaluator.evaluate(expr)
    logger.debug("Evaluated in %d steps", evaluator.steps)
    return f"{Formatter().format(expr)} = {res}"


def main(argv=None):
    import argparse

    arg_parser = argparse.ArgumentParser(description="Arbitrary-precision decimal integer calculator")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = arg_parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("demo", help="Print the u64::MAX sum and product examples")

    for command, help_text in (("add", "Add two integers"), ("sub", "Subtract B from A"), ("mul", "Multiply two integers")):
        op_parser = subparsers.add_parser(command, help=help_text)
        # argparse reads "-5" as a positional since no option looks like a negative number.
        op_parser.add_argument("a", help="First operand")
        op_parser.add_argument("b", help="Second operand")

    eval_parser = subparsers.add_parser("eval", help="Evaluate an expression with + - * and parentheses")
    eval_parser.add_argument("expression", help="Expression text, e.g. \"(2 - 7) * 12\"")

    args = arg_parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "demo":
            demo()
        elif args.command == "add":
            print(binary('+', args.a, args.b))
        elif args.command == "sub":
            print(binary('-', args.a, args.b))
        elif args.command == "mul":
            print(binary('*', args.a, args.b))
        elif args.command == "eval":
            print(evaluate(args.expression))
    except IntInfError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
