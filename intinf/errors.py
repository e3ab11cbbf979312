from typing import Optional


class IntInfError(Exception):
    """Base class for intinf errors."""
    pass


class InvalidDigitError(IntInfError):
    """Raised when a value or character cannot be used as a decimal digit."""
    def __init__(self, value, position: Optional[int] = None):
        self.value = value
        self.position = position
        super().__init__(f"Invalid digit: {value!r}" + (f" (at index {position})" if position is not None else ""))


class ExpressionSyntaxError(IntInfError):
    """Raised when an expression cannot be parsed."""
    def __init__(self, text: str, line: int, column: int, context: str = ""):
        self.text = text
        self.line = line
        self.column = column
        self.context = context
        super().__init__(f"Syntax error at line {line}, column {column}" + (f" ({context})" if context else ""))


class UnsupportedOperatorError(IntInfError):
    """Raised when an expression tree contains an unknown operator."""
    def __init__(self, op: str):
        self.op = op
        super().__init__(f"Unsupported operator: {op}")
