from typing import Iterable, List, Tuple

from digits.logic import DIGIT_BASE, DigitCell, ZERO, ONE, digit_from_char
from intinf.errors import InvalidDigitError


class BigInt:
    """
    Arbitrary-precision signed integer stored as decimal digit cells.

    Digits are kept most-significant first. Values are always normalized:
    no leading zeros, and zero is never negative.
    """

    def __init__(self, digits: Iterable[DigitCell], negative: bool = False):
        self.digits: Tuple[DigitCell, ...] = strip_leading_zeros(digits)
        self.negative = negative and not self.is_zero()

    @classmethod
    def parse(cls, text: str) -> 'BigInt':
        return parse_bigint(text)

    def is_zero(self) -> bool:
        return len(self.digits) == 1 and self.digits[0] == ZERO

    def render(self) -> str:
        return ('-' if self.negative else '') + ''.join(str(d.decode()) for d in self.digits)

    def duplicate(self) -> 'BigInt':
        return BigInt([d.duplicate() for d in self.digits], self.negative)

    def negate(self) -> 'BigInt':
        return BigInt(self.digits, not self.negative)

    def magnitude(self) -> 'BigInt':
        return BigInt(self.digits, False)

    def add(self, other: 'BigInt') -> 'BigInt':
        if self.negative == other.negative:
            return BigInt(add_magnitudes(self.digits, other.digits), self.negative)
        # Only one addend is negative: subtract its magnitude from the other one.
        if self.negative:
            return other.subtract(self.magnitude())
        return self.subtract(other.magnitude())

    def subtract(self, other: 'BigInt') -> 'BigInt':
        if self.negative != other.negative:
            return self.add(other.negate())
        if compare_magnitudes(self.digits, other.digits) >= 0:
            return BigInt(subtract_magnitudes(self.digits, other.digits), self.negative)
        return BigInt(subtract_magnitudes(other.digits, self.digits), not self.negative)

    def multiply(self, other: 'BigInt') -> 'BigInt':
        return BigInt(multiply_magnitudes(self.digits, other.digits), self.negative != other.negative)

    def compare(self, other: 'BigInt') -> int:
        if self.negative != other.negative:
            return -1 if self.negative else 1
        cmp = compare_magnitudes(self.digits, other.digits)
        return -cmp if self.negative else cmp

    def to_int(self) -> int:
        res = 0
        for d in self.digits:
            res = res * DIGIT_BASE + d.decode()
        return -res if self.negative else res

    def __add__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self):
        return self.negate()

    def __abs__(self):
        return self.magnitude()

    def __eq__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.negative == other.negative and self.digits == other.digits

    def __hash__(self):
        return hash((self.negative, self.digits))

    def __lt__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.compare(other) >= 0

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"BigInt('{self.render()}')"


def strip_leading_zeros(digits: Iterable[DigitCell]) -> Tuple[DigitCell, ...]:
    res = tuple(digits)
    start = 0
    while start < len(res) - 1 and res[start] == ZERO:
        start += 1
    return res[start:] or (ZERO,)


def compare_magnitudes(a: Tuple[DigitCell, ...], b: Tuple[DigitCell, ...]) -> int:
    # Both sides are normalized, so a longer sequence is a larger magnitude.
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for x, y in zip(a, b):
        if x.decode() != y.decode():
            return -1 if x.decode() < y.decode() else 1
    return 0


def digit_at(digits: Tuple[DigitCell, ...], i: int) -> int:
    """Digit i positions from the least significant end, 0 past the top."""
    if i < len(digits):
        return digits[len(digits) - 1 - i].decode()
    return 0


def add_magnitudes(a: Tuple[DigitCell, ...], b: Tuple[DigitCell, ...]) -> List[DigitCell]:
    res = []
    carry = 0
    for i in range(max(len(a), len(b))):
        digit_sum = digit_at(a, i) + digit_at(b, i) + carry
        carry = 1 if digit_sum > 9 else 0
        if carry:
            digit_sum -= DIGIT_BASE
        res.append(DigitCell.encode(digit_sum))
    if carry:
        res.append(ONE)
    res.reverse()
    return res


def subtract_magnitudes(a: Tuple[DigitCell, ...], b: Tuple[DigitCell, ...]) -> List[DigitCell]:
    """a - b for magnitudes with a >= b."""
    assert compare_magnitudes(a, b) >= 0
    res = []
    borrow = 0
    for i in range(max(len(a), len(b))):
        digit_diff = digit_at(a, i) - digit_at(b, i) - borrow
        if digit_diff < 0:
            digit_diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0
        res.append(DigitCell.encode(digit_diff))
    assert borrow == 0
    res.reverse()
    return res


def multiply_magnitudes(a: Tuple[DigitCell, ...], b: Tuple[DigitCell, ...]) -> List[DigitCell]:
    # Column sums are indexed from the least significant position.
    columns = [0] * (len(a) + len(b))
    for i in range(len(a)):
        x = digit_at(a, i)
        if x == 0:
            continue
        for j in range(len(b)):
            columns[i + j] += x * digit_at(b, j)
    res = []
    carry = 0
    for column in columns:
        total = column + carry
        res.append(DigitCell.encode(total % DIGIT_BASE))
        carry = total // DIGIT_BASE
    while carry:
        res.append(DigitCell.encode(carry % DIGIT_BASE))
        carry //= DIGIT_BASE
    res.reverse()
    return res


def parse_bigint(text: str) -> BigInt:
    if not isinstance(text, str):
        raise InvalidDigitError(text)
    negative = text.startswith('-')
    start = 1 if negative else 0
    if start == len(text):
        raise InvalidDigitError(text, start)
    digits = [digit_from_char(ch, i) for i, ch in enumerate(text) if i >= start]
    return BigInt(digits, negative)


def bigint_from_int(value: int) -> BigInt:
    return parse_bigint(str(value))


BIG_ZERO = BigInt([ZERO])
BIG_ONE = BigInt([ONE])
