from dataclasses import dataclass
from typing import Sequence, Tuple

from intinf.errors import InvalidDigitError

DIGIT_WIDTH = 4
DIGIT_BASE = 10


@dataclass(frozen=True)
class DigitCell:
    """A single decimal digit with a 4-bit big-endian encoding."""
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidDigitError(self.value)
        if not 0 <= self.value < DIGIT_BASE:
            raise InvalidDigitError(self.value)

    @classmethod
    def encode(cls, digit: int) -> 'DigitCell':
        return cls(digit)

    @classmethod
    def from_bits(cls, bits: Sequence[bool]) -> 'DigitCell':
        if len(bits) != DIGIT_WIDTH:
            raise InvalidDigitError(bits)
        return cls(bits_to_int(bits))

    @property
    def bits(self) -> Tuple[bool, ...]:
        return tuple((self.value >> i) & 1 == 1 for i in range(DIGIT_WIDTH - 1, -1, -1))

    def decode(self) -> int:
        return bits_to_int(self.bits)

    def duplicate(self) -> 'DigitCell':
        return DigitCell(self.value)

    def __str__(self):
        return str(self.decode())


def bits_to_int(bits: Sequence[bool]) -> int:
    res = 0
    for b in bits:
        res = res << 1
        if b:
            res |= 1
    return res


def digit_from_char(ch: str, position=None) -> DigitCell:
    # str.isdigit() accepts non-ASCII digits, so compare against the ASCII range.
    if len(ch) != 1 or not '0' <= ch <= '9':
        raise InvalidDigitError(ch, position)
    return DigitCell.encode(ord(ch) - ord('0'))


ZERO = DigitCell(0)
ONE = DigitCell(1)
