import unittest

from digits.logic import DigitCell, bits_to_int, digit_from_char
from intinf.errors import InvalidDigitError


class TestDigitCell(unittest.TestCase):
    def test_encode_decode_all_digits(self):
        for d in range(10):
            self.assertEqual(DigitCell.encode(d).decode(), d)

    def test_bits_are_big_endian(self):
        self.assertEqual(DigitCell.encode(0).bits, (False, False, False, False))
        self.assertEqual(DigitCell.encode(1).bits, (False, False, False, True))
        self.assertEqual(DigitCell.encode(8).bits, (True, False, False, False))
        self.assertEqual(DigitCell.encode(9).bits, (True, False, False, True))

    def test_encode_rejects_out_of_range(self):
        for bad in (10, 15, 16, -1, 100):
            with self.assertRaises(InvalidDigitError) as ctx:
                DigitCell.encode(bad)
            self.assertEqual(ctx.exception.value, bad)

    def test_encode_rejects_non_int(self):
        for bad in ('5', 5.0, None, True):
            with self.assertRaises(InvalidDigitError):
                DigitCell.encode(bad)

    def test_from_bits(self):
        self.assertEqual(DigitCell.from_bits([False, True, True, True]), DigitCell(7))
        self.assertEqual(DigitCell.from_bits(DigitCell(9).bits).decode(), 9)

    def test_from_bits_rejects_invalid_values(self):
        # 1010 and 1111 fit in four bits but are not decimal digits.
        with self.assertRaises(InvalidDigitError):
            DigitCell.from_bits([True, False, True, False])
        with self.assertRaises(InvalidDigitError):
            DigitCell.from_bits([True, True, True, True])

    def test_from_bits_rejects_wrong_width(self):
        with self.assertRaises(InvalidDigitError):
            DigitCell.from_bits([True, False, True])
        with self.assertRaises(InvalidDigitError):
            DigitCell.from_bits([False] * 8)

    def test_duplicate_is_equal_but_independent(self):
        cell = DigitCell.encode(4)
        copy = cell.duplicate()
        self.assertEqual(cell, copy)
        self.assertIsNot(cell, copy)

    def test_bits_to_int(self):
        self.assertEqual(bits_to_int([]), 0)
        self.assertEqual(bits_to_int([True, True]), 3)
        self.assertEqual(bits_to_int([True, False, False, True]), 9)


class TestDigitFromChar(unittest.TestCase):
    def test_ascii_digits(self):
        for i, ch in enumerate("0123456789"):
            self.assertEqual(digit_from_char(ch).decode(), i)

    def test_rejects_other_characters(self):
        for ch in ('a', '-', '+', ' ', '٣', ''):
            with self.assertRaises(InvalidDigitError):
                digit_from_char(ch)

    def test_error_carries_position(self):
        with self.assertRaises(InvalidDigitError) as ctx:
            digit_from_char('x', 3)
        self.assertEqual(ctx.exception.value, 'x')
        self.assertEqual(ctx.exception.position, 3)
        self.assertIn("index 3", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
