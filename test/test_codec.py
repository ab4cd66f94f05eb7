import random
import unittest
from secretweave.codec import decode, digit_value, to_base_string
from secretweave.errors import DecodeError

class BaseDecoderTests(unittest.TestCase):
    def test_small_values(self):
        """Known values from the sample datasets"""
        self.assertEqual(decode("111", 2), 7)
        self.assertEqual(decode("213", 4), 39)
        self.assertEqual(decode("4", 10), 4)
        self.assertEqual(decode("0", 7), 0)

    def test_large_base_six_value(self):
        """Positional evaluation matches an independent recomputation"""
        digits = "13444211440455345511"
        expected = sum(int(d) * 6 ** (len(digits) - 1 - i) for i, d in enumerate(digits))
        self.assertEqual(decode(digits, 6), expected)
        self.assertGreater(decode(digits, 6), 2**32)

    def test_case_insensitive_letters(self):
        self.assertEqual(decode("ff", 16), 255)
        self.assertEqual(decode("FF", 16), 255)
        self.assertEqual(decode("zZ", 36), 35 * 36 + 35)
        self.assertEqual(digit_value("A"), 10)
        self.assertIsNone(digit_value("!"))

    def test_round_trip_all_bases(self):
        """decode(to_base_string(v, b), b) == v for every base"""
        rng = random.Random(1234)
        values = [0, 1, 35, 36, 2**63, 2**64 + 1] + [rng.getrandbits(300) for _ in range(5)]
        for base in range(2, 37):
            for value in values:
                encoded = to_base_string(value, base)
                self.assertEqual(decode(encoded, base), value)
                self.assertEqual(decode(encoded.upper(), base), value)
                self.assertEqual(int(encoded, base), value)

    def test_rejects_invalid_digits(self):
        with self.assertRaises(DecodeError) as ctx:
            decode("g", 16)
        self.assertEqual(ctx.exception.char, "g")
        self.assertEqual(ctx.exception.base, 16)

        with self.assertRaises(DecodeError) as ctx:
            decode("1012", 2)
        self.assertEqual(ctx.exception.position, 3)

    def test_rejects_numeric_syntax(self):
        """Signs, prefixes and separators are not digits"""
        for digits in ["-1", "+1", "0x1f", "1_000", " 12", "1.5", "1e3", "", "١", "K"]:
            with self.assertRaises(DecodeError):
                decode(digits, 16 if digits == "0x1f" else 10)

    def test_rejects_bad_bases(self):
        for base in [0, 1, 37, -2, True, "10", 10.0]:
            with self.assertRaises(DecodeError):
                decode("1", base)

    def test_encoder_rejects_negative(self):
        with self.assertRaises(ValueError):
            to_base_string(-5, 10)
        self.assertEqual(to_base_string(0, 2), "0")
        self.assertEqual(to_base_string(255, 16), "ff")

if __name__ == '__main__':
    unittest.main()
