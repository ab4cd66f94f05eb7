import random
import unittest
from fractions import Fraction
from secretweave.errors import InterpolationError
from secretweave.interpolation import interpolate_at_zero, lagrange_basis_at_zero
from secretweave.entities import Point
from secretweave.polynomial import evaluate_polynomial

class InterpolationTests(unittest.TestCase):
    def test_recovers_large_constant(self):
        """Constant terms well beyond 64 bits come back exactly"""
        rng = random.Random(42)
        for degree in range(0, 8):
            coefficients = [2**200 + rng.getrandbits(128)] + [rng.getrandbits(256) for _ in range(degree)]
            xs = rng.sample(range(1, 1000), degree + 1)
            points = [Point(x, evaluate_polynomial(coefficients, x)) for x in xs]
            self.assertEqual(interpolate_at_zero(points), coefficients[0])

    def test_single_point(self):
        self.assertEqual(interpolate_at_zero([Point(7, 123456789)]), 123456789)

    def test_fractional_terms_sum_exactly(self):
        """
        On f(x) = 5 + 3x through x = 1, 2, 4 two of the Lagrange terms are
        64/3 and 17/3; truncating each term would give 4 instead of 5.
        """
        points = [Point(1, 8), Point(2, 11), Point(4, 17)]
        self.assertEqual(lagrange_basis_at_zero([1, 2, 4], 0), Fraction(8, 3))
        self.assertEqual(interpolate_at_zero(points), 5)

    def test_basis_sums_to_one(self):
        xs = [3, 5, 11, 20]
        self.assertEqual(sum(lagrange_basis_at_zero(xs, i) for i in range(len(xs))), 1)

    def test_non_integral_constant_fails(self):
        """The line through (1, 1) and (3, 2) crosses zero at 1/2"""
        with self.assertRaises(InterpolationError):
            interpolate_at_zero([Point(1, 1), Point(3, 2)])

    def test_duplicate_x_fails(self):
        with self.assertRaises(InterpolationError) as ctx:
            interpolate_at_zero([Point(1, 5), Point(1, 9)])
        self.assertEqual(ctx.exception.x_values, [1])

    def test_empty_fails(self):
        with self.assertRaises(InterpolationError):
            interpolate_at_zero([])

    def test_floats_rejected(self):
        with self.assertRaises(TypeError):
            interpolate_at_zero([(1, 2.5), (2, 3)])

    def test_accepts_plain_tuples(self):
        self.assertEqual(interpolate_at_zero([(1, 4), (2, 7), (3, 12)]), 3)

if __name__ == '__main__':
    unittest.main()
