from collections import Counter
from fractions import Fraction
from secretweave.codec import to_decimal
from secretweave.errors import InterpolationError


def _check_points(points):
    if not points:
        raise InterpolationError("Cannot interpolate an empty point set")

    for x, y in points:
        for coordinate in (x, y):
            if isinstance(coordinate, bool) or not isinstance(coordinate, int):
                raise TypeError(f"Coordinates must be integers, got {coordinate!r}")

    counts = Counter(x for x, _ in points)
    duplicates = sorted(x for x, count in counts.items() if count > 1)
    if duplicates:
        raise InterpolationError(
            f"Duplicate x-coordinates: {', '.join(to_decimal(x) for x in duplicates)}",
            x_values=duplicates
        )


def lagrange_basis_at_zero(x_values: list, index: int) -> Fraction:
    """Value at x=0 of the Lagrange basis polynomial for x_values[index]"""
    x_i = x_values[index]
    numerator = 1
    denominator = 1
    for m, x_m in enumerate(x_values):
        if m != index:
            numerator *= -x_m
            denominator *= x_i - x_m
    return Fraction(numerator, denominator)


def interpolate_at_zero(points) -> int:
    """
    Evaluates the interpolating polynomial through points at x=0.

    Each Lagrange term is kept as an exact rational. Individual terms need not
    be integers; only their sum must be, and that is checked rather than
    assumed.
    """
    points = list(points)
    _check_points(points)

    x_values = [x for x, _ in points]
    secret = Fraction(0)
    for j, (_, y_j) in enumerate(points):
        secret += y_j * lagrange_basis_at_zero(x_values, j)

    if secret.denominator != 1:
        raise InterpolationError(
            "Points do not lie on an integer polynomial: constant term is "
            f"{to_decimal(secret.numerator)}/{to_decimal(secret.denominator)}",
            x_values=x_values
        )
    return secret.numerator
