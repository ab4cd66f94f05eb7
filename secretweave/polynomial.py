import random
import config
from secretweave.codec import to_base_string, to_decimal
from secretweave.entities import Point


def evaluate_polynomial(coefficients: list, x: int) -> int:
    """Evaluate polynomial at x (constant term first)"""
    result = 0
    for coefficient in reversed(coefficients):
        result = result * x + coefficient
    return result


def generate_coefficients(secret: int, threshold: int, bits: int = config.Config.COEFFICIENT_BITS) -> list:
    if secret < 0:
        raise ValueError("Secret must be non-negative")
    if threshold < 1:
        raise ValueError("Threshold must be at least 1")
    return [secret] + [random.randint(1, 2**bits - 1) for _ in range(threshold - 1)]


def split_secret(secret: int, threshold: int, num_shares: int, x_values=None, coefficients=None) -> list:
    """
    Splits a secret into points on a random integer polynomial of degree
    threshold-1. Unlike field-based sharing nothing is reduced modulo a prime,
    so the share values grow with the coefficients.
    """
    if threshold > num_shares:
        raise ValueError("Threshold cannot be greater than the number of shares.")
    if x_values is None:
        x_values = range(1, num_shares + 1)
    x_values = list(x_values)
    if len(x_values) != num_shares or len(set(x_values)) != num_shares:
        raise ValueError("Need one distinct x value per share")
    if any(x < 0 for x in x_values):
        raise ValueError("Share x values must be non-negative")

    if coefficients is None:
        coefficients = generate_coefficients(secret, threshold)
    return [Point(x, evaluate_polynomial(coefficients, x)) for x in x_values]


def build_record(points: list, threshold: int, bases=None) -> dict:
    """Encodes points as an input record, cycling through the given bases"""
    if bases is None:
        bases = config.Config.DEFAULT_BASES
    record = {config.Config.METADATA_KEY: {"n": len(points), "k": threshold}}
    for i, point in enumerate(points):
        base = bases[i % len(bases)]
        record[to_decimal(point.x)] = {
            "base": str(base),
            "value": to_base_string(point.y, base)
        }
    return record
