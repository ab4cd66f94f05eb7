import string
import config
from secretweave.errors import DecodeError

# Digit alphabet shared by every supported base; letters cover values 10-35
DIGITS = string.digits + string.ascii_lowercase
_DIGIT_VALUES = {char: value for value, char in enumerate(DIGITS)}


def digit_value(char: str):
    """Value of a single digit character, or None if it is not a digit"""
    # Only ASCII letters count; some non-ASCII letters lower-case to ASCII
    if not char.isascii():
        return None
    return _DIGIT_VALUES.get(char.lower())


def _check_base(base, digits=None):
    if isinstance(base, bool) or not isinstance(base, int):
        raise DecodeError(f"Base must be an integer, got {base!r}", digits=digits, base=base)
    if not config.Config.MIN_BASE <= base <= config.Config.MAX_BASE:
        raise DecodeError(
            f"Base {to_decimal(base)} is outside [{config.Config.MIN_BASE}, {config.Config.MAX_BASE}]",
            digits=digits,
            base=base
        )


def decode(digits: str, base: int) -> int:
    """
    Converts a digit string in the given base into an exact integer.

    Digits are read most significant first. Letters are accepted in either
    case; signs, prefixes, separators and whitespace are rejected.
    """
    _check_base(base, digits)
    if not isinstance(digits, str):
        raise DecodeError(f"Digits must be a string, got {type(digits).__name__}", base=base)
    if not digits:
        raise DecodeError("Cannot decode an empty digit string", digits=digits, base=base)

    result = 0
    for position, char in enumerate(digits):
        value = digit_value(char)
        if value is None or value >= base:
            raise DecodeError(
                f"Invalid digit {char!r} at position {position} for base {base} in {digits!r}",
                digits=digits,
                base=base,
                char=char,
                position=position
            )
        result = result * base + value
    return result


def to_base_string(value: int, base: int) -> str:
    """Encodes a non-negative integer as a lower-case digit string"""
    _check_base(base)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError("Negative values have no digit string representation")
    if value == 0:
        return "0"

    digits = []
    while value:
        value, remainder = divmod(value, base)
        digits.append(DIGITS[remainder])
    return "".join(reversed(digits))


def to_decimal(value: int) -> str:
    """
    Decimal text of any length. str(int) refuses very long values on recent
    interpreters, so secrets and coordinates go through the base encoder.
    """
    if value < 0:
        return "-" + to_base_string(-value, 10)
    return to_base_string(value, 10)


def parse_decimal(text: str) -> int:
    """Inverse of to_decimal, accepting one leading minus sign"""
    if isinstance(text, str) and text.startswith("-"):
        return -decode(text[1:], 10)
    return decode(text, 10)
