"""
Value parser: normalizes ints, floats, Decimals and numeric strings into a
NumericValue.

Supported inputs:
    1234                → (False, 1234, None)
    -12.6               → (True, 12, "6")
    "  007.050 "        → (False, 7, "050")
    Decimal("1E+3")     → (False, 1000, None)
    10 ** 40            → (False, 10000000000000000000000000000000000000000, None)

Floats are read through their shortest repr, so the decimal digits are the
ones Python prints, not the full binary expansion. Pass a string or a Decimal
when every digit matters.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

from .exceptions import InvalidNumberFormat, NumberOutOfRange, UnsupportedInputType
from .models import NumericValue

DEFAULT_MAX_DIGITS = 1000

_NUMBER_PATTERN = re.compile(r"(-)?([0-9]+)(?:\.([0-9]+))?")


def parse_value(value: object, *, max_digits: int = DEFAULT_MAX_DIGITS) -> NumericValue:
    """Parse a caller-supplied value into its canonical parts.

    Raises:
        UnsupportedInputType: For anything that is not an int, float, Decimal or str
            (bool included, even though it subclasses int).
        InvalidNumberFormat: For malformed strings, NaN and infinities.
        NumberOutOfRange: When the integer or decimal part exceeds ``max_digits``.
    """
    if isinstance(value, bool):
        raise UnsupportedInputType(
            "Booleans are not numbers", {"type": "bool", "value": value}
        )
    if isinstance(value, int):
        return _parse_int(value, max_digits)
    if isinstance(value, float):
        return _parse_float(value, max_digits)
    if isinstance(value, Decimal):
        return _parse_decimal(value, max_digits)
    if isinstance(value, str):
        return _parse_string(value, max_digits)
    raise UnsupportedInputType(
        f"Cannot convert a value of type {type(value).__name__}",
        {"type": type(value).__name__},
    )


# ─── Per-type Readers ────────────────────────────────────────────────


def _parse_int(value: int, max_digits: int) -> NumericValue:
    magnitude = abs(value)
    if magnitude >= 10**max_digits:
        raise NumberOutOfRange(
            f"Integer has more than {max_digits} digits", {"max_digits": max_digits}
        )
    return NumericValue(is_negative=value < 0, integer_part=magnitude)


def _parse_float(value: float, max_digits: int) -> NumericValue:
    if math.isnan(value):
        raise InvalidNumberFormat("NaN is not a number", {"value": "nan"})
    if math.isinf(value):
        raise InvalidNumberFormat("Infinity cannot be spoken", {"value": repr(value)})
    if value.is_integer():
        return _parse_int(int(value), max_digits)
    # repr gives the shortest round-tripping digits; Decimal expands any exponent
    return _parse_string(format(Decimal(repr(value)), "f"), max_digits)


def _parse_decimal(value: Decimal, max_digits: int) -> NumericValue:
    if not value.is_finite():
        raise InvalidNumberFormat(f"{value} is not a finite number", {"value": str(value)})
    exponent = value.as_tuple().exponent
    if value.adjusted() >= max_digits or (isinstance(exponent, int) and -exponent > max_digits):
        raise NumberOutOfRange(
            f"Decimal has more than {max_digits} digits", {"max_digits": max_digits}
        )
    return _parse_string(format(value, "f"), max_digits)


def _parse_string(value: str, max_digits: int) -> NumericValue:
    text = value.strip()
    match = _NUMBER_PATTERN.fullmatch(text)
    if match is None:
        raise InvalidNumberFormat(f"Not a number: {value!r}", {"value": value})

    sign, integer_digits, decimal_digits = match.groups()
    integer_digits = integer_digits.lstrip("0")
    if len(integer_digits) > max_digits or len(decimal_digits or "") > max_digits:
        raise NumberOutOfRange(
            f"Number has more than {max_digits} digits", {"max_digits": max_digits}
        )

    return NumericValue(
        is_negative=sign is not None,
        integer_part=int(integer_digits or "0"),
        decimal_digits=decimal_digits,
    )
