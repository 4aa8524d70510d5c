"""Half-up rounding helpers"""
from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round a value half away from zero on its exact binary representation.

    The builtin round() uses banker's rounding, so round(2116.5) == 2116.
    Estimates are displayed with ties rounded up (2116.5 -> 2117,
    0.125 -> 0.13 at two places).
    """
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def round_to_int(value: float) -> int:
    """Round half-up to the nearest integer"""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))
