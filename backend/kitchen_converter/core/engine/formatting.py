"""Magnitude-adaptive result formatting."""

from __future__ import annotations

from kitchen_converter.core.engine.number_format import NumberFormat

# (lower bound on |value|, max fraction digits), checked top to bottom
FRACTION_DIGITS_BY_MAGNITUDE: tuple[tuple[float, int], ...] = (
    (1000.0, 0),
    (10.0, 2),
    (1.0, 3),
    (0.0, 4),
)


def fraction_digits_for(value: float) -> int:
    magnitude = abs(value)
    for lower, digits in FRACTION_DIGITS_BY_MAGNITUDE:
        if magnitude >= lower:
            return digits
    # NaN compares false against every bound
    return FRACTION_DIGITS_BY_MAGNITUDE[-1][1]


def format_result(value: float, number_format: NumberFormat) -> str:
    """Render a converted value, e.g. 1234.5 -> '1,235', 0.123456 -> '0.1235' (en_US)."""
    return number_format.format(value, fraction_digits_for(value))
