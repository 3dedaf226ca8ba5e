"""Locale-aware decimal parsing and formatting.

The engine never touches locale data directly; it is handed a
``NumberFormat`` and calls ``parse`` / ``format`` on it. ``LocaleNumberFormat``
covers the decimal/grouping conventions the app ships with, and tests inject
fixed instances.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP
from functools import lru_cache
from typing import Optional, Protocol


class NumberFormat(Protocol):
    def parse(self, text: str) -> Optional[float]:
        """Return the number in ``text``, or None if it is not a valid decimal."""
        ...

    def format(self, value: float, max_fraction_digits: int) -> str:
        """Render ``value`` with at most ``max_fraction_digits`` decimals."""
        ...


# wide enough to quantize any finite float without InvalidOperation
_WIDE = Context(prec=400)


class UnknownLocaleError(ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Unsupported locale '{name}'. Supported: {', '.join(sorted(LOCALES))}"
        )


@lru_cache(maxsize=None)
def _amount_pattern(decimal_sep: str, group_sep: str) -> re.Pattern[str]:
    dec = re.escape(decimal_sep)
    grp = re.escape(group_sep)
    return re.compile(
        rf"^\s*(?P<sign>[+-]?)"
        rf"(?P<int>\d{{1,3}}(?:{grp}\d{{3}})+|\d*)"
        rf"(?:{dec}(?P<frac>\d*))?\s*$",
        re.ASCII,
    )


def _group_digits(digits: str, sep: str) -> str:
    head = len(digits) % 3 or 3
    parts = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return sep.join(parts)


@dataclass(frozen=True)
class LocaleNumberFormat:
    name: str
    decimal_separator: str
    group_separator: str

    def parse(self, text: str) -> Optional[float]:
        m = _amount_pattern(self.decimal_separator, self.group_separator).match(text)
        if m is None:
            return None
        int_part = m.group("int").replace(self.group_separator, "")
        frac_part = m.group("frac") or ""
        if not int_part and not frac_part:
            return None
        value = float(f"{m.group('sign')}{int_part or '0'}.{frac_part or '0'}")
        # a long enough digit string overflows to inf
        if not math.isfinite(value):
            return None
        return value

    def format(self, value: float, max_fraction_digits: int) -> str:
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "∞" if value > 0 else "-∞"

        quantum = Decimal(1).scaleb(-max_fraction_digits)
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_WIDE)
        if rounded.is_zero():
            return "0"

        text = format(rounded.copy_abs(), "f")
        int_part, _, frac_part = text.partition(".")
        frac_part = frac_part.rstrip("0")

        out = _group_digits(int_part, self.group_separator)
        if frac_part:
            out += self.decimal_separator + frac_part
        return "-" + out if rounded < 0 else out


LOCALES: dict[str, LocaleNumberFormat] = {
    fmt.name: fmt
    for fmt in (
        LocaleNumberFormat("en_US", ".", ","),
        LocaleNumberFormat("en_GB", ".", ","),
        LocaleNumberFormat("de_DE", ",", "."),
        LocaleNumberFormat("fr_FR", ",", "\u202f"),
        LocaleNumberFormat("es_ES", ",", "."),
        LocaleNumberFormat("it_IT", ",", "."),
        LocaleNumberFormat("de_CH", ".", "\u2019"),
    )
}


def get_number_format(name: str) -> LocaleNumberFormat:
    """Look up a locale preset; accepts 'en-US', 'en_us', 'EN_US'."""
    lang, _, region = name.strip().replace("-", "_").partition("_")
    key = f"{lang.lower()}_{region.upper()}" if region else lang.lower()
    try:
        return LOCALES[key]
    except KeyError:
        raise UnknownLocaleError(name) from None
