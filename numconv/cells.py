"""
Cell-level numeric primitives for numconv.

Two separator conventions are recognised:

- **European**: dot as thousands separator, comma as decimal separator
  (e.g., "1.234,56", "€15.000,00").
- **English**: comma as thousands separator, dot as decimal separator
  (e.g., "1,234.56", "$15,000.00").

Every function here is total: it never raises on odd input and never
returns a fabricated number. Values that cannot be read as a number are
returned (or classified) as-is.
"""

from __future__ import annotations

import math
import re
from typing import Any

CURRENCY_SYMBOLS = "$€¥£"

_CURRENCY_AND_SPACE = re.compile(rf"[{re.escape(CURRENCY_SYMBOLS)}\s]")
_CURRENCY_SPACE_AND_SEPARATORS = re.compile(rf"[{re.escape(CURRENCY_SYMBOLS)},.\s]")

# What is left of a numeric-looking value once separators are removed
_BARE_NUMBER = re.compile(r"[+-]?[0-9]+(?:[eE][+-]?[0-9]+)?")

# A European decimal tail: the digits after the rightmost comma
_DECIMAL_TAIL = re.compile(r"[0-9]{1,3}")

# Plain English decimal after separator normalization, e.g. "-1234.56"
_PLAIN_DECIMAL = re.compile(r"(?P<sign>[+-]?)(?P<integer>[0-9]*)(?:\.(?P<fraction>[0-9]*))?")

# Zero-width positions followed by whole groups of three digits
_THOUSANDS = re.compile(r"\B(?=(?:[0-9]{3})+(?![0-9]))")


def strip_currency(value: str) -> str:
    """Remove currency symbols and all whitespace from *value*."""
    return _CURRENCY_AND_SPACE.sub("", value)


def is_numeric_value(value: Any) -> bool:
    """Check whether a cell looks numeric once separators are removed.

    Deliberately permissive: currency symbols, whitespace, commas and dots
    are all dropped before the check, so "1,234.56", "$1,234.56" and
    "€1.234,56" are all numeric. ``None`` and the empty string are not.
    """
    if value is None or value == "":
        return False
    cleaned = _CURRENCY_SPACE_AND_SEPARATORS.sub("", str(value))
    if not _BARE_NUMBER.fullmatch(cleaned):
        return False
    return math.isfinite(float(cleaned))


def _is_decimal_tail(tail: str) -> bool:
    return _DECIMAL_TAIL.fullmatch(tail) is not None


def is_european_format(value: Any) -> bool:
    """Detect whether a numeric-looking value uses European separators.

    The rightmost separator is taken as the decimal marker. A value is
    European when that marker is a comma followed by one to three digits:

    - comma after a dot ("1.234,56") -> European if the tail is 1-3 digits.
    - lone comma, no dot ("1234,56") -> same tail rule.
    - anything else (dot only, digits only) -> not European.

    The rule only counts digits, so "1,234" is read as European. Callers
    that care should look at the column as a whole (see ``numconv.detect``).
    """
    cleaned = strip_currency(str(value).strip())
    comma_idx = cleaned.rfind(",")
    dot_idx = cleaned.rfind(".")

    if comma_idx > dot_idx and comma_idx > 0:
        return _is_decimal_tail(cleaned[comma_idx + 1:])

    if comma_idx > -1 and dot_idx == -1:
        return _is_decimal_tail(cleaned[comma_idx + 1:])

    return False


def group_thousands(digits: str) -> str:
    """Insert comma thousands separators into a run of digits.

    Grouping runs right-to-left in threes; leading zeros are kept.

    >>> group_thousands("1234567")
    '1,234,567'
    """
    return _THOUSANDS.sub(",", digits)


def convert_european_to_english(value: str) -> str:
    """Rewrite a European-format number as an English-format string.

    Dots are dropped as thousands separators and the comma becomes the
    decimal point; the integer part is then regrouped with commas.

    Values that cannot be read as a European number (text, empty strings,
    more than one comma) are returned unchanged.

    Examples:
        "1.234,56"  -> "1,234.56"
        "1234,56"   -> "1,234.56"
        "€1.234,56" -> "1,234.56"
        "999,99"    -> "999.99"
        "abc"       -> "abc"
    """
    cleaned = strip_currency(str(value))
    if cleaned.count(",") > 1:
        return value

    standard = cleaned.replace(".", "").replace(",", ".", 1)
    match = _PLAIN_DECIMAL.fullmatch(standard)
    if match is None or not any(ch.isdigit() for ch in standard):
        return value

    integer = group_thousands(match.group("integer"))
    fraction = match.group("fraction")
    result = f"{match.group('sign')}{integer}"
    if fraction:
        result = f"{result}.{fraction}"
    return result
