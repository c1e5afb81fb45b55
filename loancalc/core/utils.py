"""
Numeric parsing, rounding and currency display helpers.
"""
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

from loancalc.core.config import settings

Number = Union[int, float, Decimal]

CENT = Decimal("0.01")

# Plain ASCII decimal or scientific notation; no underscores, no Unicode digits
NUMBER_PATTERN = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def parse_number(raw: Optional[str]) -> Optional[float]:
    """
    Parses user text as a finite real number.
    Returns None for empty, non-numeric, NaN or infinite input. Only plain
    ASCII notation is accepted ("1_000" and full-width digits are rejected).
    """
    if raw is None:
        return None

    text = raw.strip()
    if not text or not NUMBER_PATTERN.match(text):
        return None

    try:
        value = float(text)
    except ValueError:
        return None

    if not math.isfinite(value):
        return None
    return value


def clean_numeric_input(raw: str) -> str:
    """
    Strips everything except digits, dots and commas, then turns the first
    comma into a decimal point.

    "$ 1.500,5" becomes "1.500.5", which validation then rejects.
    """
    return re.sub(r"[^\d.,]", "", raw).replace(",", ".", 1)


def round_half_up(value: Number, places: int = 2) -> Decimal:
    """Rounds half away from zero (ROUND_HALF_UP in Decimal semantics)."""
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def round_currency(value: Number) -> float:
    """Rounds a currency amount to cents and returns it as a float."""
    return float(round_half_up(value, 2))


def format_currency(
    value: Number,
    fraction_digits: Optional[int] = None,
    symbol: Optional[str] = None,
    thousands_separator: Optional[str] = None,
    decimal_separator: Optional[str] = None
) -> str:
    """
    Formats an amount for display using the configured currency conventions.
    Defaults render Chilean pesos: 1234567.8 -> "$1.234.568".
    """
    digits = settings.CURRENCY_FRACTION_DIGITS if fraction_digits is None else fraction_digits
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    thousands = settings.THOUSANDS_SEPARATOR if thousands_separator is None else thousands_separator
    decimal_sep = settings.DECIMAL_SEPARATOR if decimal_separator is None else decimal_separator

    rounded = round_half_up(value, digits)
    sign = "-" if rounded < 0 else ""

    # Format with placeholder separators, then swap in the configured ones
    body = f"{abs(rounded):,.{digits}f}"
    body = body.replace(",", "\x00").replace(".", decimal_sep).replace("\x00", thousands)

    return f"{sign}{symbol}{body}"
