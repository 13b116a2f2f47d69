# common/formatting.py

"""
DISPLAY FORMATTING (es-CL)

Prices are Chilean pesos: no decimals, "." thousands separator, "$" prefix.
Dates are rendered in the store's timezone (America/Santiago).
"""

from __future__ import annotations

from datetime import date, datetime, timezone as dt_timezone
from decimal import ROUND_HALF_UP, Decimal
from zoneinfo import ZoneInfo

STORE_TZ = ZoneInfo("America/Santiago")

MONTHS_SHORT = [
    "ene", "feb", "mar", "abr", "may", "jun",
    "jul", "ago", "sept", "oct", "nov", "dic",
]

MONTHS_LONG = [
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
]


def format_price(amount) -> str:
    """
    Format an amount as CLP.

    Examples:
        50000     -> "$50.000"
        -10000    -> "-$10.000"
        50000.99  -> "$50.001"
    """
    value = Decimal(str(amount if amount not in (None, "") else 0))
    value = value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)

    sign = "-" if value < 0 else ""
    digits = f"{abs(int(value)):,}".replace(",", ".")
    return f"{sign}${digits}"


def format_date(value: date | datetime, *, month: str = "short", with_time: bool = False) -> str:
    """
    Format a date/datetime the way the storefront shows it.

    month:
    - "short"   -> "10 nov 2024"
    - "long"    -> "10 de noviembre de 2024"
    - "numeric" -> "10-11-2024"

    Naive datetimes are treated as UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=dt_timezone.utc)
        value = value.astimezone(STORE_TZ)

    if month == "short":
        text = f"{value.day} {MONTHS_SHORT[value.month - 1]} {value.year}"
    elif month == "long":
        text = f"{value.day} de {MONTHS_LONG[value.month - 1]} de {value.year}"
    elif month == "numeric":
        text = f"{value.day:02d}-{value.month:02d}-{value.year}"
    else:
        raise ValueError(f"Unsupported month style: {month}")

    if with_time and isinstance(value, datetime):
        text = f"{text}, {value:%H:%M}"

    return text


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
