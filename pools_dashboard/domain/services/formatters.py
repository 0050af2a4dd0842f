from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext
import math


PLACEHOLDER = "—"

_CENT = Decimal("0.01")
_FEE_TIER_SCALE = 10000
_COMPACT_STEPS = ((0, ""), (3, "K"), (6, "M"), (9, "B"), (12, "T"))
_SHORT_ID_HEAD = 8
_SHORT_ID_TAIL = 6


def _to_float(value) -> float | None:
    """Coerce a raw subgraph field to a finite float, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return None
    elif not isinstance(value, (int, float, Decimal)):
        return None
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _to_decimal(value) -> Decimal | None:
    number = _to_float(value)
    if number is None:
        return None
    # Shortest repr of the double, the digits a browser would display.
    return Decimal(repr(number))


def _round_cents(number: Decimal) -> Decimal:
    # Half away from zero; precision grows with the magnitude.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + 4)
        return number.quantize(_CENT, rounding=ROUND_HALF_UP)


def format_currency_usd(value) -> str:
    number = _to_decimal(value)
    if number is None:
        return PLACEHOLDER
    rounded = _round_cents(number)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def format_compact_volume(value) -> str:
    """Compact en-US notation (``1.23K``, ``1.5M``) with at most two decimals."""
    number = _to_decimal(value)
    if number is None:
        return PLACEHOLDER

    magnitude = abs(number)
    step = 0
    for index, (exponent, _suffix) in enumerate(_COMPACT_STEPS):
        if magnitude >= Decimal(10) ** exponent:
            step = index

    scaled = _round_cents(magnitude.scaleb(-_COMPACT_STEPS[step][0]))
    while scaled >= 1000 and step < len(_COMPACT_STEPS) - 1:
        step += 1
        scaled = _round_cents(magnitude.scaleb(-_COMPACT_STEPS[step][0]))

    text = f"{scaled:,.2f}" if scaled >= 10000 else f"{scaled:.2f}"
    text = text.rstrip("0").rstrip(".")
    sign = "-" if number < 0 and scaled != 0 else ""
    return f"{sign}{text}{_COMPACT_STEPS[step][1]}"


def format_fee_percent(fee_tier) -> str:
    tier = _to_float(fee_tier)
    if tier is None:
        return PLACEHOLDER
    # Exact binary value of the quotient, so ties round like Number.toFixed.
    percent = _round_cents(Decimal(tier / _FEE_TIER_SCALE))
    return f"{percent:.2f}%"


def format_short_id(pool_id: str) -> str:
    if not pool_id:
        return PLACEHOLDER
    if len(pool_id) <= _SHORT_ID_HEAD + _SHORT_ID_TAIL:
        return pool_id
    return f"{pool_id[:_SHORT_ID_HEAD]}…{pool_id[-_SHORT_ID_TAIL:]}"


def format_time_of_day(moment: datetime | None) -> str | None:
    if moment is None:
        return None
    return moment.strftime("%H:%M:%S")
