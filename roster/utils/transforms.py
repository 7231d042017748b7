"""Numeric rounding and formatting shared by the record and statistics writers."""

from decimal import Decimal, ROUND_HALF_UP
from typing import TypeAlias

Number: TypeAlias = int | float


def _quantum(places: int) -> Decimal:
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    return Decimal(1).scaleb(-places)


def to_half_up_decimal(value: Number, places: int, exact: bool = False) -> Decimal:
    """Round ``value`` to ``places`` decimals with midpoints going away from zero.

    With ``exact`` the float's full binary value is rounded, so ``2.675``
    (stored as 2.67499999...) gives ``2.67``. Without it the shortest decimal
    representation is rounded, so ``2.5`` and ``2.675`` both round up.
    ``round()`` would send exact midpoints to the even neighbour instead.
    """
    source = Decimal(float(value)) if exact else Decimal(str(float(value)))
    return source.quantize(_quantum(places), rounding=ROUND_HALF_UP)


def round_half_up(value: Number, places: int = 2) -> float:
    """Statistics rounding: half-up on the exact binary value of ``value``."""
    return float(to_half_up_decimal(value, places, exact=True))


def format_fixed(value: Number, places: int = 2) -> str:
    """Locale-free fixed-point rendering: ``.`` as separator, no grouping."""
    return f"{to_half_up_decimal(value, places):f}"
