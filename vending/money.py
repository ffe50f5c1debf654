from __future__ import annotations

from decimal import Decimal
from typing import Dict, Optional, Tuple

from vending.models import Denomination

NICKEL = Denomination(cents=5, name="nickel", code="n")
DIME = Denomination(cents=10, name="dime", code="d")
QUARTER = Denomination(cents=25, name="quarter", code="q")
DOLLAR = Denomination(cents=100, name="dollar", code="1")

DENOMINATIONS: Tuple[Denomination, ...] = (NICKEL, DIME, QUARTER, DOLLAR)

_BY_CODE: Dict[str, Denomination] = {d.code: d for d in DENOMINATIONS}


def by_code(code: str) -> Optional[Denomination]:
    return _BY_CODE.get(code)


def is_accepted(denomination: Denomination) -> bool:
    return _BY_CODE.get(denomination.code) == denomination


def currency(cents: int) -> str:
    """Format cents as dollars with two decimals, e.g. 125 -> "$1.25"."""
    amount = (Decimal(cents) / Decimal(100)).quantize(Decimal("0.01"))
    return f"${amount}"


def describe(denomination: Denomination, quantity: int) -> str:
    name = denomination.name if quantity == 1 else f"{denomination.name}s"
    return f"{quantity} {name}"
