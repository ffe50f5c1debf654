from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


@dataclass(frozen=True, slots=True)
class Denomination:
    cents: int
    name: str
    code: str


@dataclass(slots=True)
class Item:
    selector: str
    description: str
    price: int
    quantity: int

    @property
    def sold_out(self) -> bool:
        return self.quantity == 0


class PurchaseOutcome(Enum):
    DISPENSED = "dispensed"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    CANNOT_MAKE_CHANGE = "cannot_make_change"
    SOLD_OUT = "sold_out"
    UNKNOWN_SELECTOR = "unknown_selector"


class CoinReturnOutcome(Enum):
    RETURNED = "returned"
    NO_CHANGE_AVAILABLE = "no_change_available"


@dataclass(slots=True)
class PurchaseResult:
    """
    Outcome of one purchase attempt.

    `change` is only filled for DISPENSED, `shortfall` (cents) only for
    INSUFFICIENT_FUNDS.
    """

    outcome: PurchaseOutcome
    selector: str
    change: List[Denomination] = field(default_factory=list)
    shortfall: int = 0

    @property
    def ok(self) -> bool:
        return self.outcome is PurchaseOutcome.DISPENSED


@dataclass(slots=True)
class CoinReturnResult:
    outcome: CoinReturnOutcome
    coins: List[Denomination] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.outcome is CoinReturnOutcome.RETURNED
