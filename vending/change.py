"""
Change-making by depth-first search over the coins the machine holds.

The search always tries the largest denomination first and returns the
first combination it finds. That is usually, but not always, the one with
the fewest coins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Set, Tuple

from vending.models import Denomination
from vending.store import CoinInventory

logger = logging.getLogger(__name__)

SearchState = Tuple[int, Tuple[Tuple[int, int], ...]]


@dataclass(slots=True)
class _Frame:
    remaining: int
    coins: CoinInventory
    candidates: Iterator[Denomination] = field(init=False)

    def __post_init__(self) -> None:
        self.candidates = iter(self.coins.denominations())

    @property
    def state(self) -> SearchState:
        return (self.remaining, self.coins.key())


def make_change(amount: int, inventory: CoinInventory) -> Optional[List[Denomination]]:
    """
    Find coins from `inventory` summing exactly to `amount` cents.

    Returns the coins in the order they were picked (largest first), an
    empty list for 0, or None if the held coins cannot make the amount.
    `inventory` is never modified.

    The search keeps its own stack, one frame per coin picked, so the
    number of coins in the answer is not bounded by the interpreter's
    recursion limit.
    """
    if amount < 0:
        raise ValueError(f"amount must be >= 0, got {amount}")
    if amount == 0:
        return []

    dead_ends: Set[SearchState] = set()
    picked: List[Denomination] = []
    stack: List[_Frame] = [_Frame(amount, inventory.copy())]

    while stack:
        frame = stack[-1]
        denomination = next(frame.candidates, None)

        if denomination is None:
            # every coin tried from here, backtrack one level
            dead_ends.add(frame.state)
            stack.pop()
            if picked:
                picked.pop()
            continue

        if denomination.cents == frame.remaining:
            change = picked + [denomination]
            logger.debug("change for %d cents: %s", amount, "".join(d.code for d in change))
            return change

        if denomination.cents < frame.remaining:
            branch = frame.coins.copy()
            branch.remove(denomination)
            child = _Frame(frame.remaining - denomination.cents, branch)
            if child.state in dead_ends:
                continue
            picked.append(denomination)
            stack.append(child)

    logger.debug("no change for %d cents from %r", amount, inventory)
    return None
