from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Tuple

from vending.models import Denomination, Item

logger = logging.getLogger(__name__)


class CoinInventory:
    """
    Coins held by the machine, denomination -> count.

    Missing denominations count as 0 and a count that drops to 0 removes the
    entry, so only coins actually held are ever listed or offered as change.
    Iteration order is the order denominations were first stocked.
    """

    def __init__(self, counts: Dict[Denomination, int] | None = None) -> None:
        self._counts: Dict[Denomination, int] = {}
        for denomination, qty in (counts or {}).items():
            self.add(denomination, qty)

    def count(self, denomination: Denomination) -> int:
        return self._counts.get(denomination, 0)

    def add(self, denomination: Denomination, qty: int = 1) -> None:
        if qty < 0:
            raise ValueError(f"qty must be >= 0, got {qty}")
        if qty == 0:
            return
        self._counts[denomination] = self.count(denomination) + qty

    def remove(self, denomination: Denomination, qty: int = 1) -> None:
        have = self.count(denomination)
        if qty < 0:
            raise ValueError(f"qty must be >= 0, got {qty}")
        if have < qty:
            raise ValueError(f"Not enough {denomination.name} coins: have={have}, need={qty}")
        if have == qty:
            self._counts.pop(denomination, None)
        else:
            self._counts[denomination] = have - qty

    def copy(self) -> CoinInventory:
        clone = CoinInventory()
        clone._counts = dict(self._counts)
        return clone

    def denominations(self) -> List[Denomination]:
        """Denominations currently held, largest value first."""
        return sorted(self._counts, key=lambda d: d.cents, reverse=True)

    def items(self) -> List[Tuple[Denomination, int]]:
        return list(self._counts.items())

    def total(self) -> int:
        return sum(d.cents * qty for d, qty in self._counts.items())

    def key(self) -> Tuple[Tuple[int, int], ...]:
        """Order-independent hashable view of the counts."""
        return tuple(sorted((d.cents, qty) for d, qty in self._counts.items()))

    def __iter__(self) -> Iterator[Denomination]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoinInventory):
            return NotImplemented
        return self._counts == other._counts

    def __repr__(self) -> str:
        inner = ", ".join(f"{d.name}={qty}" for d, qty in self._counts.items())
        return f"CoinInventory({inner})"


class MachineState:
    """
    In-memory state of one machine.

    Only current resources are kept (items, coins, the running inserted
    amount) plus a list of log lines for demos and tests. There is no
    transaction history beyond those lines.
    """

    def __init__(self) -> None:
        self.items: Dict[str, Item] = {}
        self.coins = CoinInventory()
        self.inserted = 0

        self.logs: List[str] = []
        self._txn = 0

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    def next_txn(self) -> int:
        self._txn += 1
        return self._txn
