from __future__ import annotations

from dataclasses import replace
from typing import List, Tuple

from vending import money
from vending.models import (
    CoinReturnOutcome,
    CoinReturnResult,
    Denomination,
    Item,
    PurchaseOutcome,
    PurchaseResult,
)
from vending.purchase import PurchaseSaga
from vending.services import CannotMakeChange, CoinService, ItemService, PaymentService
from vending.store import MachineState


class VendingMachine:
    """
    Request/response front of one machine.

    Customer-facing conditions come back as result values; only invalid
    arguments (bad selector, unsupported coin, negative quantities) raise
    ValueError.
    """

    def __init__(self, state: MachineState | None = None):
        self.state = state or MachineState()
        self.items = ItemService(self.state)
        self.coins = CoinService(self.state)
        self.payments = PaymentService(self.state)

    # Stocking
    def stock_item(self, selector: str, description: str, price: int, quantity: int) -> None:
        self.items.stock_item(selector, description, price, quantity)

    def stock_coins(self, denomination: Denomination, quantity: int) -> None:
        self.coins.stock_coins(denomination, quantity)

    # Customer operations
    def insert_coin(self, denomination: Denomination) -> None:
        self.payments.insert_coin(denomination)

    def coin_return(self) -> CoinReturnResult:
        txn = self.state.next_txn()
        try:
            coins = self.coins.return_inserted(txn)
        except CannotMakeChange as e:
            self.state.log(f"[txn={txn}] coin return refused: {e}")
            return CoinReturnResult(outcome=CoinReturnOutcome.NO_CHANGE_AVAILABLE)
        return CoinReturnResult(outcome=CoinReturnOutcome.RETURNED, coins=coins)

    def purchase(self, selector: str) -> PurchaseResult:
        item = self.state.items.get(selector)
        if not item:
            self.state.log(f"purchase refused: no item {selector}")
            return PurchaseResult(outcome=PurchaseOutcome.UNKNOWN_SELECTOR, selector=selector)
        if item.sold_out:
            self.state.log(f"purchase refused: {selector} sold out")
            return PurchaseResult(outcome=PurchaseOutcome.SOLD_OUT, selector=selector)

        excess = self.state.inserted - item.price
        if excess < 0:
            self.state.log(f"purchase refused: {selector} needs {money.currency(-excess)} more")
            return PurchaseResult(outcome=PurchaseOutcome.INSUFFICIENT_FUNDS, selector=selector, shortfall=-excess)

        return PurchaseSaga(self.state).execute(item)

    # Queries
    def list_items(self) -> List[Item]:
        return [replace(item) for item in self.state.items.values()]

    def list_coin_inventory(self) -> List[Tuple[Denomination, int]]:
        return self.state.coins.items()

    def inserted_amount(self) -> int:
        return self.state.inserted
