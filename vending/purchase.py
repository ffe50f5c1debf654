from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from vending.models import Denomination, Item, PurchaseOutcome, PurchaseResult
from vending.services import CannotMakeChange, CoinService, ItemService, PaymentService
from vending.store import MachineState


class PurchaseError(Exception):
    pass


class ChangeUnavailable(PurchaseError):
    pass


class Step(ABC):
    """One reversible piece of a purchase; the saga does the logging."""

    label = ""

    def __init__(self, state: MachineState, txn: int):
        self.state = state
        self.txn = txn

    @abstractmethod
    def apply(self) -> None: ...

    @abstractmethod
    def undo(self) -> None: ...


class DeductPrice(Step):
    label = "DeductPrice"

    def __init__(self, state: MachineState, txn: int, price: int):
        super().__init__(state, txn)
        self.price = price
        self.service = PaymentService(state)

    def apply(self) -> None:
        self.service.deduct(self.txn, self.price)

    def undo(self) -> None:
        self.service.refund(self.txn, self.price)


class ReturnChange(Step):
    """Pays out whatever is left of the inserted amount after the price."""

    label = "ReturnChange"

    def __init__(self, state: MachineState, txn: int):
        super().__init__(state, txn)
        self.service = CoinService(state)
        self.coins: List[Denomination] = []

    def apply(self) -> None:
        try:
            self.coins = self.service.return_inserted(self.txn)
        except CannotMakeChange as e:
            raise ChangeUnavailable(str(e)) from e

    def undo(self) -> None:
        self.service.take_back(self.txn, self.coins)
        self.coins = []


class DispenseItem(Step):
    label = "DispenseItem"

    def __init__(self, state: MachineState, txn: int, selector: str):
        super().__init__(state, txn)
        self.selector = selector
        self.service = ItemService(state)

    def apply(self) -> None:
        self.service.dispense_item(self.txn, self.selector)

    def undo(self) -> None:
        self.service.restock_dispensed(self.txn, self.selector)


class PurchaseSaga:
    """
    Runs a paid purchase as DeductPrice -> ReturnChange -> DispenseItem.

    If a step fails, every completed step is compensated in reverse order,
    so the inserted amount, coin counts and item quantity end up exactly as
    they were before the attempt.
    """

    def __init__(self, state: MachineState):
        self.state = state

    def execute(self, item: Item) -> PurchaseResult:
        txn = self.state.next_txn()
        self.state.log(f"[txn={txn}] PURCHASE START selector={item.selector} price={item.price} inserted={self.state.inserted}")

        change_step = ReturnChange(self.state, txn)
        steps: List[Step] = [
            DeductPrice(self.state, txn, item.price),
            change_step,
            DispenseItem(self.state, txn, item.selector),
        ]

        completed: List[Step] = []
        try:
            for step in steps:
                self._apply(txn, step)
                completed.append(step)
        except Exception as e:
            self.state.log(f"[txn={txn}] PURCHASE FAILED: {e}")
            self._roll_back(txn, completed)
            self.state.log(f"[txn={txn}] PURCHASE END (failed)")
            if isinstance(e, ChangeUnavailable):
                return PurchaseResult(outcome=PurchaseOutcome.CANNOT_MAKE_CHANGE, selector=item.selector)
            raise

        self.state.log(f"[txn={txn}] PURCHASE OK")
        return PurchaseResult(outcome=PurchaseOutcome.DISPENSED, selector=item.selector, change=change_step.coins)

    def _apply(self, txn: int, step: Step) -> None:
        self.state.log(f"[txn={txn}] STEP {step.label}")
        step.apply()
        self.state.log(f"[txn={txn}] STEP {step.label} OK")

    def _roll_back(self, txn: int, completed: List[Step]) -> None:
        # a failing undo must not stop the ones before it
        for step in reversed(completed):
            self.state.log(f"[txn={txn}] COMPENSATE {step.label}")
            try:
                step.undo()
            except Exception as comp_exc:
                self.state.log(f"[txn={txn}] COMPENSATION FAILED at {step.label}: {comp_exc}")
                continue
            self.state.log(f"[txn={txn}] COMPENSATE {step.label} OK")
