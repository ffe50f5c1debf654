from __future__ import annotations

from typing import List

from vending import money
from vending.change import make_change
from vending.models import Denomination, Item
from vending.store import MachineState


class CannotMakeChange(Exception):
    def __init__(self, amount: int):
        super().__init__(f"cannot make change for {money.currency(amount)}")
        self.amount = amount


class ItemService:
    def __init__(self, state: MachineState):
        self.state = state

    def stock_item(self, selector: str, description: str, price: int, quantity: int) -> Item:
        if len(selector) != 1 or not selector.isupper():
            raise ValueError(f"Selector must be one uppercase letter, got {selector!r}")
        if quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {quantity}")

        item = self.state.items.get(selector)
        if item:
            item.quantity += quantity
            self.state.log(f"item restocked: {selector} +{quantity} (quantity={item.quantity})")
            return item

        if price <= 0:
            raise ValueError(f"price must be > 0, got {price}")
        item = Item(selector=selector, description=description, price=price, quantity=quantity)
        self.state.items[selector] = item
        self.state.log(f"item stocked: {selector} {description} {money.currency(price)} (quantity={quantity})")
        return item

    def dispense_item(self, txn: int, selector: str) -> None:
        item = self.state.items.get(selector)
        if not item:
            raise ValueError(f"Item {selector} not found")
        if item.quantity <= 0:
            raise ValueError(f"Item {selector} is sold out")
        item.quantity -= 1
        self.state.log(f"[txn={txn}] item dispensed: {selector} (quantity={item.quantity})")

    def restock_dispensed(self, txn: int, selector: str) -> None:
        item = self.state.items.get(selector)
        if not item:
            return
        item.quantity += 1
        self.state.log(f"[txn={txn}] item put back: {selector} (quantity={item.quantity})")


class PaymentService:
    def __init__(self, state: MachineState):
        self.state = state

    def insert_coin(self, denomination: Denomination) -> None:
        if not money.is_accepted(denomination):
            raise ValueError(f"Unsupported denomination: {denomination}")
        self.state.coins.add(denomination)
        self.state.inserted += denomination.cents
        self.state.log(
            f"coin inserted: {denomination.name} (inserted={money.currency(self.state.inserted)})"
        )

    def deduct(self, txn: int, amount: int) -> None:
        if self.state.inserted < amount:
            raise ValueError(
                f"Insufficient funds: have={money.currency(self.state.inserted)}, need={money.currency(amount)}"
            )
        self.state.inserted -= amount
        self.state.log(f"[txn={txn}] charged {money.currency(amount)} (inserted={money.currency(self.state.inserted)})")

    def refund(self, txn: int, amount: int) -> None:
        self.state.inserted += amount
        self.state.log(f"[txn={txn}] refunded {money.currency(amount)} (inserted={money.currency(self.state.inserted)})")


class CoinService:
    def __init__(self, state: MachineState):
        self.state = state

    def stock_coins(self, denomination: Denomination, quantity: int) -> None:
        if not money.is_accepted(denomination):
            raise ValueError(f"Unsupported denomination: {denomination}")
        self.state.coins.add(denomination, quantity)
        self.state.log(
            f"coins stocked: {denomination.name} +{quantity} (held={self.state.coins.count(denomination)})"
        )

    def return_inserted(self, txn: int) -> List[Denomination]:
        """
        Hand the whole inserted amount back as coins and zero it.

        Raises CannotMakeChange, leaving the state untouched, if the held
        coins cannot make the amount exactly.
        """
        owed = self.state.inserted
        coins = make_change(owed, self.state.coins)
        if coins is None:
            raise CannotMakeChange(owed)
        for coin in coins:
            self.state.coins.remove(coin)
        self.state.inserted = 0
        self.state.log(
            f"[txn={txn}] coins returned: {money.currency(owed)} as {''.join(c.code for c in coins) or '-'}"
        )
        return coins

    def take_back(self, txn: int, coins: List[Denomination]) -> None:
        amount = 0
        for coin in coins:
            self.state.coins.add(coin)
            amount += coin.cents
        self.state.inserted += amount
        self.state.log(f"[txn={txn}] coins taken back: {money.currency(amount)} (inserted={money.currency(self.state.inserted)})")
