from __future__ import annotations

import sys
from typing import Callable, Dict, Iterable, TextIO

from vending import money
from vending.machine import VendingMachine
from vending.models import PurchaseOutcome

HELP = """Commands are:
  help - show this help
  exit or quit - exit the application
  change - list change available
  items - list items available
  inserted - show amount inserted
  cr - coin return
  n - enter a nickel
  d - enter a dime
  q - enter a quarter
  1 - enter a dollar bill
  uppercase letter - buy item with that selector"""

EXIT_COMMANDS = ("exit", "quit")


class CommandShell:
    """Maps one-word text commands onto machine calls and prints the results."""

    def __init__(self, machine: VendingMachine, out: TextIO | None = None):
        self.machine = machine
        self.out = out or sys.stdout
        self.commands: Dict[str, Callable[[], None]] = {
            "help": self.help,
            "change": self.change,
            "items": self.items,
            "inserted": self.inserted,
            "cr": self.coin_return,
        }

    def _print(self, line: str) -> None:
        print(line, file=self.out)

    def handle(self, command: str) -> bool:
        """Run one command. Returns False when the shell should stop."""
        command = command.strip()
        if not command:
            return True
        if command in EXIT_COMMANDS:
            return False

        action = self.commands.get(command)
        coin = money.by_code(command)
        if action:
            action()
        elif coin:
            self.machine.insert_coin(coin)
        elif len(command) == 1 and command.isupper():
            self.purchase(command)
        else:
            self._print(f'no such command "{command}"')
        return True

    def run(self, lines: Iterable[str]) -> None:
        self._print('Enter commands such as "help".')
        for line in lines:
            if not self.handle(line):
                break

    def help(self) -> None:
        self._print(HELP)

    def change(self) -> None:
        self._print("machine holds:")
        for denomination, qty in self.machine.list_coin_inventory():
            self._print(money.describe(denomination, qty))

    def items(self) -> None:
        for item in self.machine.list_items():
            self._print(f"{item.selector} - {item.quantity} {item.description} {money.currency(item.price)}")

    def inserted(self) -> None:
        self._print(f"amount inserted is {money.currency(self.machine.inserted_amount())}")

    def coin_return(self) -> None:
        result = self.machine.coin_return()
        if not result.ok:
            self._print("no change available")
            return
        for coin in result.coins:
            self._print(coin.code)

    def purchase(self, selector: str) -> None:
        result = self.machine.purchase(selector)
        if result.outcome is PurchaseOutcome.DISPENSED:
            for coin in result.change:
                self._print(coin.code)
            self._print(selector)
        elif result.outcome is PurchaseOutcome.INSUFFICIENT_FUNDS:
            self._print(f"insert {money.currency(result.shortfall)} more")
        elif result.outcome is PurchaseOutcome.CANNOT_MAKE_CHANGE:
            self._print("use correct change")
        elif result.outcome is PurchaseOutcome.SOLD_OUT:
            self._print("sold out")
        else:
            self._print(f'no such command "{selector}"')
