from __future__ import annotations

import argparse
import logging
from typing import Iterator

from vending import money
from vending.cli import CommandShell
from vending.machine import VendingMachine


def seed(machine: VendingMachine) -> None:
    machine.stock_item("A", "Juicy Fruit", price=65, quantity=3)
    machine.stock_item("B", "Baked Lays", price=100, quantity=2)
    machine.stock_item("C", "Pepsi", price=150, quantity=4)

    machine.stock_coins(money.NICKEL, 5)
    machine.stock_coins(money.DIME, 3)
    machine.stock_coins(money.QUARTER, 4)
    machine.stock_coins(money.DOLLAR, 2)


def prompted_lines(prompt: str = "> ") -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def main() -> None:
    p = argparse.ArgumentParser(description="Interactive vending machine.")
    p.add_argument("--log-level", type=str, default="WARNING", help="Уровень логов, например INFO или DEBUG")
    p.add_argument("--empty", action="store_true", help="Начать без товаров и монет")
    args = p.parse_args()

    # простые логи без префиксов, чтобы не мешать выводу команд
    logging.basicConfig(level=args.log_level.upper(), format="%(message)s")

    machine = VendingMachine()
    if not args.empty:
        seed(machine)

    CommandShell(machine).run(prompted_lines())


if __name__ == "__main__":
    main()
