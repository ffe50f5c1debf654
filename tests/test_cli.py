"""Tests for the text command shell."""
import io

import pytest

from vending.cli import CommandShell
from vending.money import QUARTER


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def shell(machine, out) -> CommandShell:
    return CommandShell(machine, out)


def _run(shell, *commands):
    for command in commands:
        assert shell.handle(command) is True


def test_change(shell, out):
    _run(shell, "change")
    assert out.getvalue() == "machine holds:\n5 nickels\n3 dimes\n4 quarters\n2 dollars\n"


def test_cr(shell, out):
    # $1.50 in, machine still holds quarters so it pays back with fewer coins
    _run(shell, "n", "d", "d", "q", "1", "cr")
    assert out.getvalue() == "1\nq\nq\n"


def test_help(shell, out):
    _run(shell, "help")
    assert out.getvalue().startswith("Commands are:")


def test_inserted(shell, out):
    _run(shell, "inserted")
    assert out.getvalue() == "amount inserted is $0.00\n"

    out.truncate(0)
    out.seek(0)
    _run(shell, "1", "q", "inserted")
    assert out.getvalue() == "amount inserted is $1.25\n"


def test_items(shell, out):
    _run(shell, "items")
    assert out.getvalue() == "A - 3 Juicy Fruit $0.65\nB - 2 Baked Lays $1.00\nC - 4 Pepsi $1.50\n"


def test_buy_with_insufficient_money(shell, out):
    _run(shell, "q", "q", "n", "A")
    assert out.getvalue() == "insert $0.10 more\n"


def test_buy_with_exact_change(shell, out):
    _run(shell, "q", "q", "d", "n", "A")
    assert out.getvalue() == "A\n"


def test_buy_with_excess_money(shell, out):
    _run(shell, "1", "1", "A")
    assert out.getvalue() == "1\nq\nd\nA\n"


def test_bad_change(empty_machine, out):
    empty_machine.stock_item("A", "Juicy Fruit", price=65, quantity=1)
    empty_machine.stock_coins(QUARTER, 1)
    shell = CommandShell(empty_machine, out)

    _run(shell, "q", "q", "q", "A")

    assert out.getvalue() == "use correct change\n"
    assert empty_machine.inserted_amount() == 75


def test_sold_out(empty_machine, out):
    empty_machine.stock_item("B", "Baked Lays", price=100, quantity=1)
    shell = CommandShell(empty_machine, out)

    _run(shell, "1", "B", "1", "B")

    assert out.getvalue() == "B\nsold out\n"


def test_unknown_commands(shell, out):
    _run(shell, "Z", "bogus", "")
    assert out.getvalue() == 'no such command "Z"\nno such command "bogus"\n'


def test_no_change_available(empty_machine, out):
    empty_machine.stock_coins(QUARTER, 1)
    empty_machine.state.inserted = 10
    _run(CommandShell(empty_machine, out), "cr")
    assert out.getvalue() == "no change available\n"


def test_run_stops_at_quit(shell, out, machine):
    shell.run(["q", "inserted", "quit", "q"])
    assert out.getvalue() == 'Enter commands such as "help".\namount inserted is $0.25\n'
    assert machine.inserted_amount() == 25
    assert shell.handle("exit") is False


def test_coin_codes_insert_coins(shell, out, machine):
    _run(shell, "n", "d", "q", "1", "N", "inserted")
    assert out.getvalue() == 'no such command "N"\namount inserted is $1.40\n'
    assert machine.inserted_amount() == 140
