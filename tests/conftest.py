"""Pytest fixtures for the vending machine."""

import pytest

from run_machine import seed
from vending.machine import VendingMachine


@pytest.fixture
def machine() -> VendingMachine:
    # A $0.65 / B $1.00 / C $1.50; 5 nickels, 3 dimes, 4 quarters, 2 dollars
    machine = VendingMachine()
    seed(machine)
    return machine


@pytest.fixture
def empty_machine() -> VendingMachine:
    return VendingMachine()
