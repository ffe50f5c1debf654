"""Tests for the change-making search."""
from collections import Counter

import pytest

from vending.change import make_change
from vending.money import DIME, DOLLAR, NICKEL, QUARTER
from vending.store import CoinInventory


@pytest.fixture
def full() -> CoinInventory:
    return CoinInventory({NICKEL: 5, DIME: 3, QUARTER: 4, DOLLAR: 2})


def test_zero_needs_no_coins(full):
    assert make_change(0, full) == []
    assert make_change(0, CoinInventory()) == []


def test_negative_amount_rejected(full):
    with pytest.raises(ValueError):
        make_change(-5, full)


def test_single_coin_match(full):
    assert make_change(100, full) == [DOLLAR]
    assert make_change(25, full) == [QUARTER]


def test_largest_coin_tried_first():
    coins = CoinInventory({NICKEL: 6, DIME: 5, QUARTER: 5, DOLLAR: 3})
    assert make_change(150, coins) == [DOLLAR, QUARTER, QUARTER]


def test_falls_back_to_smaller_coins_after_dead_end():
    # a quarter leaves 5 cents that no held coin can make
    coins = CoinInventory({QUARTER: 1, DIME: 3})
    assert make_change(30, coins) == [DIME, DIME, DIME]


def test_respects_coin_counts():
    coins = CoinInventory({DIME: 1, NICKEL: 10})
    change = make_change(40, coins)
    assert change == [DIME] + [NICKEL] * 6

    coins = CoinInventory({QUARTER: 3})
    assert make_change(100, coins) is None


def test_no_solution_is_repeatable_and_leaves_inventory_alone():
    coins = CoinInventory({QUARTER: 4})
    before = coins.copy()

    assert make_change(10, coins) is None
    assert make_change(10, coins) is None
    assert coins == before


def test_amount_below_smallest_coin(full):
    assert make_change(3, full) is None


def test_found_change_always_sums_and_fits(full):
    available = dict(full.items())
    for amount in range(5, 400, 5):
        change = make_change(amount, full)
        if change is None:
            continue
        assert sum(c.cents for c in change) == amount
        for denomination, used in Counter(change).items():
            assert used <= available[denomination]

    assert full == CoinInventory({NICKEL: 5, DIME: 3, QUARTER: 4, DOLLAR: 2})


def test_everything_held_is_reachable(full):
    assert make_change(full.total(), full) is not None
    assert make_change(full.total() + 5, full) is None


def test_change_needing_more_coins_than_recursion_limit():
    coins = CoinInventory({NICKEL: 1200})
    change = make_change(6000, coins)
    assert change == [NICKEL] * 1200
    assert coins.count(NICKEL) == 1200


def test_deep_search_without_solution():
    # descends through all 1200 nickels before giving up
    coins = CoinInventory({NICKEL: 1200})
    assert make_change(6005, coins) is None
    assert make_change(6003, coins) is None
