import random

import pytest

from milkfarm.game import (
    BLACK_HOLE_CAPACITY,
    FLAT_PRICE,
    BucketFullError,
    EmptyBucketError,
    Farm,
    InsufficientFundsError,
    SaleOutcome,
    SaleResult,
    bucket_capacity,
    feed_yield,
)


class _Scripted:
    def __init__(self, *values):
        self._values = iter(values)

    def randint(self, low, high):
        value = next(self._values)
        assert low <= value <= high
        return value


@pytest.mark.parametrize(
    "level, litres",
    [(1, 10), (2, 50), (3, 100), (4, 500), (5, 1000), (6, 2147483646)],
)
def test_bucket_capacity(level, litres):
    assert bucket_capacity(level) == litres


@pytest.mark.parametrize(
    "level, litres", [(1, 1), (2, 2), (3, 5), (4, 10), (5, 50), (6, 100)]
)
def test_feed_yield(level, litres):
    assert feed_yield(level) == litres


@pytest.mark.parametrize("level", [0, 7, -1])
def test_unknown_levels_rejected(level):
    with pytest.raises(ValueError):
        bucket_capacity(level)
    with pytest.raises(ValueError):
        feed_yield(level)


def test_new_farm_labels():
    farm = Farm(nickname="Маша")
    assert farm.milk_label() == "Молоко: 0/10 литров"
    assert farm.money_label() == "Деньги: 0 рублей"


def test_milk_adds_feed_yield():
    farm = Farm()
    farm.equip(3, 2)
    first = farm.milk()
    second = farm.milk()
    assert first == feed_yield(2)
    assert second == 2 * feed_yield(2)
    assert farm.litres == second


def test_overflow_clamps_and_raises():
    farm = Farm()
    farm.equip(1, 6)
    with pytest.raises(BucketFullError):
        farm.milk()
    assert farm.litres == bucket_capacity(1)
    assert farm.milk_label() == "Молоко: 10/10 литров"


def test_full_bucket_stays_full():
    farm = Farm(litres=10)
    with pytest.raises(BucketFullError):
        farm.milk()
    assert farm.litres == farm.capacity


def test_black_hole_label_has_no_capacity():
    farm = Farm()
    farm.equip(6, 1)
    farm.milk()
    assert farm.capacity == BLACK_HOLE_CAPACITY
    assert "/" not in farm.milk_label()
    assert farm.milk_label().startswith("Молоко: ")


def test_equip_rejects_bad_level_without_change():
    farm = Farm()
    with pytest.raises(ValueError):
        farm.equip(9, 1)
    assert farm.bucket == 1
    assert farm.capacity == bucket_capacity(1)


def test_farm_rejects_bad_initial_level():
    with pytest.raises(ValueError):
        Farm(feed=0)


@pytest.mark.parametrize("outcome", list(SaleOutcome))
def test_sell_uses_outcome_price(outcome):
    farm = Farm(litres=8, money=4.0)
    result = farm.sell(_Scripted(outcome.roll, 7))
    assert result.outcome is outcome
    assert result.hours == 7
    assert result.litres == 8
    assert result.earned == 8 * outcome.price
    assert farm.money == 4.0 + result.earned
    assert farm.litres == 0


@pytest.mark.parametrize(
    "outcome, earned",
    [(SaleOutcome.NORMAL, 2.0), (SaleOutcome.GREAT, 4.0), (SaleOutcome.POOR, 1.0)],
)
def test_sale_prices(outcome, earned):
    farm = Farm(litres=2)
    result = farm.sell(_Scripted(outcome.roll, 1))
    assert result.earned == earned
    assert farm.money == earned


def test_sale_message_mentions_hours():
    result = SaleResult(SaleOutcome.GREAT, 3, 5, 10.0)
    assert result.message.startswith("Спустя 3 часов на базаре...\n")
    assert result.message.endswith("Вы продали его по цене 2 рубля за литр.")


def test_sell_empty_raises():
    farm = Farm()
    with pytest.raises(EmptyBucketError):
        farm.sell(_Scripted(1, 1))
    assert farm.money == 0


def test_sell_with_real_rng_in_range():
    farm = Farm(litres=4)
    result = farm.sell(random.Random(42))
    assert 1 <= result.hours <= 10
    assert result.outcome in set(SaleOutcome)
    assert farm.money == result.earned


def test_poor_sale_fractional_money_label():
    farm = Farm(litres=3)
    farm.sell(_Scripted(SaleOutcome.POOR.roll, 1))
    assert farm.money_label() == "Деньги: 1.5 рублей"


def test_buy_flat():
    farm = Farm(money=float(FLAT_PRICE))
    assert farm.buy_flat() == 0
    assert farm.money_label() == "Деньги: 0 рублей"


def test_buy_flat_without_money():
    farm = Farm(money=FLAT_PRICE - 1)
    with pytest.raises(InsufficientFundsError):
        farm.buy_flat()
    assert farm.money == FLAT_PRICE - 1