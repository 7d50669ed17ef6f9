"""Rules of the milking farm: buckets, feed, milking and selling at the market."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

BLACK_HOLE_CAPACITY = 2147483646
FLAT_PRICE = 3_000_000

_CAPACITIES = {1: 10, 2: 50, 3: 100, 4: 500, 5: 1000, 6: BLACK_HOLE_CAPACITY}
_YIELDS = {1: 1, 2: 2, 3: 5, 4: 10, 5: 50, 6: 100}

BUCKET_SPRITES = {
    1: "sprites/bucket.png",
    2: "sprites/bucket-rubber1.png",
    3: "sprites/bucket-firefighter2.png",
    4: "sprites/bucket-silver3.png",
    5: "sprites/bucket-gold4.png",
    6: "sprites/bucket-blackhole5.png",
}

FAREWELL = (
    "Вы звоните вашему риелтору.\n"
    "Вы готовы купить квартиру и покупаете её.\n"
    "Вы приезжаете в город и живёте долго и счастливо!\n"
    "Спасибо за игру <3!"
)


class FarmError(Exception):
    """Base class for refused farm actions."""


class BucketFullError(FarmError):
    """The bucket is full; milk was clamped to its capacity."""


class EmptyBucketError(FarmError):
    """There is no milk to sell."""


class InsufficientFundsError(FarmError):
    """Not enough money for the flat in town."""


def bucket_capacity(level: int) -> int:
    """Return how many litres a bucket of the given level holds."""
    try:
        return _CAPACITIES[level]
    except KeyError:
        raise ValueError(f"unknown bucket level: {level!r}") from None


def feed_yield(level: int) -> int:
    """Return how many litres one milking gives with the given feed level."""
    try:
        return _YIELDS[level]
    except KeyError:
        raise ValueError(f"unknown feed level: {level!r}") from None


def format_amount(value: float) -> str:
    """Format a number the way the game shows it: no trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class SaleOutcome(Enum):
    """How the milk sold at the market, with the price per litre."""

    NORMAL = (1, 1.0, "Молоко продалось нормально.\nВы продали его по цене 1 рубль за литр.")
    GREAT = (
        2,
        2.0,
        "Молоко продалось замечательно, разобрали мгновенно.\n"
        "Вы продали его по цене 2 рубля за литр.",
    )
    POOR = (3, 0.5, "Молоко продалось очень плохо.\nВы продали его по цене 0.5 рубля за литр.")

    def __init__(self, roll: int, price: float, description: str) -> None:
        self.roll = roll
        self.price = price
        self.description = description

    @classmethod
    def from_roll(cls, roll: int) -> SaleOutcome:
        for outcome in cls:
            if outcome.roll == roll:
                return outcome
        raise ValueError(f"no sale outcome for roll {roll!r}")


@dataclass(frozen=True)
class SaleResult:
    """What a trip to the market brought."""

    outcome: SaleOutcome
    hours: int
    litres: int
    earned: float

    @property
    def message(self) -> str:
        return f"Спустя {self.hours} часов на базаре...\n{self.outcome.description}"


@dataclass
class Farm:
    """State of one milkmaid's farm."""

    nickname: str = ""
    litres: int = 0
    money: float = 0.0
    bucket: int = 1
    feed: int = 1

    def __post_init__(self) -> None:
        bucket_capacity(self.bucket)
        feed_yield(self.feed)

    @property
    def capacity(self) -> int:
        return bucket_capacity(self.bucket)

    @property
    def yield_per_click(self) -> int:
        return feed_yield(self.feed)

    @property
    def bucket_sprite(self) -> str:
        return BUCKET_SPRITES[self.bucket]

    def equip(self, bucket: int, feed: int) -> None:
        """Switch to the given bucket and feed levels."""
        bucket_capacity(bucket)
        feed_yield(feed)
        self.bucket = bucket
        self.feed = feed

    def milk(self) -> int:
        """Milk the cow once and return the litres in the bucket.

        Raises BucketFullError once the bucket reaches its capacity; the
        milk is then clamped to the capacity.
        """
        capacity = self.capacity
        if self.litres < capacity:
            self.litres += self.yield_per_click
        if self.litres >= capacity:
            self.litres = capacity
            raise BucketFullError(
                "Ведро переполнено!\nПродайте молоко или купите ведро лучше."
            )
        return self.litres

    def sell(self, rng: random.Random | None = None) -> SaleResult:
        """Sell all milk at the market at a randomly chosen price."""
        if rng is None:
            rng = random.Random()
        outcome = SaleOutcome.from_roll(rng.randint(1, 3))
        hours = rng.randint(1, 10)
        if self.litres <= 0:
            self.litres = 0
            raise EmptyBucketError("Ведро пусто!\nВам нечего продать.")
        litres = self.litres
        earned = litres * outcome.price
        self.money += earned
        self.litres = 0
        return SaleResult(outcome=outcome, hours=hours, litres=litres, earned=earned)

    def buy_flat(self) -> float:
        """Buy the flat in town, ending the game; return the money left."""
        if self.money < FLAT_PRICE:
            raise InsufficientFundsError("У вас недостаточно средств на покупку квартиры!")
        self.money -= FLAT_PRICE
        return self.money

    def milk_label(self) -> str:
        if self.capacity == BLACK_HOLE_CAPACITY:
            return f"Молоко: {self.litres} литров"
        return f"Молоко: {self.litres}/{self.capacity} литров"

    def money_label(self) -> str:
        return f"Деньги: {format_amount(self.money)} рублей"