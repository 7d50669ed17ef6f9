# milkfarm

A small clicker game about a milkmaid on a farm, played in the terminal.
The game's texts are in Russian.

Milk the cow to fill your bucket, take the milk to the market and hope for
a good price, then save up 3,000,000 roubles to move to the city.

## Installing

```
pip install .
```

## Playing

```
milkfarm [--name NAME] [--bucket 1-6] [--feed 1-6] [--seed N]
```

- `--name` – the milkmaid's name, shown at the start.
- `--bucket` – bucket level, 1 to 6 (default 1).
- `--feed` – feed level, 1 to 6 (default 1).
- `--seed` – seed for the market's random prices and hours, for repeatable games.

The game reads one command per line from standard input:

| Command       | What it does                                      |
|---------------|---------------------------------------------------|
| `milk`, `m`   | milk the cow once                                 |
| `sell`, `s`   | sell all milk at the market                       |
| `city`, `c`   | buy the flat in the city for 3,000,000 and finish |
| `status`      | show milk and money                               |
| `quit`, `q`   | leave the game                                    |

Empty lines are ignored; any other input prints the list of commands.

Each milking adds litres to the bucket; how many depends on the feed level.
How much the bucket holds depends on its level:

| Level | Bucket capacity (litres) | Litres per milking |
|-------|--------------------------|--------------------|
| 1     | 10                       | 1                  |
| 2     | 50                       | 2                  |
| 3     | 100                      | 5                  |
| 4     | 500                      | 10                 |
| 5     | 1000                     | 50                 |
| 6     | 2147483646 (no limit shown) | 100             |

When the bucket reaches its capacity, the milk is capped at the capacity and
the game tells you the bucket is full; sell before milking again.

Selling takes a random number of hours (1 to 10) and gets one of three
prices, chosen at random:

| Outcome | Price per litre |
|---------|-----------------|
| normal  | 1               |
| great   | 2               |
| poor    | 0.5             |

You cannot sell an empty bucket, and you cannot buy the flat without
enough money.

## Using it as a library

The game rules live in `milkfarm.game`:

```python
import random
from milkfarm.game import Farm, BucketFullError

farm = Farm(nickname="Маша")
farm.equip(bucket=2, feed=3)   # 50-litre bucket, 5 litres per milking
try:
    while True:
        farm.milk()
except BucketFullError:
    pass

result = farm.sell(random.Random(42))
print(result.outcome, result.hours, result.litres, result.earned)
print(result.message)
print(farm.milk_label())
print(farm.money_label())
```

- `bucket_capacity(level)` and `feed_yield(level)` give the capacity and
  the litres per milking for levels 1 to 6, and raise `ValueError` for any
  other level.
- `Farm.milk()` returns the litres now in the bucket, or raises
  `BucketFullError` once the bucket is full.
- `Farm.sell(rng=None)` returns a `SaleResult` (`outcome`, `hours`,
  `litres`, `earned`, `message`); the outcome is a `SaleOutcome`
  (`NORMAL`, `GREAT`, `POOR`). It raises `EmptyBucketError` when there is
  nothing to sell.
- `Farm.buy_flat()` takes 3,000,000 from the money and returns what is
  left, or raises `InsufficientFundsError`.
- All three errors derive from `FarmError`.

## What it does not do

There is no graphical window and no shop inside the game: the money you
earn cannot be spent on upgrades while playing. Bucket and feed levels are
chosen with `--bucket` and `--feed` when the game starts, or with
`Farm.equip` from code. Nothing is saved between games.

## Running the tests

```
pip install .[test]
pytest
```