"""Text front end for the milking farm."""

from __future__ import annotations

import argparse
import random
import sys

from milkfarm.game import FAREWELL, FLAT_PRICE, Farm, FarmError

_HELP = (
    "Команды: milk (m) — подоить, sell (s) — продать на базаре, "
    f"city (c) — уехать жить в город: {FLAT_PRICE} рублей, "
    "status — состояние, quit (q) — выйти"
)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="milkfarm", description="MilkClicker | Ферма")
    parser.add_argument("--name", default="", help="имя доярки")
    parser.add_argument("--bucket", type=int, default=1, choices=range(1, 7))
    parser.add_argument("--feed", type=int, default=1, choices=range(1, 7))
    parser.add_argument("--seed", type=int, default=None)
    return parser


def _status(farm: Farm) -> None:
    print(farm.milk_label())
    print(farm.money_label())


def main(argv: list[str] | None = None) -> int:
    """Run the farm on standard input and output."""
    args = _parser().parse_args(argv)
    farm = Farm(nickname=args.name)
    farm.equip(args.bucket, args.feed)
    rng = random.Random(args.seed)

    print(f"Доярка: {farm.nickname}")
    _status(farm)
    print(_HELP)

    for line in sys.stdin:
        command = line.strip().lower()
        if not command:
            continue
        try:
            if command in ("milk", "m"):
                farm.milk()
                print(farm.milk_label())
            elif command in ("sell", "s"):
                result = farm.sell(rng)
                print(result.message)
                _status(farm)
            elif command in ("city", "c"):
                farm.buy_flat()
                print(farm.money_label())
                print(FAREWELL)
                return 0
            elif command == "status":
                _status(farm)
            elif command in ("quit", "q"):
                return 0
            else:
                print(_HELP)
        except FarmError as error:
            print(error)
            if command in ("milk", "m"):
                print(farm.milk_label())
    return 0