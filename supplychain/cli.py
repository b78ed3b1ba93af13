"""Interactive command that runs the supply-chain simulation step by step."""

from __future__ import annotations

import argparse
import sys

from supplychain.factory import Factory
from supplychain.supplier import Supplier


def build_factory() -> Factory:
    """Create the demonstration factory with three suppliers of different rates."""
    factory = Factory([1, 2, 3])
    factory.add_supplier(Supplier([1], "A", 1))
    factory.add_supplier(Supplier([2], "B", 2))
    factory.add_supplier(Supplier([3], "C", 3))
    return factory


def main(argv: list[str] | None = None) -> int:
    """Advance the simulation once per empty input line; stop on anything else."""
    parser = argparse.ArgumentParser(
        prog="supplychain",
        description="Step through a factory supplied by three suppliers.",
    )
    parser.parse_args(argv)

    factory = build_factory()
    while True:
        factory.time_step()
        print(factory)
        print()
        print("Press Enter to Continue: ", end="", flush=True)
        if sys.stdin.readline() != "\n":
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())