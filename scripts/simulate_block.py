#!/usr/bin/env python3
"""Simulate one block on a fresh runtime and print the resulting state.

Seeds alice with 100, then alice sends 30 to bob and 30 to charlie.
"""

from __future__ import annotations

import logging

from minichain import Runtime


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    runtime = Runtime()
    runtime.balances.set_balance("alice", 100)

    runtime.run_block([
        ("alice", "bob", 30),
        ("alice", "charlie", 30),
    ])

    print(runtime.to_json())


if __name__ == "__main__":
    main()
