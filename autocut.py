#!/usr/bin/python3
# -*- coding: UTF-8 -*-
# autocut.py — Automated cutting: one full run, or repeated runs until a target hits
#
# Usage:
#   python autocut.py --strategy sixteen              # one automated run
#   python autocut.py --strategy 77 --batch           # repeat until 7/7 or 2000 runs
#   python autocut.py --strategy 16 --batch --seed 7  # reproducible batch

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import Callable

from stonecutter import Stone, TerminalDisplay
from bots import bot_for
from strategy import ALIASES, STRATEGIES, is_success, normalize_strategy

MAX_ATTEMPTS: int = 2000


@dataclass
class BatchResult:
    """How a batch ended: the stone it stopped on and how many runs it took."""
    stone: Stone
    attempts: int
    success: bool
    cancelled: bool = False
    max_attempts: int = MAX_ATTEMPTS

    @property
    def capped(self) -> bool:
        """True when every allowed run was spent without hitting the target."""
        return not self.success and not self.cancelled


def simulate_stone(strategy: str, rng=None) -> Stone:
    """Cut a fresh stone until every slot is full, following strategy's bot.

    Each pass fills exactly one cell, so a run ends after at most 30 cuts.
    """
    bot = bot_for(strategy)
    stone = Stone()
    while True:
        slot = bot.chooseSlot(stone)
        if slot is None:
            break
        stone.cut(slot, rng)
    return stone


def run_batch(
    strategy: str,
    max_attempts: int = MAX_ATTEMPTS,
    rng=None,
    should_stop: Callable[[], bool] | None = None,
) -> BatchResult:
    """Repeat simulate_stone until one meets strategy or max_attempts runs are spent.

    should_stop is polled after every miss; returning True ends the batch early
    with cancelled=True. At least one run always happens.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1, got {}".format(max_attempts))
    strategy = normalize_strategy(strategy)
    attempts = 0
    stone = None
    while attempts < max_attempts:
        attempts += 1
        stone = simulate_stone(strategy, rng)
        if is_success(stone, strategy):
            return BatchResult(stone=stone, attempts=attempts, success=True, max_attempts=max_attempts)
        if should_stop is not None and should_stop():
            return BatchResult(stone=stone, attempts=attempts, success=False,
                               cancelled=True, max_attempts=max_attempts)
    return BatchResult(stone=stone, attempts=attempts, success=False, max_attempts=max_attempts)


def main() -> None:
    from session import Session  # noqa: PLC0415

    parser = argparse.ArgumentParser(description="Automated ability-stone cutting")
    parser.add_argument("--strategy", required=True, choices=STRATEGIES + tuple(ALIASES),
                        help="target pattern to chase")
    parser.add_argument("--batch", action="store_true",
                        help="repeat runs until the target hits or --max-attempts is reached")
    parser.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS, metavar="N",
                        help="cap on runs in a batch (default: {})".format(MAX_ATTEMPTS))
    parser.add_argument("--seed", type=int, default=None, metavar="N",
                        help="seed the random source for a reproducible run")
    args = parser.parse_args()
    if args.max_attempts < 1:
        parser.error("--max-attempts must be at least 1")

    rng = random.Random(args.seed) if args.seed is not None else None
    session = Session(rng=rng, display=TerminalDisplay(), max_attempts=args.max_attempts)
    if args.batch:
        session.run_batch(args.strategy)
    else:
        session.run_instant(args.strategy)
    print("Attempts: {}".format(session.attempts))
    print(session.status)


if __name__ == "__main__":
    main()
