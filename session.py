#!/usr/bin/python3
# -*- coding: UTF-8 -*-
# session.py - Player-facing commands over one stone, plus the menu loop

from __future__ import annotations

import argparse
import random
from typing import Callable

import utility
from stonecutter import FAIL, SLOTS, SUCCESS, Display, Event, NullDisplay, Stone, TerminalDisplay
from autocut import MAX_ATTEMPTS, BatchResult, run_batch, simulate_stone
from strategy import SEVEN_SEVEN, SIXTEEN, is_success, normalize_strategy

STATUS_SUCCESS = "Success!"
STATUS_FAIL = "Failed"
STATUS_CAPPED = "Failed (exceeded {} attempts)"
STATUS_CANCELLED = "Stopped after {} attempts"


class Session(object):
    """The stone on the bench, its attempt counter, and the last run's status.

    Every command reports through display: events first, then the new board.
    """

    def __init__(self, rng=None, display: Display | None = None, max_attempts: int = MAX_ATTEMPTS):
        self.rng = rng
        self.display = display if display is not None else NullDisplay()
        self.max_attempts = max_attempts
        self.stone = Stone()
        self.attempts = 0
        self.status = ""
        self.outcome = ""       # "", success, fail, capped, cancelled

    def _report(self, events: list[Event]) -> None:
        self.display.show_events(events)
        self.display.show_state(self.stone)

    def cut(self, slot: str) -> bool:
        """Cut slot by hand. Returns False, changing nothing, if the slot is full."""
        outcome = self.stone.cut(slot, self.rng)
        if outcome is None:
            self._report([Event(type="cut_rejected", slot=slot, probability=self.stone.probability)])
            return False
        self._report([Event(type="cut", slot=slot, outcome=outcome, probability=self.stone.probability)])
        return True

    def reset(self) -> None:
        self.stone = Stone()
        self.attempts = 0
        self.status = ""
        self.outcome = ""
        self._report([Event(type="reset", probability=self.stone.probability)])

    def run_instant(self, strategy: str) -> bool:
        """Run one automated stone and keep it. Returns whether it hit the target."""
        strategy = normalize_strategy(strategy)
        self.stone = simulate_stone(strategy, self.rng)
        self.attempts += 1
        hit = is_success(self.stone, strategy)
        self.outcome = SUCCESS if hit else FAIL
        self.status = STATUS_SUCCESS if hit else STATUS_FAIL
        self._report([Event(type="run", strategy=strategy, outcome=self.outcome,
                            probability=self.stone.probability, value=self.attempts)])
        return hit

    def run_batch(self, strategy: str, should_stop: Callable[[], bool] | None = None) -> BatchResult:
        """Repeat automated stones until one hits; keep the stone the batch stopped on."""
        strategy = normalize_strategy(strategy)
        result = run_batch(strategy, max_attempts=self.max_attempts, rng=self.rng, should_stop=should_stop)
        self.apply_batch(strategy, result)
        return result

    def apply_batch(self, strategy: str, result: BatchResult) -> None:
        """Take over the stone and counters of a finished batch and report it."""
        strategy = normalize_strategy(strategy)
        self.stone = result.stone
        self.attempts = result.attempts
        if result.success:
            self.outcome = SUCCESS
            self.status = STATUS_SUCCESS
        elif result.cancelled:
            self.outcome = "cancelled"
            self.status = STATUS_CANCELLED.format(result.attempts)
        else:
            self.outcome = "capped"
            self.status = STATUS_CAPPED.format(result.max_attempts)
        self._report([Event(type="batch", strategy=strategy, outcome=self.outcome,
                            probability=self.stone.probability, value=result.attempts)])

    def get_state(self) -> dict:
        state = self.stone.snapshot()
        state.update({
            "attempts": self.attempts,
            "status": self.status,
            "outcome": self.outcome,
        })
        return state

    def play(self) -> None:
        """Menu loop on the terminal until the player picks Quit."""
        actions: dict[str, Callable[[], object]] = {}
        for slot in SLOTS:
            actions["Cut {}".format(slot)] = lambda slot=slot: self.cut(slot)
        actions["Auto 7/7"] = lambda: self.run_instant(SEVEN_SEVEN)
        actions["Repeat 7/7"] = lambda: self.run_batch(SEVEN_SEVEN)
        actions["Auto 16"] = lambda: self.run_instant(SIXTEEN)
        actions["Repeat 16"] = lambda: self.run_batch(SIXTEEN)
        actions["Reset"] = self.reset
        options = list(actions) + ["Quit"]

        self.display.show_state(self.stone)
        while True:
            choice = utility.userChoice(options)
            if choice == "Quit":
                break
            actions[choice]()
            self.display.show_info("Attempts: {}  {}".format(self.attempts, self.status))


def main():
    parser = argparse.ArgumentParser(description='Ability-stone cutting simulator')
    parser.add_argument('--seed', type=int, default=None, metavar='N',
                        help='seed the random source for a reproducible session')
    parser.add_argument('--max-attempts', type=int, default=MAX_ATTEMPTS, metavar='N',
                        help='cap on runs in a repeat batch (default: {})'.format(MAX_ATTEMPTS))
    parser.add_argument('--tui', action='store_true',
                        help='open the full-screen Textual interface instead of the menu')
    args = parser.parse_args()
    if args.max_attempts < 1:
        parser.error('--max-attempts must be at least 1')

    rng = random.Random(args.seed) if args.seed is not None else None
    if args.tui:
        from color_tui import ColorTUIDisplay, StoneCutterApp  # noqa: PLC0415
        display = ColorTUIDisplay()
        session = Session(rng=rng, display=display, max_attempts=args.max_attempts)
        StoneCutterApp(session=session, display=display).run()
    else:
        Session(rng=rng, display=TerminalDisplay(), max_attempts=args.max_attempts).play()


if __name__ == "__main__":
    main()
