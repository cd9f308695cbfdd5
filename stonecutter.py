#!/usr/bin/python3
# -*- coding: UTF-8 -*-
# stonecutter.py - Core stone model: slots, outcomes, success chance, and cuts

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

SLOTS: tuple[str, ...] = ("A", "B", "C")
SLOT_SIZE: int = 10             # Every slot takes exactly ten cuts

PROB_START: int = 75            # Success chance on a fresh stone, in percent
PROB_MIN: int = 25
PROB_MAX: int = 75
PROB_STEP: int = 10

SUCCESS = "success"
FAIL = "fail"
UNSET = "unset"                 # Only ever reported by Stone.row(), never stored


@dataclass(frozen=True)
class Counts:
    """Tally of one slot's history."""
    success: int
    fail: int
    length: int


def counts(history: list[str]) -> Counts:
    """Return success/fail/length counts for a slot history."""
    success = sum(1 for r in history if r == SUCCESS)
    fail = sum(1 for r in history if r == FAIL)
    return Counts(success=success, fail=fail, length=len(history))


def next_probability(probability: int, success: bool) -> int:
    """Step the success chance after one cut: down on a hit, up on a miss, clamped."""
    if success:
        return max(PROB_MIN, probability - PROB_STEP)
    return min(PROB_MAX, probability + PROB_STEP)


def roll(probability: int, rng=None) -> bool:
    """Draw once from [0, 100) and report whether it lands under probability.

    rng is anything with a random() method; defaults to the random module.
    """
    if rng is None:
        rng = random
    return rng.random() * 100 < probability


class Stone(object):
    """Three ten-cut slots plus the current success chance."""

    def __init__(self, probability: int = PROB_START):
        self.probability = probability
        self.slots: dict[str, list[str]] = {slot: [] for slot in SLOTS}

    def _check_slot(self, slot: str) -> None:
        if slot not in self.slots:
            raise ValueError("Unknown slot '{}'; expected one of {}".format(slot, ", ".join(SLOTS)))

    def history(self, slot: str) -> list[str]:
        self._check_slot(slot)
        return list(self.slots[slot])

    def counts(self, slot: str) -> Counts:
        self._check_slot(slot)
        return counts(self.slots[slot])

    def successes(self, slot: str) -> int:
        return self.counts(slot).success

    def is_full(self, slot: str) -> bool:
        self._check_slot(slot)
        return len(self.slots[slot]) >= SLOT_SIZE

    def can_cut(self, slot: str) -> bool:
        return not self.is_full(slot)

    def is_finished(self) -> bool:
        return all(self.is_full(slot) for slot in SLOTS)

    def cut(self, slot: str, rng=None) -> str | None:
        """Make one attempt on slot and return its outcome.

        A full slot rejects the cut: nothing is drawn, nothing changes, and
        None comes back.
        """
        if self.is_full(slot):
            return None
        hit = roll(self.probability, rng)
        outcome = SUCCESS if hit else FAIL
        self.slots[slot].append(outcome)
        self.probability = next_probability(self.probability, hit)
        return outcome

    def row(self, slot: str) -> list[str]:
        """Slot history padded out to SLOT_SIZE with UNSET."""
        history = self.history(slot)
        return history + [UNSET] * (SLOT_SIZE - len(history))

    def snapshot(self) -> dict:
        return {
            "probability": self.probability,
            "slots": {slot: self.history(slot) for slot in SLOTS},
            "successes": {slot: self.successes(slot) for slot in SLOTS},
        }

    def __str__(self):
        symbols = {SUCCESS: "◆", FAIL: "◇", UNSET: "·"}
        lines = ["Success chance: {}%".format(self.probability)]
        for slot in SLOTS:
            cells = "".join(symbols[r] for r in self.row(slot))
            lines.append("{}  {}  {:2d}".format(slot, cells, self.successes(slot)))
        return "\n".join(lines)


# ==== Events and displays ====

@dataclass
class Event:
    """One reportable thing that happened to the stone or the session."""
    type: str                       # cut | cut_rejected | reset | run | batch
    slot: str | None = None
    outcome: str | None = None      # success/fail for cuts; success/fail/capped/cancelled for runs
    probability: int | None = None  # success chance after the event
    strategy: str | None = None
    value: int | None = None        # attempt count for run/batch events
    message: str | None = None


def format_event(event: Event) -> str | None:
    """Convert an Event to a one-line message, or None if the event is silent."""
    t = event.type
    if t == "cut":
        verb = "succeeded" if event.outcome == SUCCESS else "failed"
        return f"Cut on {event.slot} {verb}; chance is now {event.probability}%."
    if t == "cut_rejected":
        return f"Slot {event.slot} is already full."
    if t == "reset":
        return "Stone reset."
    if t == "run":
        result = "reached" if event.outcome == SUCCESS else "missed"
        return f"Auto {event.strategy} {result} the target (attempt {event.value})."
    if t == "batch":
        if event.outcome == SUCCESS:
            return f"Repeat {event.strategy} hit the target after {event.value} attempts."
        if event.outcome == "cancelled":
            return f"Repeat {event.strategy} stopped after {event.value} attempts."
        return f"Repeat {event.strategy} gave up after {event.value} attempts."
    return None


class Display(ABC):
    """Where a session sends its events and board updates."""

    @abstractmethod
    def show_events(self, events: list[Event]) -> None: ...

    @abstractmethod
    def show_state(self, stone: Stone) -> None: ...

    def show_info(self, content: str) -> None:
        pass


class NullDisplay(Display):
    """Discards everything. The default for headless sessions."""

    def show_events(self, events: list[Event]) -> None:
        pass

    def show_state(self, stone: Stone) -> None:
        pass


class RecordingDisplay(Display):
    """Keeps every event and the last board it was shown."""

    def __init__(self) -> None:
        self.events: list[Event] = []
        self.last_state: dict | None = None
        self.info: list[str] = []

    def show_events(self, events: list[Event]) -> None:
        self.events.extend(events)

    def show_state(self, stone: Stone) -> None:
        self.last_state = stone.snapshot()

    def show_info(self, content: str) -> None:
        self.info.append(content)

    def types(self) -> list[str]:
        return [e.type for e in self.events]


class TerminalDisplay(Display):
    """Plain print() output for the menu loop and the autocut CLI."""

    def show_events(self, events: list[Event]) -> None:
        for event in events:
            text = format_event(event)
            if text is not None:
                print(text)

    def show_state(self, stone: Stone) -> None:
        print(stone)

    def show_info(self, content: str) -> None:
        print(content)
