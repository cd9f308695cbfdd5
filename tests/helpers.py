#!/usr/bin/python3
# -*- coding: UTF-8 -*-
# tests/helpers.py — Shared fixtures: scripted random sources and prebuilt stones

from stonecutter import FAIL, SLOT_SIZE, SUCCESS, Stone

HIT = 0.0       # rng.random() value that always lands under the success chance
MISS = 0.999    # ...and one that never does


class ScriptedRng:
    """Stand-in random source that hands out a fixed sequence of draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.values.pop(0)


def make_stone(a: int = 0, b: int = 0, c: int = 0, filled: tuple = (),
               probability: int = 75) -> Stone:
    """Stone with the given success counts; slots named in filled are padded to full with fails."""
    stone = Stone(probability)
    for slot, hits in (("A", a), ("B", b), ("C", c)):
        history = [SUCCESS] * hits
        if slot in filled:
            history += [FAIL] * (SLOT_SIZE - hits)
        stone.slots[slot] = history
    return stone


def full_stone(a: int, b: int, c: int) -> Stone:
    """Finished stone (every slot full) with the given success counts."""
    return make_stone(a, b, c, filled=("A", "B", "C"))
