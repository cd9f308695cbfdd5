#!/usr/bin/python3
# -*- coding: UTF-8 -*-
# bots.py — Move heuristics for automated cutting
#
# Each bot is an ordered list of rules. A rule looks at the stone and the
# current success chance and either names a slot or returns None to pass the
# decision down the list. The low-chance dump into C runs before every
# strategy's own rules.

from __future__ import annotations

from typing import Callable

from stonecutter import Stone
from strategy import SEVEN_SEVEN, SIXTEEN, normalize_strategy

Rule = Callable[[Stone, int], "str | None"]

LOW_CHANCE: int = 45    # At or below this, cuts go to the penalty slot


def _dump_low_chance(stone: Stone, probability: int) -> str | None:
    """Spend poor odds on C, where a miss is what we want."""
    if probability <= LOW_CHANCE and stone.can_cut("C"):
        return "C"
    return None


def _c_when_a_and_b_full(stone: Stone, probability: int) -> str | None:
    # Callers have already ruled out a finished stone, so C has room here.
    if stone.is_full("A") and stone.is_full("B"):
        return "C"
    return None


def _b_when_a_full(stone: Stone, probability: int) -> str | None:
    return "B" if stone.is_full("A") else None


def _a_when_b_full(stone: Stone, probability: int) -> str | None:
    return "A" if stone.is_full("B") else None


def _fewer_successes(stone: Stone, probability: int) -> str | None:
    """Even out A and B: cut whichever is behind, A on a tie."""
    if stone.successes("B") < stone.successes("A"):
        return "B"
    return "A"


def _a_until_full(stone: Stone, probability: int) -> str | None:
    return "A" if stone.can_cut("A") else None


def _b_otherwise(stone: Stone, probability: int) -> str | None:
    return "B"


SHARED_RULES: tuple[Rule, ...] = (_dump_low_chance,)


class CutterBot(object):
    """Base bot: runs SHARED_RULES, then the strategy's RULES, first match wins."""

    RULES: tuple[Rule, ...] = ()

    def chooseSlot(self, stone: Stone, probability: int | None = None) -> str | None:
        """Return the slot to cut next, or None once every slot is full.

        probability defaults to the stone's own success chance.
        """
        if stone.is_finished():
            return None
        if probability is None:
            probability = stone.probability
        for rule in SHARED_RULES + self.RULES:
            slot = rule(stone, probability)
            if slot is not None:
                return slot
        return None


class SevenSevenBot(CutterBot):
    """Chases seven hits on both A and B by keeping them level."""

    RULES = (
        _c_when_a_and_b_full,
        _b_when_a_full,
        _a_when_b_full,
        _fewer_successes,
    )


class SixteenBot(CutterBot):
    """Chases sixteen combined hits by finishing A before starting B."""

    RULES = (
        _c_when_a_and_b_full,
        _a_until_full,
        _b_otherwise,
    )


BOTS: dict[str, type[CutterBot]] = {
    SEVEN_SEVEN: SevenSevenBot,
    SIXTEEN: SixteenBot,
}


def bot_for(strategy: str) -> CutterBot:
    """Return a bot for strategy (aliases accepted)."""
    return BOTS[normalize_strategy(strategy)]()


def next_move(probability: int, stone: Stone, strategy: str) -> str | None:
    """Functional form of CutterBot.chooseSlot for one-off decisions."""
    return bot_for(strategy).chooseSlot(stone, probability)
