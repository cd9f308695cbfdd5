#!/usr/bin/python3
# -*- coding: UTF-8 -*-
# strategy.py — Target checks for a finished stone
# Pure functions only: no side effects, no I/O. Callers decide what a miss means.

from __future__ import annotations

from stonecutter import Stone

SEVEN_SEVEN: str = "seven-seven"
SIXTEEN: str = "sixteen"
STRATEGIES: tuple[str, ...] = (SEVEN_SEVEN, SIXTEEN)

# Short names from the in-game shorthand ("7/7", "97 stone" → 9+7 = 16)
ALIASES: dict[str, str] = {"77": SEVEN_SEVEN, "16": SIXTEEN}

SEVEN_SEVEN_MIN: int = 7    # Successes needed on each of A and B
SIXTEEN_TOTAL: int = 16     # Combined A + B successes
C_SUCCESS_CAP: int = 4      # C is the penalty slot: at most this many hits


def normalize_strategy(name: str) -> str:
    """Return the canonical strategy name for name or one of its aliases.

    Raises ValueError for anything else.
    """
    canonical = ALIASES.get(name, name)
    if canonical not in STRATEGIES:
        raise ValueError("Unknown strategy '{}'; expected one of {}".format(
            name, ", ".join(STRATEGIES + tuple(ALIASES))))
    return canonical


def check_seven_seven(a: int, b: int, c: int) -> bool:
    """At least seven hits on both A and B, and C kept to four or fewer."""
    return a >= SEVEN_SEVEN_MIN and b >= SEVEN_SEVEN_MIN and c <= C_SUCCESS_CAP


def check_sixteen(a: int, b: int, c: int) -> bool:
    """A + B reaching sixteen with C kept to four or fewer, except an even 8/8 split.

    8/8 meets the sum but is not a 9/7 (or better) stone, so it does not count.
    """
    if a + b < SIXTEEN_TOTAL or c > C_SUCCESS_CAP:
        return False
    return not (a == 8 and b == 8)


_CHECKS = {
    SEVEN_SEVEN: check_seven_seven,
    SIXTEEN: check_sixteen,
}


def is_success(stone: Stone, strategy: str) -> bool:
    """Return True if stone's success counts meet the named strategy's target."""
    check = _CHECKS[normalize_strategy(strategy)]
    return check(stone.successes("A"), stone.successes("B"), stone.successes("C"))
