"""Enumerations used by the land-battle rules."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class BattleSize(StrEnum):
    """Battle size tier selecting the CRT row set."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Ratio(IntEnum):
    """Force ratio buckets, ordered from weakest to strongest advantage."""

    LOW = 0
    THREE_TO_ONE = 1
    FOUR_TO_ONE = 2
    FIVE_TO_ONE_PLUS = 3
    TEN_TO_ONE_PLUS = 4


class Winner(StrEnum):
    """Side that won a resolved battle."""

    ATTACKER = "attacker"
    DEFENDER = "defender"
