"""Combat Results Table.

The per-tier columns below are the printed table: index 0-9 stands for a
modified die roll of 1 through "10 or more".  Lookups go through a dense
``[tier][attacker roll - 1][defender roll - 1]`` table that is materialised
once per process and is read-only afterwards.
"""

from __future__ import annotations

import threading
from types import MappingProxyType

import numpy as np

from landbattle.domain.enums import BattleSize
from landbattle.domain.models import CrtResult

TABLE_WIDTH = 10

# Attacker's modified roll -> hits inflicted on the defender.
HITS_TO_DEFENDER = MappingProxyType(
    {
        BattleSize.SMALL: (0, 0, 0, 1, 1, 1, 1, 1, 1, 1),
        BattleSize.MEDIUM: (0, 1, 1, 1, 1, 2, 2, 2, 2, 3),
        BattleSize.LARGE: (1, 2, 2, 3, 3, 3, 4, 4, 5, 5),
    }
)

# Defender's modified roll -> hits inflicted on the attacker.
HITS_TO_ATTACKER = MappingProxyType(
    {
        BattleSize.SMALL: (0, 1, 1, 1, 1, 1, 1, 1, 1, 2),
        BattleSize.MEDIUM: (1, 1, 1, 1, 1, 1, 2, 3, 3, 3),
        BattleSize.LARGE: (1, 2, 3, 3, 3, 4, 4, 4, 5, 6),
    }
)

TIER_INDEX = MappingProxyType({size: index for index, size in enumerate(BattleSize)})

_dense_table: np.ndarray | None = None
_dense_lock = threading.Lock()


def _build_dense_table() -> np.ndarray:
    table = np.zeros((len(BattleSize), TABLE_WIDTH, TABLE_WIDTH, 2), dtype=np.int8)
    for size, tier in TIER_INDEX.items():
        to_defender = np.asarray(HITS_TO_DEFENDER[size], dtype=np.int8)
        to_attacker = np.asarray(HITS_TO_ATTACKER[size], dtype=np.int8)
        table[tier, :, :, 0] = to_defender[:, np.newaxis]
        table[tier, :, :, 1] = to_attacker[np.newaxis, :]
    table.flags.writeable = False
    return table


def dense_table() -> np.ndarray:
    """Return the process-wide dense CRT, building it on first use."""

    global _dense_table
    table = _dense_table
    if table is None:
        with _dense_lock:
            if _dense_table is None:
                _dense_table = _build_dense_table()
            table = _dense_table
    return table


def clamp_roll(modified_roll: int) -> int:
    """Clamp a modified roll onto the table's 1..10+ columns."""

    return min(max(modified_roll, 1), TABLE_WIDTH)


def lookup(size: BattleSize, modified_attacker_roll: int, modified_defender_roll: int) -> CrtResult:
    """Read hits to each side for a pair of modified rolls."""

    row = dense_table()[
        TIER_INDEX[size],
        clamp_roll(modified_attacker_roll) - 1,
        clamp_roll(modified_defender_roll) - 1,
    ]
    return CrtResult(hits_to_defender=int(row[0]), hits_to_attacker=int(row[1]))


def max_hits(size: BattleSize) -> CrtResult:
    """Largest hit count each side can take from the table in this tier."""

    return CrtResult(
        hits_to_defender=max(HITS_TO_DEFENDER[size]),
        hits_to_attacker=max(HITS_TO_ATTACKER[size]),
    )
