"""Exact battle statistics by enumerating both dice."""

from __future__ import annotations

import logging
from itertools import product

from landbattle.domain.aggregate import build_stats, record_outcomes
from landbattle.domain.battle import resolve_battle
from landbattle.domain.models import AggregateStats, BattleConfig
from landbattle.domain.ratio import battle_size
from landbattle.domain.rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)

# Leader-death dice are not enumerated.  Pinned to 1, a leader dies whenever a
# death roll is called for, so the exact leader-death probability is the
# probability that the threshold condition arises.
PINNED_LEADER_DEATH_ROLL = 1


def exact_stats(config: BattleConfig, rules: RulesConfig = DEFAULT_RULES) -> AggregateStats:
    """Statistics over all 36 equally likely (attacker, defender) roll pairs.

    Every probability is a multiple of 1/36 and means and standard deviations
    are population figures.
    """

    faces = range(1, rules.battle.die_sides + 1)
    outcomes = [
        resolve_battle(
            config,
            (attacker_roll, defender_roll, PINNED_LEADER_DEATH_ROLL, PINNED_LEADER_DEATH_ROLL),
            rules,
        )
        for attacker_roll, defender_roll in product(faces, faces)
    ]
    stats = build_stats(battle_size(config, rules), record_outcomes(config, outcomes))
    logger.debug(
        "exact stats %sv%s: attacker wins %.4f",
        config.attacker_size,
        config.defender_size,
        stats.attacker_win_probability,
    )
    return stats
