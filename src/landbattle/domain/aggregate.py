"""Per-trial recording and the statistics shared by both engines.

Outcomes are flattened into one array per quantity (0/1 indicators for
flags, step counts for casualties) so every statistic is a vectorized
reduction.  Casualties are the steps a side actually loses: the capped
damage, limited to the side's own size.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields

import numpy as np

from landbattle.domain import crt
from landbattle.domain.enums import BattleSize, Winner
from landbattle.domain.models import AggregateStats, BattleConfig, BattleOutcome, HitStats
from landbattle.utils.vectorized import (
    MAX_DISTRIBUTION_VALUE,
    distribution,
    mean_and_stddev,
    vector_sum,
)


@dataclass(frozen=True, slots=True)
class TrialArrays:
    """Flat per-trial arrays, all of the same length."""

    attacker_wins: np.ndarray
    defender_wins: np.ndarray
    star: np.ndarray
    overrun: np.ndarray
    attacker_leader_death: np.ndarray
    defender_leader_death: np.ndarray
    attacker_can_hold: np.ndarray
    attacker_can_continue: np.ndarray
    attacker_elite_loss: np.ndarray
    defender_elite_loss: np.ndarray
    hits_to_attacker: np.ndarray
    hits_to_defender: np.ndarray

    def __len__(self) -> int:
        return int(self.attacker_wins.size)

    def take(self, indices: np.ndarray) -> TrialArrays:
        """Gather rows by index into a new set of arrays."""

        return TrialArrays(
            **{f.name: getattr(self, f.name)[indices] for f in fields(self)}
        )


def record_outcomes(config: BattleConfig, outcomes: Sequence[BattleOutcome]) -> TrialArrays:
    """Flatten resolved battles into per-trial arrays."""

    count = len(outcomes)
    columns = {f.name: np.zeros(count, dtype=np.int64) for f in fields(TrialArrays)}

    for i, outcome in enumerate(outcomes):
        attacker_lost = min(outcome.damage_to_attacker, config.attacker_size)
        defender_lost = min(outcome.damage_to_defender, config.defender_size)
        attacker_won = outcome.winner == Winner.ATTACKER

        columns["attacker_wins"][i] = attacker_won
        columns["defender_wins"][i] = not attacker_won
        columns["star"][i] = outcome.star
        columns["overrun"][i] = outcome.overrun
        columns["attacker_leader_death"][i] = outcome.attacker_leader_death
        columns["defender_leader_death"][i] = outcome.defender_leader_death
        columns["attacker_can_hold"][i] = outcome.attacker_can_hold
        columns["attacker_can_continue"][i] = outcome.attacker_can_continue
        # Committed elites absorb the first step lost.
        columns["attacker_elite_loss"][i] = config.attacker_elites > 0 and attacker_lost > 0
        columns["defender_elite_loss"][i] = config.defender_elites > 0 and defender_lost > 0
        columns["hits_to_attacker"][i] = attacker_lost
        columns["hits_to_defender"][i] = defender_lost

    return TrialArrays(**columns)


def build_stats(size: BattleSize, trials: TrialArrays) -> AggregateStats:
    """Reduce per-trial arrays into an :class:`AggregateStats` record."""

    n = len(trials)
    if n == 0:
        raise ValueError("cannot aggregate an empty set of trials")

    def probability(indicator: np.ndarray) -> float:
        return vector_sum(indicator) / n

    maxima = crt.max_hits(size)
    top_to_defender = _top_bin(maxima.hits_to_defender, trials.hits_to_defender)
    top_to_attacker = _top_bin(maxima.hits_to_attacker, trials.hits_to_attacker)
    to_defender = mean_and_stddev(trials.hits_to_defender)
    to_attacker = mean_and_stddev(trials.hits_to_attacker)
    hit_stats = HitStats(
        mean_hits_to_defender=to_defender.mean,
        stddev_hits_to_defender=to_defender.stddev,
        mean_hits_to_attacker=to_attacker.mean,
        stddev_hits_to_attacker=to_attacker.stddev,
        hits_to_defender_distribution=dict(
            enumerate(distribution(trials.hits_to_defender, top_to_defender))
        ),
        hits_to_attacker_distribution=dict(
            enumerate(distribution(trials.hits_to_attacker, top_to_attacker))
        ),
    )

    return AggregateStats(
        battle_size=size,
        attacker_win_probability=probability(trials.attacker_wins),
        defender_win_probability=probability(trials.defender_wins),
        hit_stats=hit_stats,
        attacker_leader_death_probability=probability(trials.attacker_leader_death),
        defender_leader_death_probability=probability(trials.defender_leader_death),
        star_result_probability=probability(trials.star),
        attacker_elite_loss_probability=probability(trials.attacker_elite_loss),
        defender_elite_loss_probability=probability(trials.defender_elite_loss),
        attacker_hold_probability=probability(trials.attacker_can_hold),
        attacker_continue_probability=probability(trials.attacker_can_continue),
        overrun_probability=probability(trials.overrun),
    )


def _top_bin(table_max: int, hits: np.ndarray) -> int:
    # Overrun losses can exceed the CRT maximum for the tier.
    return min(max(table_max, int(hits.max())), MAX_DISTRIBUTION_VALUE)


def compare_stats(exact: AggregateStats, sampled: AggregateStats) -> dict[str, float]:
    """Absolute difference of every scalar statistic and distribution bin."""

    deviations: dict[str, float] = {}
    for name in (
        "attacker_win_probability",
        "defender_win_probability",
        "attacker_leader_death_probability",
        "defender_leader_death_probability",
        "star_result_probability",
        "attacker_elite_loss_probability",
        "defender_elite_loss_probability",
        "attacker_hold_probability",
        "attacker_continue_probability",
        "overrun_probability",
    ):
        deviations[name] = abs(getattr(exact, name) - getattr(sampled, name))

    exact_hits, sampled_hits = exact.hit_stats, sampled.hit_stats
    for name in (
        "mean_hits_to_defender",
        "stddev_hits_to_defender",
        "mean_hits_to_attacker",
        "stddev_hits_to_attacker",
    ):
        deviations[name] = abs(getattr(exact_hits, name) - getattr(sampled_hits, name))

    for side in ("defender", "attacker"):
        exact_dist = getattr(exact_hits, f"hits_to_{side}_distribution")
        sampled_dist = getattr(sampled_hits, f"hits_to_{side}_distribution")
        for hits, p in exact_dist.items():
            deviations[f"hits_to_{side}[{hits}]"] = abs(p - sampled_dist.get(hits, 0.0))

    return deviations
