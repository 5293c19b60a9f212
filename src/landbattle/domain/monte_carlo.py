"""Monte Carlo battle statistics.

A run draws ``2 ** trials_exponent`` trials.  All ``4 * trials`` die values
come from the injected source in one batch and are split into rows of four:
attacker roll, defender roll, attacker leader-death roll, defender
leader-death roll.  Resolution is pure, so each distinct row is resolved once
through :func:`resolve_battle` and the per-trial arrays are gathered from
those results before the vectorized reductions run.

Sampling error shrinks as ``1 / sqrt(trials)``; there is no convergence check.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from landbattle.domain.aggregate import build_stats, record_outcomes
from landbattle.domain.battle import resolve_battle
from landbattle.domain.models import BattleConfig, MonteCarloRun
from landbattle.domain.ratio import battle_size
from landbattle.domain.rules_config import DEFAULT_RULES, RulesConfig

if TYPE_CHECKING:
    from landbattle.interfaces.dice import IDieRollSource

logger = logging.getLogger(__name__)


def run_monte_carlo(
    config: BattleConfig,
    trials_exponent: int,
    dice: IDieRollSource,
    rules: RulesConfig = DEFAULT_RULES,
) -> MonteCarloRun:
    """Sample ``2 ** trials_exponent`` battles and aggregate them.

    Raises:
        ValueError: If the exponent is negative or above the configured
            maximum, or the source returns the wrong number of values or a
            value outside ``1..6``.
    """

    max_exponent = rules.monte_carlo.max_trials_exponent
    if not 0 <= trials_exponent <= max_exponent:
        raise ValueError(
            f"trials_exponent must be between 0 and {max_exponent}, got {trials_exponent}"
        )

    trials = 1 << trials_exponent
    per_trial = rules.battle.dice_per_battle
    rolls = np.asarray(dice.roll(per_trial * trials), dtype=np.int64)
    if rolls.shape != (per_trial * trials,):
        raise ValueError(
            f"die source returned {rolls.size} values, expected {per_trial * trials}"
        )
    sides = rules.battle.die_sides
    if rolls.min() < 1 or rolls.max() > sides:
        raise ValueError(f"die source returned values outside 1..{sides}")

    rows = rolls.reshape(trials, per_trial)
    # Base-`sides` code per row so identical rows share one resolution.
    weights = sides ** np.arange(per_trial - 1, -1, -1, dtype=np.int64)
    codes = (rows - 1) @ weights
    distinct, inverse = np.unique(codes, return_inverse=True)

    outcomes = [resolve_battle(config, _decode(code, per_trial, sides), rules) for code in distinct]
    per_trial_arrays = record_outcomes(config, outcomes).take(inverse.reshape(-1))

    logger.debug(
        "monte carlo %sv%s: %d trials, %d distinct dice rows",
        config.attacker_size,
        config.defender_size,
        trials,
        distinct.size,
    )
    return MonteCarloRun(
        trials=trials,
        stats=build_stats(battle_size(config, rules), per_trial_arrays),
    )


def _decode(code: int, width: int, sides: int) -> tuple[int, ...]:
    values = []
    remaining = int(code)
    for _ in range(width):
        remaining, digit = divmod(remaining, sides)
        values.append(digit + 1)
    return tuple(reversed(values))
