"""Battle Statistics Service for landbattle.

This module wires the rules layer to settings and a die-roll source so
callers can ask for single resolutions, exact odds, Monte Carlo odds, or a
comparison of the two.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from landbattle.config import Settings, get_settings
from landbattle.domain.aggregate import compare_stats
from landbattle.domain.battle import resolve_battle
from landbattle.domain.exact import exact_stats
from landbattle.domain.models import (
    AggregateStats,
    BattleConfig,
    BattleOutcome,
    MonteCarloRun,
    StatsComparison,
)
from landbattle.domain.monte_carlo import run_monte_carlo
from landbattle.domain.rules_config import DEFAULT_RULES, RulesConfig
from landbattle.interfaces.dice import IDieRollSource
from landbattle.utils.rng import SeededDieRolls

logger = logging.getLogger(__name__)


class BattleStatsService:
    """Service answering odds questions about land battles."""

    def __init__(
        self,
        dice: IDieRollSource,
        *,
        settings: Settings | None = None,
        rules: RulesConfig = DEFAULT_RULES,
    ) -> None:
        self.dice = dice
        self.settings = settings or get_settings()
        self.rules = rules

    def resolve(self, config: BattleConfig, dice: Sequence[int]) -> BattleOutcome:
        """Resolve a single battle from four supplied die values."""

        return resolve_battle(config, dice, self.rules)

    def exact(self, config: BattleConfig) -> AggregateStats:
        """Exact statistics from enumerating every two-die outcome."""

        return exact_stats(config, self.rules)

    def monte_carlo(
        self,
        config: BattleConfig,
        trials_exponent: int | None = None,
        *,
        seed: str | None = None,
    ) -> MonteCarloRun:
        """Sampled statistics over ``2 ** trials_exponent`` trials.

        Args:
            config: Battle to simulate
            trials_exponent: Power-of-two exponent; ``Settings.default_trials_exponent``
                when omitted
            seed: Seed for a dedicated, reproducible die source; the shared
                source is used when omitted

        Returns:
            Trial count and aggregate statistics

        Raises:
            ValueError: If the exponent exceeds ``Settings.max_trials_exponent``
        """
        exponent = self._resolve_exponent(trials_exponent)
        dice = SeededDieRolls(seed) if seed is not None else self.dice
        run = run_monte_carlo(config, exponent, dice, self.rules)
        logger.info(
            "monte carlo %sv%s over %d trials: attacker wins %.4f",
            config.attacker_size,
            config.defender_size,
            run.trials,
            run.stats.attacker_win_probability,
        )
        return run

    def compare(
        self, config: BattleConfig, trials_exponent: int | None = None
    ) -> StatsComparison:
        """Exact and Monte Carlo statistics side by side with their deviations."""

        exact = self.exact(config)
        sampled = self.monte_carlo(config, trials_exponent)
        return StatsComparison(
            exact=exact,
            monte_carlo=sampled,
            deviations=compare_stats(exact, sampled.stats),
        )

    def _resolve_exponent(self, trials_exponent: int | None) -> int:
        if trials_exponent is None:
            return self.settings.default_trials_exponent
        if trials_exponent > self.settings.max_trials_exponent:
            raise ValueError(
                f"trials_exponent {trials_exponent} exceeds the configured maximum "
                f"{self.settings.max_trials_exponent}"
            )
        return trials_exponent
