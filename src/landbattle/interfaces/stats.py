"""Battle Statistics Service Protocol Interface.

This module defines the protocol (interface) for services answering odds
questions about land battles.
"""

from collections.abc import Sequence
from typing import Protocol

from landbattle.domain.models import (
    AggregateStats,
    BattleConfig,
    BattleOutcome,
    MonteCarloRun,
    StatsComparison,
)


class IBattleStatsService(Protocol):
    """Protocol defining the interface for battle odds operations."""

    def resolve(self, config: BattleConfig, dice: Sequence[int]) -> BattleOutcome:
        """Resolve a single battle from four supplied die values."""
        ...

    def exact(self, config: BattleConfig) -> AggregateStats:
        """Exact statistics from enumerating every two-die outcome."""
        ...

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
            trials_exponent: Power-of-two exponent; the configured default
                when omitted
            seed: Optional seed for a reproducible run

        Returns:
            Trial count and aggregate statistics
        """
        ...

    def compare(
        self, config: BattleConfig, trials_exponent: int | None = None
    ) -> StatsComparison:
        """Exact and Monte Carlo statistics side by side."""
        ...
