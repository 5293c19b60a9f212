"""Exact and Monte Carlo odds for wargame land battles."""

from landbattle.domain.exact import exact_stats
from landbattle.domain.models import AggregateStats, BattleConfig, BattleOutcome, MonteCarloRun
from landbattle.domain.monte_carlo import run_monte_carlo

__all__ = [
    "AggregateStats",
    "BattleConfig",
    "BattleOutcome",
    "MonteCarloRun",
    "exact_stats",
    "run_monte_carlo",
]
