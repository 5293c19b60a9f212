"""Service Factory for landbattle.

This module provides factory functions for creating service instances with
proper dependency wiring. Use these functions in production code to ensure
the die-roll source and settings are correctly initialized.

For testing, inject protocol-based fakes instead of using these factories.

Example:
    # Production usage
    from landbattle.factory import create_battle_stats_service
    stats = create_battle_stats_service()

    # Testing usage
    from landbattle.services.battle_stats_service import BattleStatsService

    class ScriptedDice:
        def roll(self, count):
            return [1] * count

    stats = BattleStatsService(ScriptedDice())
"""

from landbattle.config import Settings, get_settings
from landbattle.domain.rules_config import DEFAULT_RULES, RulesConfig
from landbattle.services.battle_stats_service import BattleStatsService
from landbattle.utils.rng import SeededDieRolls


def create_battle_stats_service(
    settings: Settings | None = None,
    rules: RulesConfig = DEFAULT_RULES,
) -> BattleStatsService:
    """Create a BattleStatsService with all dependencies.

    Args:
        settings: Application settings; the cached settings when omitted
        rules: Rule constants

    Returns:
        Fully initialized BattleStatsService backed by a seeded die source
    """
    settings = settings or get_settings()
    return BattleStatsService(
        SeededDieRolls(settings.rng_seed),
        settings=settings,
        rules=rules,
    )
