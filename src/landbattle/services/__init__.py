"""Application services for landbattle."""

from landbattle.services.battle_stats_service import BattleStatsService

__all__ = ["BattleStatsService"]
