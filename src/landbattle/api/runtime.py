"""Runtime primitives backing the landbattle HTTP API."""

from __future__ import annotations

import logging

from landbattle.config import Settings, get_settings
from landbattle.domain.rules_config import DEFAULT_RULES, RulesConfig
from landbattle.factory import create_battle_stats_service
from landbattle.interfaces.stats import IBattleStatsService

logger = logging.getLogger(__name__)


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(
        self, *, settings: Settings | None = None, rules: RulesConfig = DEFAULT_RULES
    ) -> None:
        self.settings = settings or get_settings()
        self.rules = rules
        self.stats: IBattleStatsService = create_battle_stats_service(self.settings, rules)
        if self.settings.rng_seed is None:
            logger.info("no rng_seed configured; Monte Carlo runs draw OS entropy")


def build_state() -> ApiState:
    """Default factory used by the application lifespan."""

    return ApiState()
