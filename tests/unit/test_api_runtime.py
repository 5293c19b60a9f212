"""Tests for API runtime helpers."""

from __future__ import annotations

import logging

from landbattle.api.runtime import ApiState
from landbattle.config import Settings
from landbattle.domain.models import BattleConfig
from landbattle.domain.rules_config import DEFAULT_RULES
from landbattle.utils.rng import SeededDieRolls


def test_state_wires_settings_into_stats_service():
    settings = Settings(rng_seed="runtime", default_trials_exponent=4, max_trials_exponent=8)
    state = ApiState(settings=settings)
    assert state.settings is settings
    assert state.rules is DEFAULT_RULES
    assert state.stats.settings is settings
    assert isinstance(state.stats.dice, SeededDieRolls)


def test_unseeded_state_logs(caplog):
    with caplog.at_level(logging.INFO, logger="landbattle.api.runtime"):
        ApiState(settings=Settings(rng_seed=None))
    assert "rng_seed" in caplog.text


def test_state_runs_with_its_default_exponent():
    settings = Settings(rng_seed="runtime", default_trials_exponent=4, max_trials_exponent=8)
    state = ApiState(settings=settings)
    assert state.stats.monte_carlo(BattleConfig(3, 3)).trials == 16
