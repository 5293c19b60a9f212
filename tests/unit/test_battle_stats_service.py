"""Tests for BattleStatsService and its factory wiring."""

from __future__ import annotations

import pytest

from landbattle.config import Settings
from landbattle.domain.enums import Winner
from landbattle.domain.models import BattleConfig
from landbattle.factory import create_battle_stats_service
from landbattle.services.battle_stats_service import BattleStatsService
from landbattle.utils.rng import SeededDieRolls


def _settings(**overrides) -> Settings:
    values = {"default_trials_exponent": 8, "max_trials_exponent": 12, "rng_seed": "svc"}
    values.update(overrides)
    return Settings(**values)


def test_resolve_delegates_to_rules(scripted_dice):
    service = BattleStatsService(scripted_dice([1]), settings=_settings())
    outcome = service.resolve(BattleConfig(5, 5), [6, 1, 1, 1])
    assert outcome.winner == Winner.ATTACKER


def test_exact_ignores_the_die_source(scripted_dice):
    dice = scripted_dice([1])
    service = BattleStatsService(dice, settings=_settings())
    stats = service.exact(BattleConfig(5, 5))
    assert stats.attacker_win_probability == pytest.approx(1 / 6)
    assert dice.requests == []


def test_monte_carlo_uses_default_exponent_and_shared_source(scripted_dice):
    dice = scripted_dice([6, 1, 1, 1])
    service = BattleStatsService(dice, settings=_settings())
    run = service.monte_carlo(BattleConfig(5, 5))
    assert run.trials == 256
    assert dice.requests == [1024]
    assert run.stats.attacker_win_probability == 1.0


def test_monte_carlo_seed_builds_a_dedicated_source(scripted_dice):
    dice = scripted_dice([6, 1, 1, 1])
    service = BattleStatsService(dice, settings=_settings())
    first = service.monte_carlo(BattleConfig(5, 5), 10, seed="fixed")
    second = service.monte_carlo(BattleConfig(5, 5), 10, seed="fixed")
    assert dice.requests == []
    assert first == second
    assert first.stats.attacker_win_probability < 1.0


def test_monte_carlo_rejects_exponent_above_configured_max(scripted_dice):
    service = BattleStatsService(scripted_dice([1]), settings=_settings())
    with pytest.raises(ValueError, match="exceeds"):
        service.monte_carlo(BattleConfig(5, 5), 13)


def test_compare_reports_deviations():
    service = BattleStatsService(SeededDieRolls("compare"), settings=_settings())
    comparison = service.compare(BattleConfig(5, 5, defender_oos=True), 12)
    assert comparison.monte_carlo.trials == 4096
    assert comparison.deviations["attacker_win_probability"] == pytest.approx(
        abs(
            comparison.exact.attacker_win_probability
            - comparison.monte_carlo.stats.attacker_win_probability
        )
    )
    assert "hits_to_defender[1]" in comparison.deviations
    assert comparison.max_deviation < 0.1


def test_factory_wires_seeded_source():
    service = create_battle_stats_service(_settings(rng_seed="factory"))
    assert isinstance(service.dice, SeededDieRolls)
    assert service.dice.seed == "factory"
