"""Declarative rule configuration for land-battle resolution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BattleRules:
    """Modifiers, caps and thresholds used when resolving one battle."""

    die_sides: int = 6
    dice_per_battle: int = 4
    max_modified_roll: int = 10  # "10 or more" on the CRT
    small_battle_max_sp: int = 5
    medium_battle_max_sp: int = 19
    three_to_one_drm: int = 2
    four_to_one_drm: int = 3
    five_to_one_drm: int = 4  # also applies at 10:1 and above
    overrun_ratio: int = 10
    out_of_supply_drm: int = 2
    interception_drm: int = 2
    fort_drm: int = 2
    max_elites_committed: int = 2
    star_min_modified_roll: int = 7
    leader_death_trigger_roll: int = 10
    leader_death_own_roll_threshold: int = 3  # killed on 1-3
    leader_death_enemy_roll_threshold: int = 1  # killed on 1
    hit_cap_multiplier: int = 2
    continue_advance_multiplier: int = 2


@dataclass(frozen=True, slots=True)
class MonteCarloRules:
    """Bounds for Monte Carlo sampling."""

    max_trials_exponent: int = 24


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    battle: BattleRules = BattleRules()
    monte_carlo: MonteCarloRules = MonteCarloRules()


DEFAULT_RULES = RulesConfig()
