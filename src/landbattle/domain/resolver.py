"""CRT outcome for a single pair of die rolls."""

from __future__ import annotations

from landbattle.domain import crt
from landbattle.domain.enums import Ratio
from landbattle.domain.models import BattleConfig, CombatOutcome
from landbattle.domain.ratio import assess, is_overrun
from landbattle.domain.rules_config import DEFAULT_RULES, RulesConfig


def resolve_outcome(
    config: BattleConfig,
    attacker_roll: int,
    defender_roll: int,
    rules: RulesConfig = DEFAULT_RULES,
) -> CombatOutcome:
    """Turn two raw die rolls into hits, the star flag and leader-death thresholds.

    Star already accounts for resource/capital hexes.  A threshold of 0 means
    no leader-death roll is needed for that side.
    """

    if is_overrun(config, rules):
        return CombatOutcome(
            hits_to_defender=config.defender_size,
            hits_to_attacker=0,
            star=False,
            defender_leader_death_threshold=0,
            attacker_leader_death_threshold=0,
        )

    assessment = assess(config, rules)
    modified_attacker = attacker_roll + assessment.attacker_drm
    modified_defender = defender_roll + assessment.defender_drm
    hits = crt.lookup(assessment.battle_size, modified_attacker, modified_defender)

    star = (
        not config.resource_or_capital
        and modified_attacker >= rules.battle.star_min_modified_roll
    )

    favoured_by_ratio = assessment.ratio > Ratio.LOW
    defender_threshold = (
        0
        if favoured_by_ratio and not assessment.favours_attacker
        else _leader_death_threshold(modified_defender, modified_attacker, rules)
    )
    attacker_threshold = (
        0
        if favoured_by_ratio and assessment.favours_attacker
        else _leader_death_threshold(modified_attacker, modified_defender, rules)
    )

    return CombatOutcome(
        hits_to_defender=hits.hits_to_defender,
        hits_to_attacker=hits.hits_to_attacker,
        star=star,
        defender_leader_death_threshold=defender_threshold,
        attacker_leader_death_threshold=attacker_threshold,
    )


def _leader_death_threshold(own_roll: int, enemy_roll: int, rules: RulesConfig) -> int:
    # Own modified 10+: killed on 1-3. Enemy modified 10+: killed on 1.
    trigger = rules.battle.leader_death_trigger_roll
    if own_roll >= trigger:
        return rules.battle.leader_death_own_roll_threshold
    if enemy_roll >= trigger:
        return rules.battle.leader_death_enemy_roll_threshold
    return 0
