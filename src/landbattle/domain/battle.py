"""Battle resolution rules."""

from __future__ import annotations

from collections.abc import Sequence

from landbattle.domain.enums import Winner
from landbattle.domain.models import BattleConfig, BattleOutcome
from landbattle.domain.ratio import battle_size, check_elites, is_overrun
from landbattle.domain.resolver import resolve_outcome
from landbattle.domain.rules_config import DEFAULT_RULES, RulesConfig

ATTACKER_ROLL = 0
DEFENDER_ROLL = 1
ATTACKER_LEADER_DEATH_ROLL = 2
DEFENDER_LEADER_DEATH_ROLL = 3


def resolve_battle(
    config: BattleConfig,
    dice: Sequence[int],
    rules: RulesConfig = DEFAULT_RULES,
) -> BattleOutcome:
    """Resolve one battle from four pre-rolled dice.

    ``dice`` holds the attacker roll, the defender roll, then the attacker and
    defender leader-death rolls.  The leader-death dice are only read when the
    matching threshold is nonzero.
    """

    _check_dice(dice, rules)
    check_elites(config, rules)
    attacker_roll = int(dice[ATTACKER_ROLL])
    defender_roll = int(dice[DEFENDER_ROLL])
    size = battle_size(config, rules)

    if is_overrun(config, rules):
        return BattleOutcome(
            winner=Winner.ATTACKER,
            damage_to_defender=config.defender_size,
            damage_to_attacker=0,
            attacker_leader_death=False,
            defender_leader_death=False,
            attacker_can_hold=True,
            attacker_can_continue=True,
            battle_size=size,
            attacker_roll=attacker_roll,
            defender_roll=defender_roll,
            star=False,
            overrun=True,
            defender_wiped_out=True,
        )

    outcome = resolve_outcome(config, attacker_roll, defender_roll, rules)

    attacker_wins = outcome.hits_to_defender > outcome.hits_to_attacker or (
        outcome.hits_to_defender == outcome.hits_to_attacker and outcome.star
    )
    winner = Winner.ATTACKER if attacker_wins else Winner.DEFENDER
    attacker_can_hold = attacker_wins

    cap = rules.battle.hit_cap_multiplier
    damage_to_defender = min(outcome.hits_to_defender, cap * config.attacker_size)
    damage_to_attacker = min(outcome.hits_to_attacker, cap * config.defender_size)

    defender_wiped_out = damage_to_defender >= config.defender_size
    attacker_wiped_out = damage_to_attacker >= config.attacker_size

    # The winner is never annihilated alongside the loser: it keeps one step.
    if defender_wiped_out and attacker_wiped_out:
        if winner == Winner.ATTACKER:
            damage_to_attacker = max(config.attacker_size - 1, 0)
            attacker_wiped_out = False
        else:
            damage_to_defender = max(config.defender_size - 1, 0)
            defender_wiped_out = False

    advance = rules.battle.continue_advance_multiplier
    outnumbers = config.attacker_size >= advance * config.defender_size
    attacker_can_continue = False
    if defender_wiped_out and winner == Winner.DEFENDER and not config.fort_present:
        attacker_can_hold = True
        attacker_can_continue = outnumbers
    if attacker_wins and outnumbers:
        attacker_can_continue = True

    attacker_death_roll: int | None = None
    defender_death_roll: int | None = None
    attacker_leader_death = False
    defender_leader_death = False
    if outcome.attacker_leader_death_threshold > 0:
        attacker_death_roll = int(dice[ATTACKER_LEADER_DEATH_ROLL])
        attacker_leader_death = attacker_death_roll <= outcome.attacker_leader_death_threshold
    if outcome.defender_leader_death_threshold > 0:
        defender_death_roll = int(dice[DEFENDER_LEADER_DEATH_ROLL])
        defender_leader_death = defender_death_roll <= outcome.defender_leader_death_threshold

    return BattleOutcome(
        winner=winner,
        damage_to_defender=damage_to_defender,
        damage_to_attacker=damage_to_attacker,
        attacker_leader_death=attacker_leader_death,
        defender_leader_death=defender_leader_death,
        attacker_can_hold=attacker_can_hold,
        attacker_can_continue=attacker_can_continue,
        battle_size=size,
        attacker_roll=attacker_roll,
        defender_roll=defender_roll,
        star=outcome.star,
        overrun=False,
        attacker_wiped_out=attacker_wiped_out,
        defender_wiped_out=defender_wiped_out,
        attacker_leader_death_roll=attacker_death_roll,
        defender_leader_death_roll=defender_death_roll,
    )


def _check_dice(dice: Sequence[int], rules: RulesConfig) -> None:
    needed = rules.battle.dice_per_battle
    if len(dice) < needed:
        raise ValueError(f"resolve_battle needs {needed} die rolls, got {len(dice)}")
    sides = rules.battle.die_sides
    for value in dice[:needed]:
        if not 1 <= value <= sides:
            raise ValueError(f"die rolls must be between 1 and {sides}, got {value}")
