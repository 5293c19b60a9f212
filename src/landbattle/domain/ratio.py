"""Force ratio, battle size and die roll modifiers."""

from __future__ import annotations

from landbattle.domain.enums import BattleSize, Ratio
from landbattle.domain.models import BattleConfig, ForceRatio, RatioAssessment
from landbattle.domain.rules_config import DEFAULT_RULES, RulesConfig


def battle_size(config: BattleConfig, rules: RulesConfig = DEFAULT_RULES) -> BattleSize:
    """Classify the battle by the total strength points committed."""

    total = config.attacker_size + config.defender_size
    if total <= rules.battle.small_battle_max_sp:
        return BattleSize.SMALL
    if total <= rules.battle.medium_battle_max_sp:
        return BattleSize.MEDIUM
    return BattleSize.LARGE


def battle_ratio(config: BattleConfig, rules: RulesConfig = DEFAULT_RULES) -> ForceRatio:
    """Bucket ``floor(larger / smaller)`` and report which side it favours.

    A 10:1 bucket only exists in the attacker's favour; a defender at 10:1 or
    better gets the 5:1+ bucket.  An empty smaller side counts as 10:1+.
    """

    favours_attacker = config.attacker_size >= config.defender_size
    if favours_attacker:
        larger, smaller = config.attacker_size, config.defender_size
    else:
        larger, smaller = config.defender_size, config.attacker_size

    if smaller == 0:
        return ForceRatio(Ratio.TEN_TO_ONE_PLUS, favours_attacker)

    multiple = larger // smaller
    if multiple >= rules.battle.overrun_ratio and favours_attacker:
        ratio = Ratio.TEN_TO_ONE_PLUS
    elif multiple >= 5:
        ratio = Ratio.FIVE_TO_ONE_PLUS
    elif multiple >= 4:
        ratio = Ratio.FOUR_TO_ONE
    elif multiple >= 3:
        ratio = Ratio.THREE_TO_ONE
    else:
        ratio = Ratio.LOW
    return ForceRatio(ratio, favours_attacker)


def ratio_drm(ratio: Ratio, rules: RulesConfig = DEFAULT_RULES) -> int:
    """DRM granted to the side favoured by ``ratio``."""

    if ratio == Ratio.THREE_TO_ONE:
        return rules.battle.three_to_one_drm
    if ratio == Ratio.FOUR_TO_ONE:
        return rules.battle.four_to_one_drm
    if ratio in (Ratio.FIVE_TO_ONE_PLUS, Ratio.TEN_TO_ONE_PLUS):
        return rules.battle.five_to_one_drm
    return 0


def is_overrun(config: BattleConfig, rules: RulesConfig = DEFAULT_RULES) -> bool:
    """True when the attacker wins outright without consulting the CRT."""

    force = battle_ratio(config, rules)
    return (
        force.ratio == Ratio.TEN_TO_ONE_PLUS
        and force.favours_attacker
        and not config.fort_present
    )


def check_elites(config: BattleConfig, rules: RulesConfig = DEFAULT_RULES) -> None:
    """Raise ValueError if either side commits more elites than the rules allow."""

    max_elites = rules.battle.max_elites_committed
    for name in ("attacker_elites", "defender_elites"):
        value = getattr(config, name)
        if value > max_elites:
            raise ValueError(f"{name} must be between 0 and {max_elites}, got {value}")


def assess(config: BattleConfig, rules: RulesConfig = DEFAULT_RULES) -> RatioAssessment:
    """Derive ratio, battle size and each side's total DRM."""

    check_elites(config, rules)

    force = battle_ratio(config, rules)
    bonus = ratio_drm(force.ratio, rules)
    battle = rules.battle

    attacker_drm = (
        (bonus if force.favours_attacker else 0)
        + config.attacker_leader_drm
        + config.attacker_elites
        + (battle.out_of_supply_drm if config.defender_oos else 0)
    )
    defender_drm = (
        (0 if force.favours_attacker else bonus)
        + config.defender_leader_drm
        + config.defender_elites
        + (battle.interception_drm if config.is_interception else 0)
        + (battle.fort_drm if config.fort_present else 0)
        + (battle.out_of_supply_drm if config.attacker_oos else 0)
    )

    return RatioAssessment(
        ratio=force.ratio,
        favours_attacker=force.favours_attacker,
        attacker_drm=attacker_drm,
        defender_drm=defender_drm,
        battle_size=battle_size(config, rules),
    )
