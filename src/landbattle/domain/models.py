"""Value records describing a battle, its resolution and its statistics.

Every record is a frozen dataclass: callers build a :class:`BattleConfig`
once, the rules layer derives the intermediate records from it, and the
statistics engines assemble a single :class:`AggregateStats` at the end of a
run.  Nothing here is mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from landbattle.domain.enums import BattleSize, Ratio, Winner


@dataclass(frozen=True, slots=True)
class BattleConfig:
    """Parameters of a single land battle."""

    attacker_size: int
    defender_size: int
    resource_or_capital: bool = False
    fort_present: bool = False
    is_interception: bool = False
    defender_leader_present: bool = False
    attacker_leader_drm: int = 0  # includes cavalry intelligence
    defender_leader_drm: int = 0
    attacker_elites: int = 0
    defender_elites: int = 0
    attacker_oos: bool = False
    defender_oos: bool = False
    is_amphibious: bool = False

    def __post_init__(self) -> None:
        # Elite ceiling depends on the rules: ratio.check_elites.
        for name in ("attacker_size", "defender_size", "attacker_elites", "defender_elites"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True, slots=True)
class ForceRatio:
    """Ratio bucket and the side it favours."""

    ratio: Ratio
    favours_attacker: bool


@dataclass(frozen=True, slots=True)
class RatioAssessment:
    """Everything derived from the battle parameters before any die is rolled."""

    ratio: Ratio
    favours_attacker: bool
    attacker_drm: int
    defender_drm: int
    battle_size: BattleSize


@dataclass(frozen=True, slots=True)
class CrtResult:
    """Hits read from the CRT for one pair of modified rolls."""

    hits_to_defender: int
    hits_to_attacker: int


@dataclass(frozen=True, slots=True)
class CombatOutcome:
    """Raw CRT outcome before caps, tie-breaks and leader-death rolls."""

    hits_to_defender: int
    hits_to_attacker: int
    star: bool
    defender_leader_death_threshold: int
    attacker_leader_death_threshold: int


@dataclass(frozen=True, slots=True)
class BattleOutcome:
    """Final, self-consistent result of one resolved battle."""

    winner: Winner
    damage_to_defender: int
    damage_to_attacker: int
    attacker_leader_death: bool
    defender_leader_death: bool
    attacker_can_hold: bool
    attacker_can_continue: bool
    battle_size: BattleSize
    attacker_roll: int
    defender_roll: int
    star: bool
    overrun: bool
    attacker_wiped_out: bool = False
    defender_wiped_out: bool = False
    attacker_leader_death_roll: int | None = None
    defender_leader_death_roll: int | None = None


@dataclass(frozen=True, slots=True)
class HitStats:
    """Mean, standard deviation and distribution of hits for both sides.

    Each distribution runs from 0 to the larger of the CRT maximum for the tier
    and the largest loss observed, so an overrun keeps its own bin.  Only past
    ``MAX_DISTRIBUTION_VALUE`` does the last bin also count larger losses.
    """

    mean_hits_to_defender: float
    stddev_hits_to_defender: float
    mean_hits_to_attacker: float
    stddev_hits_to_attacker: float
    hits_to_defender_distribution: dict[int, float]
    hits_to_attacker_distribution: dict[int, float]


@dataclass(frozen=True, slots=True)
class AggregateStats:
    """Statistics of one exact enumeration or Monte Carlo run."""

    battle_size: BattleSize
    attacker_win_probability: float
    defender_win_probability: float
    hit_stats: HitStats
    attacker_leader_death_probability: float
    defender_leader_death_probability: float
    star_result_probability: float
    attacker_elite_loss_probability: float = 0.0
    defender_elite_loss_probability: float = 0.0
    attacker_hold_probability: float = 0.0
    attacker_continue_probability: float = 0.0
    overrun_probability: float = 0.0


@dataclass(frozen=True, slots=True)
class MonteCarloRun:
    """Trial count and statistics of a Monte Carlo run."""

    trials: int
    stats: AggregateStats


@dataclass(frozen=True, slots=True)
class StatsComparison:
    """Exact statistics side by side with a Monte Carlo run of the same battle."""

    exact: AggregateStats
    monte_carlo: MonteCarloRun
    deviations: dict[str, float]

    @property
    def max_deviation(self) -> float:
        return max(self.deviations.values(), default=0.0)
