"""HTTP routes for the landbattle API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from landbattle.api.runtime import ApiState
from landbattle.domain import crt
from landbattle.domain import models as dm
from landbattle.domain.enums import BattleSize, Winner

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


class BattleConfigModel(BaseModel):
    attacker_size: int = Field(ge=0)
    defender_size: int = Field(ge=0)
    resource_or_capital: bool = False
    fort_present: bool = False
    is_interception: bool = False
    defender_leader_present: bool = False
    attacker_leader_drm: int = 0
    defender_leader_drm: int = 0
    attacker_elites: int = Field(default=0, ge=0)
    defender_elites: int = Field(default=0, ge=0)
    attacker_oos: bool = False
    defender_oos: bool = False
    is_amphibious: bool = False

    def to_domain(self) -> dm.BattleConfig:
        return dm.BattleConfig(**self.model_dump())


class ResolveRequest(BaseModel):
    config: BattleConfigModel
    dice: list[int]


class MonteCarloRequest(BaseModel):
    config: BattleConfigModel
    trials_exponent: int | None = Field(default=None, ge=0)
    seed: str | None = None


class CompareRequest(BaseModel):
    config: BattleConfigModel
    trials_exponent: int | None = Field(default=None, ge=0)


class BattleOutcomeModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

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
    attacker_wiped_out: bool
    defender_wiped_out: bool
    attacker_leader_death_roll: int | None
    defender_leader_death_roll: int | None


class HitStatsModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    mean_hits_to_defender: float
    stddev_hits_to_defender: float
    mean_hits_to_attacker: float
    stddev_hits_to_attacker: float
    hits_to_defender_distribution: dict[int, float]
    hits_to_attacker_distribution: dict[int, float]


class AggregateStatsModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    battle_size: BattleSize
    attacker_win_probability: float
    defender_win_probability: float
    hit_stats: HitStatsModel
    attacker_leader_death_probability: float
    defender_leader_death_probability: float
    star_result_probability: float
    attacker_elite_loss_probability: float
    defender_elite_loss_probability: float
    attacker_hold_probability: float
    attacker_continue_probability: float
    overrun_probability: float


class MonteCarloResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    trials: int
    stats: AggregateStatsModel


class CompareResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    exact: AggregateStatsModel
    monte_carlo: MonteCarloResponse
    deviations: dict[str, float]
    max_deviation: float


def _unprocessable(exc: ValueError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(exc))


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "rules_version": state.settings.rules_version,
        "default_trials_exponent": state.settings.default_trials_exponent,
        "max_trials_exponent": state.settings.max_trials_exponent,
    }


@router.get("/rules")
async def rules_overview(state: ApiStateDep) -> dict[str, object]:
    """Expose the CRT and the DRM constants for clients."""

    battle = state.rules.battle
    return {
        "crt": {
            size.value: {
                "hits_to_defender": list(crt.HITS_TO_DEFENDER[size]),
                "hits_to_attacker": list(crt.HITS_TO_ATTACKER[size]),
            }
            for size in BattleSize
        },
        "drm": {
            "three_to_one": battle.three_to_one_drm,
            "four_to_one": battle.four_to_one_drm,
            "five_to_one_plus": battle.five_to_one_drm,
            "out_of_supply": battle.out_of_supply_drm,
            "interception": battle.interception_drm,
            "fort": battle.fort_drm,
        },
    }


@router.post("/battles/resolve", response_model=BattleOutcomeModel)
async def resolve_battle(request: ResolveRequest, state: ApiStateDep) -> BattleOutcomeModel:
    try:
        outcome = state.stats.resolve(request.config.to_domain(), request.dice)
    except ValueError as exc:
        raise _unprocessable(exc) from exc
    return BattleOutcomeModel.model_validate(outcome)


@router.post("/battles/exact", response_model=AggregateStatsModel)
async def exact_stats(request: BattleConfigModel, state: ApiStateDep) -> AggregateStatsModel:
    try:
        stats = state.stats.exact(request.to_domain())
    except ValueError as exc:
        raise _unprocessable(exc) from exc
    return AggregateStatsModel.model_validate(stats)


@router.post("/battles/monte-carlo", response_model=MonteCarloResponse)
async def monte_carlo(request: MonteCarloRequest, state: ApiStateDep) -> MonteCarloResponse:
    try:
        run = state.stats.monte_carlo(
            request.config.to_domain(), request.trials_exponent, seed=request.seed
        )
    except ValueError as exc:
        raise _unprocessable(exc) from exc
    return MonteCarloResponse.model_validate(run)


@router.post("/battles/compare", response_model=CompareResponse)
async def compare(request: CompareRequest, state: ApiStateDep) -> CompareResponse:
    try:
        comparison = state.stats.compare(request.config.to_domain(), request.trials_exponent)
    except ValueError as exc:
        raise _unprocessable(exc) from exc
    return CompareResponse.model_validate(comparison)
