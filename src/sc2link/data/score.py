"""Per-step score snapshot taken from an observation."""

from typing import Self

from pydantic import BaseModel

from sc2link.data.enum_utils import enum_or_default
from sc2link.data.enums import ScoreType
from sc2link.exceptions import MissingSubmessageError
from sc2link.messaging.types import (
    Response,
    WireCategoryScoreDetails,
    WireScore,
    WireVitalScoreDetails,
)


class Category(BaseModel, frozen=True):
    none: float = 0.0
    army: float = 0.0
    economy: float = 0.0
    technology: float = 0.0
    upgrade: float = 0.0

    @classmethod
    def from_wire(cls, category: WireCategoryScoreDetails | None) -> Self:
        if category is None:
            return cls()
        return cls(
            none=category.none,
            army=category.army,
            economy=category.economy,
            technology=category.technology,
            upgrade=category.upgrade,
        )


class Vital(BaseModel, frozen=True):
    life: float = 0.0
    shields: float = 0.0
    energy: float = 0.0

    @classmethod
    def from_wire(cls, vital: WireVitalScoreDetails | None) -> Self:
        if vital is None:
            return cls()
        return cls(life=vital.life, shields=vital.shields, energy=vital.energy)


class Score(BaseModel, frozen=True):
    score_type: ScoreType
    total_score: int
    idle_production_time: float
    idle_worker_time: float
    total_value_units: float
    total_value_structures: float
    killed_value_units: float
    killed_value_structures: float
    collected_minerals: float
    collected_vespene: float
    collection_rate_minerals: float
    collection_rate_vespene: float
    spent_minerals: float
    spent_vespene: float
    food_used: Category
    killed_minerals: Category
    killed_vespene: Category
    lost_minerals: Category
    lost_vespene: Category
    friendly_fire_minerals: Category
    friendly_fire_vespene: Category
    used_minerals: Category
    used_vespene: Category
    total_used_minerals: Category
    total_used_vespene: Category
    total_damage_dealt: Vital
    total_damage_taken: Vital
    total_healed: Vital
    current_apm: float
    current_effective_apm: float

    @classmethod
    def from_wire(cls, score: WireScore) -> Self:
        """Build the snapshot. Raises MissingSubmessageError without score details."""
        details = score.score_details
        if details is None:
            raise MissingSubmessageError("score_details")
        return cls(
            score_type=enum_or_default(ScoreType, score.score_type, ScoreType.CURRICULUM),
            total_score=score.score,
            idle_production_time=details.idle_production_time,
            idle_worker_time=details.idle_worker_time,
            total_value_units=details.total_value_units,
            total_value_structures=details.total_value_structures,
            killed_value_units=details.killed_value_units,
            killed_value_structures=details.killed_value_structures,
            collected_minerals=details.collected_minerals,
            collected_vespene=details.collected_vespene,
            collection_rate_minerals=details.collection_rate_minerals,
            collection_rate_vespene=details.collection_rate_vespene,
            spent_minerals=details.spent_minerals,
            spent_vespene=details.spent_vespene,
            food_used=Category.from_wire(details.food_used),
            killed_minerals=Category.from_wire(details.killed_minerals),
            killed_vespene=Category.from_wire(details.killed_vespene),
            lost_minerals=Category.from_wire(details.lost_minerals),
            lost_vespene=Category.from_wire(details.lost_vespene),
            friendly_fire_minerals=Category.from_wire(details.friendly_fire_minerals),
            friendly_fire_vespene=Category.from_wire(details.friendly_fire_vespene),
            used_minerals=Category.from_wire(details.used_minerals),
            used_vespene=Category.from_wire(details.used_vespene),
            total_used_minerals=Category.from_wire(details.total_used_minerals),
            total_used_vespene=Category.from_wire(details.total_used_vespene),
            total_damage_dealt=Vital.from_wire(details.total_damage_dealt),
            total_damage_taken=Vital.from_wire(details.total_damage_taken),
            total_healed=Vital.from_wire(details.total_healed),
            current_apm=details.current_apm,
            current_effective_apm=details.current_effective_apm,
        )

    @classmethod
    def from_response(cls, response: Response) -> Self:
        """Extract the score from an observation response."""
        observation = response.observation.observation if response.observation is not None else None
        if observation is None:
            raise MissingSubmessageError("observation", errors=tuple(response.error))
        if observation.score is None:
            raise MissingSubmessageError("score", errors=tuple(response.error))
        return cls.from_wire(observation.score)
