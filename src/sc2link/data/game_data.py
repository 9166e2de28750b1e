"""
Catalogs of abilities, unit types, upgrades, buffs and effects.

Every record is keyed by an identifier enum. Decoding a record is fallible:
``try_from_wire`` returns None when the record's identifier is unknown to
this client build, and GameData.from_wire leaves such records out of the
catalog. A newer engine therefore never breaks decoding; the client just
cannot reason about the entities it does not know.
"""

from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Self, TypeVar

import structlog
from pydantic import BaseModel, Field, field_validator

from sc2link.data.enum_utils import enum_or_default, try_enum
from sc2link.data.enums import AbilityTarget, Attribute, Race, TargetType
from sc2link.data.ids import AbilityId, BuffId, EffectId, UnitTypeId, UpgradeId
from sc2link.messaging.types import (
    ResponseData,
    WireAbilityData,
    WireBuffData,
    WireEffectData,
    WireUnitTypeData,
    WireUpgradeData,
    WireWeapon,
)

logger = structlog.get_logger()


class Cost(BaseModel, frozen=True):
    """Resources, supply and time needed for a unit or upgrade."""

    minerals: int
    vespene: int
    supply: float
    time: float


class Weapon(BaseModel, frozen=True):
    target: TargetType
    damage: int
    # extra damage against units with the given attribute
    damage_bonus: tuple[tuple[Attribute, int], ...] = ()
    attacks: int
    range: float
    # cooldown in game seconds
    speed: float

    @classmethod
    def from_wire(cls, weapon: WireWeapon) -> Self:
        return cls(
            target=enum_or_default(TargetType, weapon.type, TargetType.GROUND),
            damage=int(weapon.damage),
            damage_bonus=tuple(
                (enum_or_default(Attribute, bonus.attribute, Attribute.LIGHT), int(bonus.bonus))
                for bonus in weapon.damage_bonus
            ),
            attacks=weapon.attacks,
            range=weapon.range,
            speed=weapon.speed,
        )


class AbilityData(BaseModel, frozen=True):
    id: AbilityId
    link_name: str
    link_index: int
    button_name: str | None = None
    friendly_name: str | None = None
    hotkey: str | None = None
    remaps_to_ability_id: AbilityId | None = None
    available: bool
    target: AbilityTarget
    allow_minimap: bool
    allow_autocast: bool
    is_building: bool
    # half of the building footprint, only set for build abilities
    footprint_radius: float | None = None
    is_instant_placement: bool
    cast_range: float | None = None

    @classmethod
    def try_from_wire(cls, a: WireAbilityData) -> Self | None:
        ability_id = try_enum(AbilityId, a.ability_id)
        if ability_id is None:
            return None
        return cls(
            id=ability_id,
            link_name=a.link_name,
            link_index=a.link_index,
            button_name=a.button_name,
            friendly_name=a.friendly_name,
            hotkey=a.hotkey,
            remaps_to_ability_id=try_enum(AbilityId, a.remaps_to_ability_id),
            available=a.available,
            target=enum_or_default(AbilityTarget, a.target, AbilityTarget.NONE),
            allow_minimap=a.allow_minimap,
            allow_autocast=a.allow_autocast,
            is_building=a.is_building,
            footprint_radius=a.footprint_radius,
            is_instant_placement=a.is_instant_placement,
            cast_range=a.cast_range,
        )


class UnitTypeData(BaseModel, frozen=True):
    id: UnitTypeId
    name: str
    available: bool
    # space taken in transports and bunkers
    cargo_size: int
    mineral_cost: int
    vespene_cost: int
    food_required: float
    food_provided: float
    # None if the engine reports no producing ability, or one unknown to this client
    ability: AbilityId | None = None
    race: Race
    build_time: float
    has_vespene: bool
    has_minerals: bool
    sight_range: float
    tech_alias: tuple[UnitTypeId, ...] = ()
    unit_alias: UnitTypeId | None = None
    tech_requirement: UnitTypeId | None = None
    require_attached: bool
    attributes: tuple[Attribute, ...] = ()
    movement_speed: float
    armor: int
    weapons: tuple[Weapon, ...] = ()

    def cost(self) -> Cost:
        return Cost(
            minerals=self.mineral_cost,
            vespene=self.vespene_cost,
            supply=self.food_required,
            time=self.build_time,
        )

    @classmethod
    def try_from_wire(cls, u: WireUnitTypeData) -> Self | None:
        unit_id = try_enum(UnitTypeId, u.unit_id)
        if unit_id is None:
            return None
        tech_alias = (try_enum(UnitTypeId, alias) for alias in u.tech_alias)
        return cls(
            id=unit_id,
            name=u.name,
            available=u.available,
            cargo_size=u.cargo_size,
            mineral_cost=u.mineral_cost,
            vespene_cost=u.vespene_cost,
            food_required=u.food_required,
            food_provided=u.food_provided,
            ability=try_enum(AbilityId, u.ability_id),
            race=enum_or_default(Race, u.race, Race.NO_RACE),
            build_time=u.build_time,
            has_vespene=u.has_vespene,
            has_minerals=u.has_minerals,
            sight_range=u.sight_range,
            tech_alias=tuple(alias for alias in tech_alias if alias is not None),
            unit_alias=try_enum(UnitTypeId, u.unit_alias),
            tech_requirement=try_enum(UnitTypeId, u.tech_requirement),
            require_attached=u.require_attached,
            attributes=tuple(enum_or_default(Attribute, attr, Attribute.LIGHT) for attr in u.attributes),
            movement_speed=u.movement_speed,
            armor=int(u.armor),
            weapons=tuple(Weapon.from_wire(weapon) for weapon in u.weapons),
        )


class UpgradeData(BaseModel, frozen=True):
    id: UpgradeId
    # ability used to research the upgrade
    ability: AbilityId
    name: str
    mineral_cost: int
    vespene_cost: int
    research_time: float

    def cost(self) -> Cost:
        return Cost(
            minerals=self.mineral_cost,
            vespene=self.vespene_cost,
            supply=0.0,
            time=self.research_time,
        )

    @classmethod
    def try_from_wire(cls, u: WireUpgradeData) -> Self | None:
        upgrade_id = try_enum(UpgradeId, u.upgrade_id)
        ability = try_enum(AbilityId, u.ability_id)
        if upgrade_id is None or ability is None:
            return None
        return cls(
            id=upgrade_id,
            ability=ability,
            name=u.name,
            mineral_cost=u.mineral_cost,
            vespene_cost=u.vespene_cost,
            research_time=u.research_time,
        )


class BuffData(BaseModel, frozen=True):
    id: BuffId
    name: str

    @classmethod
    def try_from_wire(cls, b: WireBuffData) -> Self | None:
        buff_id = try_enum(BuffId, b.buff_id)
        if buff_id is None:
            return None
        return cls(id=buff_id, name=b.name)


# Not reported by the engine.
_EFFECTS_HITTING_ANY: frozenset[EffectId] = frozenset(
    {
        EffectId.NULL,
        EffectId.PSISTORMPERSISTENT,
        EffectId.SCANNERSWEEP,
        EffectId.NUKEPERSISTENT,
        EffectId.RAVAGERCORROSIVEBILECP,
    },
)
_EFFECTS_WITH_FRIENDLY_FIRE: frozenset[EffectId] = frozenset(
    {
        EffectId.PSISTORMPERSISTENT,
        EffectId.NUKEPERSISTENT,
        EffectId.RAVAGERCORROSIVEBILECP,
    },
)


class EffectData(BaseModel, frozen=True):
    id: EffectId
    name: str
    friendly_name: str
    radius: float
    target: TargetType
    # True if the effect damages allied units too
    friendly_fire: bool

    @classmethod
    def try_from_wire(cls, e: WireEffectData) -> Self | None:
        effect_id = try_enum(EffectId, e.effect_id)
        if effect_id is None:
            return None
        return cls(
            id=effect_id,
            name=e.name,
            friendly_name=e.friendly_name,
            radius=e.radius,
            target=TargetType.ANY if effect_id in _EFFECTS_HITTING_ANY else TargetType.GROUND,
            friendly_fire=effect_id in _EFFECTS_WITH_FRIENDLY_FIRE,
        )


W = TypeVar("W")
R = TypeVar("R", AbilityData, UnitTypeData, UpgradeData, BuffData, EffectData)


def _build_catalog(records: Iterable[W], convert: Callable[[W], R | None], kind: str) -> dict:
    catalog = {}
    dropped = 0
    for wire_record in records:
        record = convert(wire_record)
        if record is None:
            dropped += 1
            continue
        catalog[record.id] = record
    if dropped:
        logger.debug("skipped records with unknown ids", kind=kind, dropped=dropped, kept=len(catalog))
    return catalog


class GameData(BaseModel, frozen=True):
    """All catalogs, built once per game and read-only afterwards."""

    abilities: Mapping[AbilityId, AbilityData] = Field(default_factory=dict, validate_default=True)
    units: Mapping[UnitTypeId, UnitTypeData] = Field(default_factory=dict, validate_default=True)
    upgrades: Mapping[UpgradeId, UpgradeData] = Field(default_factory=dict, validate_default=True)
    buffs: Mapping[BuffId, BuffData] = Field(default_factory=dict, validate_default=True)
    effects: Mapping[EffectId, EffectData] = Field(default_factory=dict, validate_default=True)

    @field_validator("abilities", "units", "upgrades", "buffs", "effects", mode="after")
    @classmethod
    def _read_only(cls, catalog: Mapping) -> Mapping:
        return MappingProxyType(dict(catalog))

    @classmethod
    def from_wire(cls, data: ResponseData) -> Self:
        return cls(
            abilities=_build_catalog(data.abilities, AbilityData.try_from_wire, "ability"),
            units=_build_catalog(data.units, UnitTypeData.try_from_wire, "unit"),
            upgrades=_build_catalog(data.upgrades, UpgradeData.try_from_wire, "upgrade"),
            buffs=_build_catalog(data.buffs, BuffData.try_from_wire, "buff"),
            effects=_build_catalog(data.effects, EffectData.try_from_wire, "effect"),
        )
