"""Typed domain model decoded from engine responses."""

from sc2link.data.enums import (
    AbilityTarget,
    AIBuild,
    Attribute,
    Difficulty,
    PlayerType,
    Race,
    ScoreType,
    TargetType,
)
from sc2link.data.game_data import (
    AbilityData,
    BuffData,
    Cost,
    EffectData,
    GameData,
    UnitTypeData,
    UpgradeData,
    Weapon,
)
from sc2link.data.game_info import GameInfo, PlayerInfo
from sc2link.data.geometry import Point2, Point3, Rect, Size
from sc2link.data.ids import AbilityId, BuffId, EffectId, UnitTypeId, UpgradeId
from sc2link.data.pixel_map import ByteMap, PixelMap
from sc2link.data.score import Category, Score, Vital

__all__ = [
    "AIBuild",
    "AbilityData",
    "AbilityId",
    "AbilityTarget",
    "Attribute",
    "BuffData",
    "BuffId",
    "ByteMap",
    "Category",
    "Cost",
    "Difficulty",
    "EffectData",
    "EffectId",
    "GameData",
    "GameInfo",
    "PixelMap",
    "PlayerInfo",
    "PlayerType",
    "Point2",
    "Point3",
    "Race",
    "Rect",
    "Score",
    "ScoreType",
    "Size",
    "TargetType",
    "UnitTypeData",
    "UnitTypeId",
    "UpgradeData",
    "UpgradeId",
    "Vital",
    "Weapon",
]
