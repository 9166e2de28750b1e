"""Constant information about the map and its players, read once per game."""

from enum import Enum
from pathlib import PureWindowsPath
from typing import Self, TypeVar

from pydantic import BaseModel, Field

from sc2link.data.enum_utils import enum_or_default
from sc2link.data.enums import AIBuild, Difficulty, PlayerType, Race
from sc2link.data.geometry import Point2, Rect, Size
from sc2link.data.pixel_map import ByteMap, PixelMap
from sc2link.messaging.types import ResponseGameInfo, WirePlayerInfo, WirePointI

E = TypeVar("E", bound=Enum)


def _reported(enum_cls: type[E], value: int | None, default: E) -> E | None:
    """None when the engine left the field out, else the value with an unknown code read as default."""
    if value is None:
        return None
    return enum_or_default(enum_cls, value, default)


class PlayerInfo(BaseModel, frozen=True):
    id: int
    player_type: PlayerType
    # may be Race.RANDOM
    race_requested: Race
    # never random; None for opponents
    race_actual: Race | None = None
    difficulty: Difficulty | None = None
    ai_build: AIBuild | None = None
    player_name: str | None = None

    @classmethod
    def from_wire(cls, info: WirePlayerInfo) -> Self:
        player_type = enum_or_default(PlayerType, info.type, PlayerType.PARTICIPANT)
        is_computer = player_type is PlayerType.COMPUTER
        return cls(
            id=info.player_id,
            player_type=player_type,
            race_requested=enum_or_default(Race, info.race_requested, Race.NO_RACE),
            race_actual=_reported(Race, info.race_actual, Race.NO_RACE),
            difficulty=_reported(Difficulty, info.difficulty, Difficulty.VERY_EASY) if is_computer else None,
            ai_build=_reported(AIBuild, info.ai_build, AIBuild.RANDOM_BUILD) if is_computer else None,
            player_name=info.player_name,
        )


def _corner(point: WirePointI | None) -> tuple[int, int]:
    if point is None:
        return 0, 0
    return point.x, point.y


class GameInfo(BaseModel, frozen=True):
    # localized map name
    map_name: str
    # map file name without extension
    map_name_path: str
    mod_names: tuple[str, ...] = ()
    local_map_path: str
    players: dict[int, PlayerInfo] = Field(default_factory=dict)
    map_size: Size
    pathing_grid: PixelMap
    terrain_height: ByteMap
    placement_grid: PixelMap
    # area units can exist in, inside the unplayable map border
    playable_area: Rect
    start_locations: tuple[Point2, ...] = ()
    map_center: Point2

    @classmethod
    def from_wire(cls, game_info: ResponseGameInfo) -> Self:
        start_raw = game_info.start_raw
        map_size = start_raw.map_size if start_raw is not None else None
        area = start_raw.playable_area if start_raw is not None else None
        x0, y0 = _corner(area.p0 if area is not None else None)
        x1, y1 = _corner(area.p1 if area is not None else None)
        players = (PlayerInfo.from_wire(info) for info in game_info.player_info)

        return cls(
            map_name=game_info.map_name,
            # engine may run on Windows; PureWindowsPath splits on both separators
            map_name_path=PureWindowsPath(game_info.local_map_path).stem,
            mod_names=tuple(game_info.mod_names),
            local_map_path=game_info.local_map_path,
            players={player.id: player for player in players},
            map_size=Size(map_size.x, map_size.y) if map_size is not None else Size(0, 0),
            pathing_grid=PixelMap.from_wire(start_raw.pathing_grid if start_raw is not None else None),
            terrain_height=ByteMap.from_wire(start_raw.terrain_height if start_raw is not None else None),
            placement_grid=PixelMap.from_wire(start_raw.placement_grid if start_raw is not None else None),
            playable_area=Rect(x0, y0, x1, y1),
            start_locations=tuple(Point2(p.x, p.y) for p in start_raw.start_locations) if start_raw else (),
            map_center=Point2(float(x0 + (x1 - x0) // 2), float(y0 + (y1 - y0) // 2)),
        )
