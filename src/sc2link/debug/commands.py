"""
Debug commands and draw primitives in their wire shape.

Each command serializes to one entry of the engine's debug request list via
to_wire(). Values mirror the engine schema.
"""

from enum import IntEnum
from typing import Any

from pydantic import BaseModel

from sc2link.data.geometry import Point2, Point3
from sc2link.data.ids import UnitTypeId

Color = tuple[int, int, int]
ScreenPos = tuple[float, float]

# engine DebugEndGame.EndResult
END_RESULT_DECLARE_VICTORY = 2


class DebugGameState(IntEnum):
    SHOW_MAP = 1
    CONTROL_ENEMY = 2
    FOOD = 3
    FREE = 4
    ALL_RESOURCES = 5
    GOD = 6
    MINERALS = 7
    GAS = 8
    COOLDOWN = 10
    TECH_TREE = 11
    UPGRADE = 12
    FAST_BUILD = 13


class UnitValue(IntEnum):
    """Unit property changed by a set-unit-value command."""

    ENERGY = 1
    HEALTH = 2
    SHIELD = 3


def _point3(p: Point3) -> dict[str, float]:
    return {"x": p.x, "y": p.y, "z": p.z}


def _with_color(payload: dict[str, Any], color: Color | None) -> dict[str, Any]:
    if color is not None:
        r, g, b = color
        payload["color"] = {"r": r, "g": g, "b": b}
    return payload


# ============================================================================
# Draw primitives
# ============================================================================


class DebugText(BaseModel, frozen=True):
    """Text drawn either on screen (normalized 0..1, upper-left origin) or in the world."""

    text: str
    screen_pos: ScreenPos | None = None
    world_pos: Point3 | None = None
    color: Color | None = None
    size: int | None = None

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"text": self.text}
        if self.world_pos is not None:
            payload["world_pos"] = _point3(self.world_pos)
        else:
            x, y = self.screen_pos or (0.0, 0.0)
            payload["virtual_pos"] = {"x": x, "y": y}
        if self.size is not None:
            payload["size"] = self.size
        return _with_color(payload, self.color)


class DebugLine(BaseModel, frozen=True):
    p0: Point3
    p1: Point3
    color: Color | None = None

    def to_wire(self) -> dict[str, Any]:
        payload = {"line": {"p0": _point3(self.p0), "p1": _point3(self.p1)}}
        return _with_color(payload, self.color)


class DebugBox(BaseModel, frozen=True):
    min: Point3
    max: Point3
    color: Color | None = None

    def to_wire(self) -> dict[str, Any]:
        payload = {"min": _point3(self.min), "max": _point3(self.max)}
        return _with_color(payload, self.color)


class DebugSphere(BaseModel, frozen=True):
    center: Point3
    radius: float
    color: Color | None = None

    def to_wire(self) -> dict[str, Any]:
        payload = {"p": _point3(self.center), "r": self.radius}
        return _with_color(payload, self.color)


# ============================================================================
# Commands
# ============================================================================


class DrawCommand(BaseModel, frozen=True):
    text: tuple[DebugText, ...] = ()
    lines: tuple[DebugLine, ...] = ()
    boxes: tuple[DebugBox, ...] = ()
    spheres: tuple[DebugSphere, ...] = ()

    def to_wire(self) -> dict[str, Any]:
        return {
            "draw": {
                "text": [t.to_wire() for t in self.text],
                "lines": [line.to_wire() for line in self.lines],
                "boxes": [box.to_wire() for box in self.boxes],
                "spheres": [sphere.to_wire() for sphere in self.spheres],
            },
        }


class GameStateCommand(BaseModel, frozen=True):
    state: DebugGameState

    def to_wire(self) -> dict[str, Any]:
        return {"game_state": int(self.state)}


class CreateUnitCommand(BaseModel, frozen=True):
    unit_type: UnitTypeId
    # None spawns for the engine's default owner
    owner: int | None = None
    pos: Point2
    quantity: int

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "unit_type": int(self.unit_type),
            "pos": {"x": self.pos.x, "y": self.pos.y},
            "quantity": self.quantity,
        }
        if self.owner is not None:
            payload["owner"] = self.owner
        return {"create_unit": payload}


class KillUnitCommand(BaseModel, frozen=True):
    tags: tuple[int, ...]

    def to_wire(self) -> dict[str, Any]:
        return {"kill_unit": {"tag": list(self.tags)}}


class EndGameCommand(BaseModel, frozen=True):
    # False surrenders
    victory: bool

    def to_wire(self) -> dict[str, Any]:
        if self.victory:
            return {"end_game": {"end_result": END_RESULT_DECLARE_VICTORY}}
        return {"end_game": {}}


class SetUnitValueCommand(BaseModel, frozen=True):
    unit_tag: int
    unit_value: UnitValue
    value: int

    def to_wire(self) -> dict[str, Any]:
        return {
            "unit_value": {
                "unit_value": int(self.unit_value),
                "value": float(self.value),
                "unit_tag": self.unit_tag,
            },
        }


DebugCommand = (
    DrawCommand | GameStateCommand | CreateUnitCommand | KillUnitCommand | EndGameCommand | SetUnitValueCommand
)
