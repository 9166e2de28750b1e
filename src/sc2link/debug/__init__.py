"""Debug drawing, cheats and unit manipulation, batched per step."""

from sc2link.debug.commands import (
    CreateUnitCommand,
    DebugBox,
    DebugCommand,
    DebugGameState,
    DebugLine,
    DebugSphere,
    DebugText,
    DrawCommand,
    EndGameCommand,
    GameStateCommand,
    KillUnitCommand,
    SetUnitValueCommand,
    UnitValue,
)
from sc2link.debug.debugger import Debugger

__all__ = [
    "CreateUnitCommand",
    "DebugBox",
    "DebugCommand",
    "DebugGameState",
    "DebugLine",
    "DebugSphere",
    "DebugText",
    "Debugger",
    "DrawCommand",
    "EndGameCommand",
    "GameStateCommand",
    "KillUnitCommand",
    "SetUnitValueCommand",
    "UnitValue",
]
