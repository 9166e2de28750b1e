"""
Debugger: accumulates debug commands issued during a step.

Independent commands (spawns, unit values, game-state cheats, ending the
game) are kept in issue order. Drawings and kill tags are batched and
appended as one DrawCommand and one KillUnitCommand when the batch is read.

get_commands() does not consume anything: the caller sends the batch and
then calls clear_commands(), so a failed send can be retried unchanged.
The debugger is owned by one bot; it does no locking of its own.
"""

from collections.abc import Iterable

from sc2link.data.geometry import Point2, Point3
from sc2link.data.ids import UnitTypeId
from sc2link.debug.commands import (
    Color,
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
    ScreenPos,
    SetUnitValueCommand,
    UnitValue,
)
from sc2link.messaging.types import Request, RequestDebug


class Debugger:
    def __init__(self) -> None:
        self._commands: list[DebugCommand] = []
        self._texts: list[DebugText] = []
        self._lines: list[DebugLine] = []
        self._boxes: list[DebugBox] = []
        self._spheres: list[DebugSphere] = []
        # dict keys keep first-insertion order and drop duplicates
        self._kill_tags: dict[int, None] = {}

    @property
    def has_commands(self) -> bool:
        return bool(
            self._commands or self._texts or self._lines or self._boxes or self._spheres or self._kill_tags,
        )

    def get_commands(self) -> list[DebugCommand]:
        """Independent commands in issue order, then the draw batch, then the kill batch."""
        commands = list(self._commands)
        if self._texts or self._lines or self._boxes or self._spheres:
            commands.append(
                DrawCommand(
                    text=tuple(self._texts),
                    lines=tuple(self._lines),
                    boxes=tuple(self._boxes),
                    spheres=tuple(self._spheres),
                ),
            )
        if self._kill_tags:
            commands.append(KillUnitCommand(tags=tuple(self._kill_tags)))
        return commands

    def clear_commands(self) -> None:
        self._commands.clear()
        self._texts.clear()
        self._lines.clear()
        self._boxes.clear()
        self._spheres.clear()
        self._kill_tags.clear()

    def build_request(self) -> Request | None:
        """Debug request for the pending batch, or None when there is nothing to send."""
        commands = self.get_commands()
        if not commands:
            return None
        return Request(debug=RequestDebug(debug=[command.to_wire() for command in commands]))

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw_text_world(
        self,
        text: str,
        pos: Point3,
        color: Color | None = None,
        size: int | None = None,
    ) -> None:
        self._texts.append(DebugText(text=text, world_pos=pos, color=color, size=size))

    def draw_text_screen(
        self,
        text: str,
        pos: ScreenPos | None = None,
        color: Color | None = None,
        size: int | None = None,
    ) -> None:
        """Draw text in the game window; (0, 0) is the upper-left corner, (1, 1) the lower-right."""
        self._texts.append(DebugText(text=text, screen_pos=pos or (0.0, 0.0), color=color, size=size))

    def draw_line(self, p0: Point3, p1: Point3, color: Color | None = None) -> None:
        self._lines.append(DebugLine(p0=p0, p1=p1, color=color))

    def draw_box(self, p0: Point3, p1: Point3, color: Color | None = None) -> None:
        self._boxes.append(DebugBox(min=p0, max=p1, color=color))

    def draw_cube(self, pos: Point3, half_edge: float, color: Color | None = None) -> None:
        offset = Point3(half_edge, half_edge, half_edge)
        self._boxes.append(DebugBox(min=pos - offset, max=pos + offset, color=color))

    def draw_sphere(self, pos: Point3, radius: float, color: Color | None = None) -> None:
        self._spheres.append(DebugSphere(center=pos, radius=radius, color=color))

    # ------------------------------------------------------------------
    # Units
    # ------------------------------------------------------------------

    def create_units(self, cmds: Iterable[tuple[UnitTypeId, int | None, Point2, int]]) -> None:
        """Spawn units from (unit type, owner player id, position, count) tuples."""
        self._commands.extend(
            CreateUnitCommand(unit_type=unit_type, owner=owner, pos=pos, quantity=count)
            for unit_type, owner, pos, count in cmds
        )

    def kill_units(self, tags: Iterable[int]) -> None:
        for tag in tags:
            self._kill_tags[tag] = None

    def set_unit_values(self, cmds: Iterable[tuple[int, UnitValue, int]]) -> None:
        """Set unit properties from (unit tag, value type, value) tuples."""
        self._commands.extend(
            SetUnitValueCommand(unit_tag=tag, unit_value=unit_value, value=value)
            for tag, unit_value, value in cmds
        )

    # ------------------------------------------------------------------
    # Game state
    # ------------------------------------------------------------------

    def win_game(self) -> None:
        self._commands.append(EndGameCommand(victory=True))

    def end_game(self) -> None:
        """End the game with a defeat for the bot."""
        self._commands.append(EndGameCommand(victory=False))

    def _game_state(self, state: DebugGameState) -> None:
        self._commands.append(GameStateCommand(state=state))

    def show_map(self) -> None:
        """Disable fog of war."""
        self._game_state(DebugGameState.SHOW_MAP)

    def control_enemy(self) -> None:
        self._game_state(DebugGameState.CONTROL_ENEMY)

    def cheat_supply(self) -> None:
        """Disable supply usage."""
        self._game_state(DebugGameState.FOOD)

    def cheat_free_build(self) -> None:
        self._game_state(DebugGameState.FREE)

    def cheat_resources(self) -> None:
        """Give 5000 minerals and gas."""
        self._game_state(DebugGameState.ALL_RESOURCES)

    def cheat_minerals(self) -> None:
        self._game_state(DebugGameState.MINERALS)

    def cheat_gas(self) -> None:
        self._game_state(DebugGameState.GAS)

    def cheat_god(self) -> None:
        """Make the bot's units invincible and raise their damage."""
        self._game_state(DebugGameState.GOD)

    def cheat_cooldown(self) -> None:
        self._game_state(DebugGameState.COOLDOWN)

    def cheat_tech_tree(self) -> None:
        self._game_state(DebugGameState.TECH_TREE)

    def cheat_upgrades(self) -> None:
        """
        Step through upgrade levels.

        First use researches all upgrades and sets attack/armor level 1,
        the second and third raise them to 2 and 3, the fourth removes all
        upgrades granted this way.
        """
        self._game_state(DebugGameState.UPGRADE)

    def cheat_fast_build(self) -> None:
        self._game_state(DebugGameState.FAST_BUILD)
