from sc2link.data.geometry import Point2, Point3
from sc2link.data.ids import UnitTypeId
from sc2link.debug.commands import (
    CreateUnitCommand,
    DebugBox,
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


class TestDrawWire:
    def test_world_text(self):
        text = DebugText(text="A", world_pos=Point3(1.0, 2.0, 3.0), color=(1, 2, 3), size=12)

        assert text.to_wire() == {
            "text": "A",
            "world_pos": {"x": 1.0, "y": 2.0, "z": 3.0},
            "size": 12,
            "color": {"r": 1, "g": 2, "b": 3},
        }

    def test_screen_text_without_color(self):
        text = DebugText(text="B", screen_pos=(0.25, 0.75))

        assert text.to_wire() == {"text": "B", "virtual_pos": {"x": 0.25, "y": 0.75}}

    def test_primitives(self):
        p0, p1 = Point3(0.0, 0.0, 0.0), Point3(1.0, 1.0, 1.0)
        draw = DrawCommand(
            lines=(DebugLine(p0=p0, p1=p1),),
            boxes=(DebugBox(min=p0, max=p1, color=(0, 255, 0)),),
            spheres=(DebugSphere(center=p1, radius=2.5),),
        )

        assert draw.to_wire() == {
            "draw": {
                "text": [],
                "lines": [{"line": {"p0": {"x": 0.0, "y": 0.0, "z": 0.0}, "p1": {"x": 1.0, "y": 1.0, "z": 1.0}}}],
                "boxes": [
                    {
                        "min": {"x": 0.0, "y": 0.0, "z": 0.0},
                        "max": {"x": 1.0, "y": 1.0, "z": 1.0},
                        "color": {"r": 0, "g": 255, "b": 0},
                    },
                ],
                "spheres": [{"p": {"x": 1.0, "y": 1.0, "z": 1.0}, "r": 2.5}],
            },
        }


class TestCommandWire:
    def test_game_state(self):
        assert GameStateCommand(state=DebugGameState.FAST_BUILD).to_wire() == {"game_state": 13}

    def test_create_unit_with_owner(self):
        command = CreateUnitCommand(unit_type=UnitTypeId.MARINE, owner=2, pos=Point2(5.0, 6.0), quantity=3)

        assert command.to_wire() == {
            "create_unit": {"unit_type": 48, "owner": 2, "pos": {"x": 5.0, "y": 6.0}, "quantity": 3},
        }

    def test_create_unit_without_owner_omits_it(self):
        command = CreateUnitCommand(unit_type=UnitTypeId.SCV, pos=Point2(1.0, 1.0), quantity=1)

        assert "owner" not in command.to_wire()["create_unit"]

    def test_kill_unit(self):
        assert KillUnitCommand(tags=(5, 7, 9)).to_wire() == {"kill_unit": {"tag": [5, 7, 9]}}

    def test_victory_declares_end_result(self):
        assert EndGameCommand(victory=True).to_wire() == {"end_game": {"end_result": 2}}

    def test_surrender_omits_end_result(self):
        assert EndGameCommand(victory=False).to_wire() == {"end_game": {}}

    def test_unit_value_sent_as_float(self):
        command = SetUnitValueCommand(unit_tag=4295229441, unit_value=UnitValue.SHIELD, value=20)

        assert command.to_wire() == {
            "unit_value": {"unit_value": 3, "value": 20.0, "unit_tag": 4295229441},
        }
