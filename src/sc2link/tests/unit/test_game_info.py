import pytest

from sc2link.data.enums import AIBuild, Difficulty, PlayerType, Race
from sc2link.data.game_info import GameInfo, PlayerInfo
from sc2link.data.geometry import Point2, Rect, Size
from sc2link.data.pixel_map import ByteMap, PixelMap
from sc2link.messaging.types import ResponseGameInfo, WireImageData, WirePlayerInfo


def _game_info_wire(**overrides) -> ResponseGameInfo:
    fields = {
        "map_name": "Acropolis LE",
        "mod_names": ["Mods/Liberty.SC2Mod"],
        "local_map_path": "C:\\Maps\\AcropolisLE.SC2Map",
        "player_info": [
            {"player_id": 1, "type": 1, "race_requested": 1, "race_actual": 1, "player_name": "bot"},
            {"player_id": 2, "type": 2, "race_requested": 4, "difficulty": 7, "ai_build": 5},
        ],
        "start_raw": {
            "map_size": {"x": 176, "y": 172},
            "pathing_grid": {"bits_per_pixel": 1, "size": {"x": 8, "y": 2}, "data": b"\x80\x01"},
            "terrain_height": {"bits_per_pixel": 8, "size": {"x": 2, "y": 2}, "data": b"\x01\x02\x03\x04"},
            "placement_grid": {"bits_per_pixel": 1, "size": {"x": 8, "y": 1}, "data": b"\x0f"},
            "playable_area": {"p0": {"x": 18, "y": 4}, "p1": {"x": 157, "y": 147}},
            "start_locations": [{"x": 33.5, "y": 138.5}],
        },
    }
    fields.update(overrides)
    return ResponseGameInfo.model_validate(fields)


class TestGameInfo:
    def test_map_fields(self):
        info = GameInfo.from_wire(_game_info_wire())

        assert info.map_name == "Acropolis LE"
        assert info.map_name_path == "AcropolisLE"
        assert info.mod_names == ("Mods/Liberty.SC2Mod",)
        assert info.map_size == Size(176, 172)
        assert info.playable_area == Rect(18, 4, 157, 147)
        assert info.start_locations == (Point2(33.5, 138.5),)

    def test_map_center_uses_integer_halving(self):
        info = GameInfo.from_wire(_game_info_wire())

        # (157 - 18) // 2 == 69, (147 - 4) // 2 == 71
        assert info.map_center == Point2(87.0, 75.0)

    def test_map_name_path_from_posix_path(self):
        info = GameInfo.from_wire(_game_info_wire(local_map_path="/home/sc2/Maps/Ladder/EverDreamLE.SC2Map"))

        assert info.map_name_path == "EverDreamLE"

    def test_grids(self):
        info = GameInfo.from_wire(_game_info_wire())

        assert info.pathing_grid[0, 0]
        assert not info.pathing_grid[1, 0]
        assert info.pathing_grid[7, 1]
        assert info.terrain_height[1, 1] == 4
        assert not info.placement_grid[3, 0]
        assert info.placement_grid[4, 0]

    def test_players_keyed_by_id(self):
        info = GameInfo.from_wire(_game_info_wire())

        assert set(info.players) == {1, 2}
        assert info.players[1].player_name == "bot"
        assert info.players[2].race_requested is Race.RANDOM

    def test_missing_start_raw_gives_empty_map(self):
        info = GameInfo.from_wire(_game_info_wire(start_raw=None))

        assert info.map_size == Size(0, 0)
        assert info.playable_area == Rect(0, 0, 0, 0)
        assert info.map_center == Point2(0.0, 0.0)
        assert info.start_locations == ()
        assert info.pathing_grid.width == 0


class TestPlayerInfo:
    def test_participant_has_no_ai_fields(self):
        wire = WirePlayerInfo(player_id=1, type=1, race_requested=2, race_actual=2, difficulty=3, ai_build=2)
        player = PlayerInfo.from_wire(wire)

        assert player.player_type is PlayerType.PARTICIPANT
        assert player.race_actual is Race.ZERG
        assert player.difficulty is None
        assert player.ai_build is None

    def test_computer_has_ai_fields(self):
        wire = WirePlayerInfo(player_id=2, type=2, race_requested=3, difficulty=10, ai_build=6)
        player = PlayerInfo.from_wire(wire)

        assert player.player_type is PlayerType.COMPUTER
        assert player.difficulty is Difficulty.CHEAT_INSANE
        assert player.ai_build is AIBuild.AIR
        assert player.race_actual is None

    def test_unknown_enum_values_fall_back(self):
        player = PlayerInfo.from_wire(WirePlayerInfo(player_id=3, type=9, race_requested=9))

        assert player.player_type is PlayerType.PARTICIPANT
        assert player.race_requested is Race.NO_RACE

    def test_unknown_computer_codes_fall_back_to_wire_defaults(self):
        wire = WirePlayerInfo(player_id=2, type=2, race_requested=1, race_actual=40, difficulty=99, ai_build=77)
        player = PlayerInfo.from_wire(wire)

        assert player.race_actual is Race.NO_RACE
        assert player.difficulty is Difficulty.VERY_EASY
        assert player.ai_build is AIBuild.RANDOM_BUILD

    def test_absent_computer_codes_stay_none(self):
        player = PlayerInfo.from_wire(WirePlayerInfo(player_id=2, type=2, race_requested=1))

        assert player.difficulty is None
        assert player.ai_build is None


class TestPixelMap:
    def test_bits_read_most_significant_first(self):
        grid = PixelMap.from_wire(WireImageData(bits_per_pixel=1, size={"x": 4, "y": 2}, data=b"\x81"))

        assert grid[0, 0]
        assert not grid[1, 0]
        assert grid[3, 1]

    def test_out_of_bounds_raises(self):
        grid = PixelMap.from_wire(WireImageData(bits_per_pixel=1, size={"x": 8, "y": 1}, data=b"\x00"))

        with pytest.raises(IndexError):
            grid[8, 0]

    def test_byte_map_row_major(self):
        grid = ByteMap.from_wire(WireImageData(bits_per_pixel=8, size={"x": 3, "y": 2}, data=bytes(range(6))))

        assert grid[2, 0] == 2
        assert grid[0, 1] == 3

    def test_absent_image_is_empty(self):
        grid = ByteMap.from_wire(None)

        assert (grid.width, grid.height, grid.data) == (0, 0, b"")
