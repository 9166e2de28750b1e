from unittest.mock import patch

import pytest

from sc2link.client import SC2Client
from sc2link.data.ids import AbilityId, UnitTypeId
from sc2link.exceptions import MissingSubmessageError, TransportError
from sc2link.messaging.api import API


@pytest.fixture
def client(conn):
    return SC2Client(API(conn))


class TestRequests:
    def test_request_game_data(self, client, conn):
        conn.simulate_receive(
            {
                "data": {
                    "abilities": [{"ability_id": int(AbilityId.ATTACK), "link_name": "Attack"}],
                    "units": [{"unit_id": int(UnitTypeId.MARINE), "name": "Marine"}, {"unit_id": 999_999}],
                },
            },
        )

        game_data = client.request_game_data()

        assert list(game_data.units) == [UnitTypeId.MARINE]
        assert AbilityId.ATTACK in game_data.abilities
        assert conn.sent_messages == [
            {
                "data": {
                    "ability_id": True,
                    "unit_type_id": True,
                    "upgrade_id": True,
                    "buff_id": True,
                    "effect_id": True,
                },
            },
        ]

    def test_request_game_data_missing_submessage(self, client, conn):
        conn.simulate_receive({"error": ["Not in game"]})

        with pytest.raises(MissingSubmessageError, match="Not in game") as exc_info:
            client.request_game_data()

        assert exc_info.value.submessage == "data"

    def test_request_game_info(self, client, conn):
        conn.simulate_receive({"game_info": {"map_name": "Test", "local_map_path": "Test.SC2Map"}})

        info = client.request_game_info()

        assert info.map_name_path == "Test"
        assert conn.sent_messages == [{"game_info": {}}]

    def test_request_game_info_missing_submessage(self, client, conn):
        conn.simulate_receive({})

        with pytest.raises(MissingSubmessageError, match="game_info"):
            client.request_game_info()

    def test_request_score(self, client, conn):
        conn.simulate_receive(
            {"observation": {"observation": {"game_loop": 10, "score": {"score": 42, "score_details": {}}}}},
        )

        score = client.request_score(game_loop=10)

        assert score.total_score == 42
        assert conn.sent_messages == [{"observation": {"game_loop": 10}}]

    def test_request_score_without_details_raises(self, client, conn):
        conn.simulate_receive({"observation": {"observation": {"score": {"score": 42}}}})

        with pytest.raises(MissingSubmessageError, match="score_details"):
            client.request_score()

    def test_ping(self, client, conn):
        conn.simulate_receive({"ping": {"game_version": "5.0.11.81433", "data_build": 81433}})

        assert client.ping().data_build == 81433


class TestFlushDebug:
    def test_nothing_queued_sends_nothing(self, client, conn):
        assert client.flush_debug() is False
        assert conn.sent_messages == []

    def test_sends_and_clears(self, client, conn):
        conn.simulate_receive({"debug": {}})
        client.debugger.show_map()

        assert client.flush_debug() is True
        assert conn.sent_messages == [{"debug": {"debug": [{"game_state": 1}]}}]
        assert not client.debugger.has_commands

    def test_failed_send_keeps_batch(self, client, conn):
        client.debugger.kill_units([5])

        # no reply queued, so the read fails
        with pytest.raises(TransportError):
            client.flush_debug()

        assert client.debugger.has_commands
        assert client.api.is_broken


class TestLifecycle:
    def test_close(self, client, conn):
        client.close()

        assert conn.is_closed

    def test_connect_configures_logging_and_opens_engine_connection(self, settings, conn, tmp_path):
        settings = settings.model_copy(update={"log_dir": str(tmp_path)})
        with (
            patch("sc2link.client.setup_logging") as setup_logging,
            patch("sc2link.client.WebSocketConnection.from_settings", return_value=conn) as from_settings,
        ):
            client = SC2Client.connect(settings)

        setup_logging.assert_called_once_with(str(tmp_path))
        from_settings.assert_called_once_with(settings)
        assert client.api.connection is conn
