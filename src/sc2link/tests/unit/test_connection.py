"""Unit tests for the engine WebSocket connection."""

import socket
import threading
from unittest.mock import MagicMock

import pytest
from websockets.exceptions import ConnectionClosed
from websockets.sync.server import serve

from sc2link.messaging.connection import API_PATH, WebSocketConnection
from sc2link.messaging.encoder import DecodeError, encode
from sc2link.settings import ClientSettings


class TestWebSocketConnection:
    def test_send_message_sends_one_binary_message(self):
        mock_ws = MagicMock()
        conn = WebSocketConnection(mock_ws, connection_id="test-conn")

        conn.send_message({"ping": {}})

        mock_ws.send.assert_called_once_with(encode({"ping": {}}))

    def test_receive_message_decodes_binary_message(self):
        mock_ws = MagicMock()
        mock_ws.recv.return_value = encode({"id": 3, "ping": {"game_version": "5.0.11"}})
        conn = WebSocketConnection(mock_ws)

        assert conn.receive_message() == {"id": 3, "ping": {"game_version": "5.0.11"}}

    def test_receive_uses_read_timeout(self):
        mock_ws = MagicMock()
        mock_ws.recv.return_value = b"\x80"
        conn = WebSocketConnection(mock_ws, read_timeout=2.5)

        conn.receive_bytes()

        mock_ws.recv.assert_called_once_with(timeout=2.5)

    def test_send_converts_closed_to_connection_error(self):
        mock_ws = MagicMock()
        mock_ws.send.side_effect = ConnectionClosed(None, None)
        conn = WebSocketConnection(mock_ws)

        with pytest.raises(ConnectionError, match="WebSocket already disconnected"):
            conn.send_bytes(b"data")

    def test_receive_converts_closed_to_connection_error(self):
        mock_ws = MagicMock()
        mock_ws.recv.side_effect = ConnectionClosed(None, None)
        conn = WebSocketConnection(mock_ws)

        with pytest.raises(ConnectionError, match="WebSocket disconnected"):
            conn.receive_bytes()

    def test_read_timeout_is_os_error(self):
        mock_ws = MagicMock()
        mock_ws.recv.side_effect = TimeoutError("timed out")
        conn = WebSocketConnection(mock_ws)

        with pytest.raises(OSError):
            conn.receive_bytes()

    def test_text_message_rejected(self):
        mock_ws = MagicMock()
        mock_ws.recv.return_value = "not msgpack"
        conn = WebSocketConnection(mock_ws)

        with pytest.raises(DecodeError, match="expected a binary message"):
            conn.receive_bytes()

    def test_close_suppresses_errors(self):
        mock_ws = MagicMock()
        mock_ws.close.side_effect = OSError("already gone")
        conn = WebSocketConnection(mock_ws)

        conn.close()

        mock_ws.close.assert_called_once()

    def test_generates_connection_id(self):
        assert WebSocketConnection(MagicMock()).connection_id


@pytest.fixture
def engine_server():
    """Local WebSocket server echoing binary messages and recording request paths."""
    paths: list[str] = []

    def handler(websocket):
        paths.append(websocket.request.path)
        for message in websocket:
            websocket.send(message)

    with serve(handler, "127.0.0.1", 0) as server:
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        yield server.socket.getsockname()[1], paths
    thread.join(timeout=5)


class TestOpen:
    def test_from_settings_connects_to_api_path(self, engine_server):
        port, paths = engine_server
        settings = ClientSettings(port=port, connect_timeout=5, read_timeout=5, max_payload_bytes=2048)

        conn = WebSocketConnection.from_settings(settings)
        try:
            conn.send_message({"id": 1, "ping": {}})
            assert conn.receive_message() == {"id": 1, "ping": {}}
            assert conn.max_payload_bytes == 2048
        finally:
            conn.close()

        assert paths == [API_PATH]

    def test_reply_over_size_limit_disconnects(self, engine_server):
        port, _ = engine_server
        conn = WebSocketConnection.open("127.0.0.1", port, connect_timeout=5, read_timeout=5, max_payload_bytes=1024)
        try:
            # the echo comes back larger than the client accepts
            conn.send_bytes(b"\x00" * 4096)
            with pytest.raises(ConnectionError):
                conn.receive_bytes()
        finally:
            conn.close()

    def test_close_releases_blocked_reader(self, engine_server):
        port, _ = engine_server
        conn = WebSocketConnection.open("127.0.0.1", port, connect_timeout=5)
        errors: list[Exception] = []

        def reader() -> None:
            try:
                conn.receive_bytes()
            except ConnectionError as e:
                errors.append(e)

        thread = threading.Thread(target=reader)
        thread.start()
        conn.close()
        thread.join(timeout=5)

        assert not thread.is_alive()
        assert len(errors) == 1

    def test_unreachable_engine_raises(self):
        with socket.create_server(("127.0.0.1", 0)) as server:
            port = server.getsockname()[1]

        with pytest.raises(OSError):
            WebSocketConnection.open("127.0.0.1", port, connect_timeout=1)

    def test_non_websocket_peer_raises_connection_error(self):
        with socket.create_server(("127.0.0.1", 0)) as server:
            port = server.getsockname()[1]

            def refuse() -> None:
                peer, _ = server.accept()
                with peer:
                    peer.recv(4096)
                    peer.sendall(b"HTTP/1.1 404 Not Found\r\nContent-Length: 0\r\n\r\n")

            thread = threading.Thread(target=refuse, daemon=True)
            thread.start()

            with pytest.raises(ConnectionError, match="handshake"):
                WebSocketConnection.open("127.0.0.1", port, connect_timeout=5)
            thread.join(timeout=5)
