"""WebSocket connection to the engine's API endpoint.

The engine serves its API at ``ws://<host>:<port>/sc2api``. Each request and
each reply is one binary WebSocket message, so no extra framing is needed.
"""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING
from uuid import uuid4

import structlog
from websockets.exceptions import ConnectionClosed, WebSocketException
from websockets.sync.client import connect

from sc2link.messaging.encoder import MAX_BUFFER_LEN, DecodeError
from sc2link.messaging.protocol import ConnectionProtocol

if TYPE_CHECKING:
    from websockets.sync.client import ClientConnection

    from sc2link.settings import ClientSettings

logger = structlog.get_logger()

API_PATH = "/sc2api"


class WebSocketConnection(ConnectionProtocol):
    def __init__(
        self,
        websocket: ClientConnection,
        connection_id: str | None = None,
        *,
        read_timeout: float | None = None,
        max_payload_bytes: int = MAX_BUFFER_LEN,
    ) -> None:
        self._websocket = websocket
        self._connection_id = connection_id or str(uuid4())
        self._read_timeout = read_timeout
        self.max_payload_bytes = max_payload_bytes

    @classmethod
    def open(
        cls,
        host: str,
        port: int,
        *,
        connect_timeout: float,
        read_timeout: float | None = None,
        max_payload_bytes: int = MAX_BUFFER_LEN,
    ) -> WebSocketConnection:
        """Connect to the engine. Raises OSError if the engine is unreachable or refuses the handshake."""
        uri = f"ws://{host}:{port}{API_PATH}"
        try:
            websocket = connect(uri, open_timeout=connect_timeout, max_size=max_payload_bytes)
        except WebSocketException as e:
            raise ConnectionError(f"handshake with {uri} failed: {e}") from e
        connection = cls(websocket, read_timeout=read_timeout, max_payload_bytes=max_payload_bytes)
        logger.info("engine connected", uri=uri, connection_id=connection.connection_id)
        return connection

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> WebSocketConnection:
        return cls.open(
            settings.host,
            settings.port,
            connect_timeout=settings.connect_timeout,
            read_timeout=settings.read_timeout,
            max_payload_bytes=settings.max_payload_bytes,
        )

    @property
    def connection_id(self) -> str:
        return self._connection_id

    def send_bytes(self, data: bytes) -> None:
        try:
            self._websocket.send(data)
        except ConnectionClosed:
            raise ConnectionError("WebSocket already disconnected") from None

    def receive_bytes(self) -> bytes:
        # a read timeout raises TimeoutError, an OSError
        try:
            message = self._websocket.recv(timeout=self._read_timeout)
        except ConnectionClosed as e:
            # includes frames over max_payload_bytes, which the library answers by closing
            raise ConnectionError(f"WebSocket disconnected: {e}") from None
        if isinstance(message, str):
            raise DecodeError("expected a binary message, got text")
        return message

    def close(self) -> None:
        with contextlib.suppress(WebSocketException, OSError):
            self._websocket.close()
        logger.info("engine disconnected", connection_id=self._connection_id)
