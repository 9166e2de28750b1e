"""
Request/response transport over the single engine connection.

The engine protocol is strictly synchronous: the next inbound message
always answers the most recently sent request. Every request operation
holds one mutex over the connection for its full duration, so callers on
different threads never interleave writes and reads. close() does not take
the mutex, so it can release a caller stuck waiting for a reply.

Splitting a request into send_only() and wait_response() hands out a
PendingResponse token. While a token is outstanding no other request may
be written, which keeps the pairing between requests and replies intact.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, NoReturn

import structlog
from structlog.contextvars import bound_contextvars
from pydantic import ValidationError

from sc2link.exceptions import ResponsePairingError, TransportError
from sc2link.messaging.encoder import DecodeError, EncodeError
from sc2link.messaging.types import Request, Response

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from sc2link.messaging.protocol import ConnectionProtocol

logger = structlog.get_logger()


class PendingResponse:
    """Single-use token tying a send_only() to its wait_response()."""

    __slots__ = ("_consumed", "request_id")

    def __init__(self, request_id: int | None) -> None:
        self.request_id = request_id
        self._consumed = False

    @property
    def consumed(self) -> bool:
        return self._consumed


class API:
    """Synchronous engine API shared by any number of caller threads."""

    def __init__(self, connection: ConnectionProtocol) -> None:
        self._connection = connection
        self._lock = threading.Lock()
        self._pending: PendingResponse | None = None
        self._broken = False

    @property
    def connection(self) -> ConnectionProtocol:
        return self._connection

    @property
    def is_broken(self) -> bool:
        """True once a transport failure has made the connection unusable."""
        return self._broken

    def send(self, request: Request) -> Response:
        """Send a request and return the engine's reply."""
        with self._lock, self._bound(request.id):
            self._check_idle()
            self._write(request)
            return self._read()

    def send_request(self, request: Request) -> None:
        """Send a request, wait for the reply and discard it."""
        with self._lock, self._bound(request.id):
            self._check_idle()
            self._write(request)
            self._read()

    def send_only(self, request: Request) -> PendingResponse:
        """Send a request without waiting; pass the token to wait_response()."""
        with self._lock, self._bound(request.id):
            self._check_idle()
            self._write(request)
            self._pending = PendingResponse(request.id)
            return self._pending

    def wait_response(self, pending: PendingResponse) -> Response:
        """Block for the reply to the request that produced ``pending``."""
        with self._lock, self._bound(pending.request_id):
            if pending.consumed:
                raise ResponsePairingError("response token was already consumed")
            if pending is not self._pending:
                raise ResponsePairingError("response token does not belong to the outstanding request")
            pending._consumed = True  # noqa: SLF001
            self._pending = None
            return self._read()

    def close(self) -> None:
        """
        Close the connection without waiting for the operation lock.

        A caller blocked in a read is released with a TransportError, and the
        API is marked broken so no further request is attempted.
        """
        self._broken = True
        self._connection.close()
        logger.info("api closed", connection_id=self._connection.connection_id)

    def _bound(self, request_id: int | None) -> AbstractContextManager:
        return bound_contextvars(connection_id=self._connection.connection_id, request_id=request_id)

    def _check_idle(self) -> None:
        if self._pending is not None:
            raise ResponsePairingError("previous send_only() reply has not been read with wait_response()")

    def _write(self, request: Request) -> None:
        payload = request.to_wire()
        try:
            self._connection.send_message(payload)
        except (EncodeError, OSError) as e:
            self._fail("send failed", e)
        logger.debug("request sent", kinds=_kinds(payload))

    def _read(self) -> Response:
        try:
            raw = self._connection.receive_message()
            response = Response.model_validate(raw)
        except (DecodeError, OSError, ValidationError) as e:
            self._fail("receive failed", e)
        if response.error:
            logger.warning("engine reported errors", errors=response.error)
        return response

    def _fail(self, event: str, cause: Exception) -> NoReturn:
        self._broken = True
        logger.error(event, error=str(cause))
        raise TransportError(f"{event}: {cause}") from cause


def _kinds(payload: dict[str, Any]) -> list[str]:
    return [key for key in payload if key != "id"]
