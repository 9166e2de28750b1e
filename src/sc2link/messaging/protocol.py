"""Abstract connection protocol for MessagePack binary communication."""

from abc import ABC, abstractmethod
from typing import Any

from sc2link.messaging.encoder import MAX_BUFFER_LEN, decode, encode


class ConnectionProtocol(ABC):
    """
    Abstract interface for the connection to the game engine.

    One instance carries whole binary messages in both directions; framing
    is the implementation's concern. This abstraction lets the transport be
    tested without a running engine.
    """

    max_payload_bytes: int = MAX_BUFFER_LEN

    @property
    @abstractmethod
    def connection_id(self) -> str:
        """Unique identifier for this connection."""
        ...

    @abstractmethod
    def send_bytes(self, data: bytes) -> None:
        """
        Send one raw message to the engine.
        """
        ...

    @abstractmethod
    def receive_bytes(self) -> bytes:
        """
        Block until the next raw message from the engine arrives.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """
        Close the connection.
        """
        ...

    def send_message(self, data: dict[str, Any]) -> None:
        """
        Send a message to the engine using MessagePack encoding.
        """
        self.send_bytes(encode(data))

    def receive_message(self) -> dict[str, Any]:
        """
        Receive a message from the engine using MessagePack decoding.
        """
        raw = self.receive_bytes()
        return decode(raw, max_buffer_len=self.max_payload_bytes)
