"""
MessagePack encoder/decoder for the engine wire format.

Each request and response is a single MessagePack map. Responses carrying
game data are large (thousands of catalog records, packed map grids), so
the decode limits are sized for that rather than for chat-sized payloads.
"""

from typing import Any

import msgpack


class DecodeError(Exception):
    """Error raised when MessagePack decoding fails."""


class EncodeError(Exception):
    """Error raised when a payload cannot be packed."""


# Size limits to bound memory use on a corrupted or hostile stream.
MAX_BUFFER_LEN = 64 * 1024 * 1024  # 64MB total payload
MAX_STR_LEN = 1024 * 1024  # 1MB per string
MAX_BIN_LEN = 16 * 1024 * 1024  # 16MB per binary (map grids)
MAX_ARRAY_LEN = 256 * 1024  # max array elements
MAX_MAP_LEN = 4096  # max map entries
MAX_EXT_LEN = 1024  # max extension data


def encode(data: dict[str, Any]) -> bytes:
    """
    Encode a dict to MessagePack bytes.

    Raises EncodeError if the dict holds values MessagePack cannot represent.
    """
    try:
        return msgpack.packb(data)
    except (TypeError, ValueError, OverflowError) as e:
        raise EncodeError(f"failed to encode MessagePack data: {e}") from e


def decode(data: bytes, *, max_buffer_len: int = MAX_BUFFER_LEN) -> dict[str, Any]:
    """
    Decode MessagePack bytes to a dict.

    Raises DecodeError if data is invalid, not a dict, or exceeds size limits.
    """
    if len(data) > max_buffer_len:
        raise DecodeError(f"payload too large: {len(data)} bytes (max {max_buffer_len})")
    try:
        result = msgpack.unpackb(
            data,
            raw=False,
            max_str_len=MAX_STR_LEN,
            max_bin_len=MAX_BIN_LEN,
            max_array_len=MAX_ARRAY_LEN,
            max_map_len=MAX_MAP_LEN,
            max_ext_len=MAX_EXT_LEN,
        )
    except (msgpack.UnpackException, ValueError) as e:
        raise DecodeError(f"failed to decode MessagePack data: {e}") from e

    if not isinstance(result, dict):
        raise DecodeError(f"expected dict, got {type(result).__name__}")

    return result
