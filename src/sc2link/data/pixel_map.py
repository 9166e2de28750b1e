"""Map grids decoded from the engine's packed image data.

Pathing and placement grids arrive with one bit per cell, most significant
bit first, rows in increasing y. Terrain height arrives with one byte per
cell in the same order. Both are indexed here as ``grid[x, y]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sc2link.messaging.types import WireImageData


def _dimensions(image: WireImageData | None) -> tuple[int, int]:
    if image is None or image.size is None:
        return 0, 0
    return image.size.x, image.size.y


def _check_bounds(x: int, y: int, width: int, height: int) -> None:
    if not (0 <= x < width and 0 <= y < height):
        raise IndexError(f"cell ({x}, {y}) outside {width}x{height} grid")


@dataclass(frozen=True)
class PixelMap:
    """1-bit grid: True where the engine set the bit."""

    width: int
    height: int
    data: bytes

    @classmethod
    def from_wire(cls, image: WireImageData | None) -> PixelMap:
        width, height = _dimensions(image)
        return cls(width=width, height=height, data=image.data if image is not None else b"")

    def __getitem__(self, cell: tuple[int, int]) -> bool:
        x, y = cell
        _check_bounds(x, y, self.width, self.height)
        index = y * self.width + x
        return bool((self.data[index >> 3] >> (7 - (index & 7))) & 1)


@dataclass(frozen=True)
class ByteMap:
    """8-bit grid, e.g. terrain height."""

    width: int
    height: int
    data: bytes

    @classmethod
    def from_wire(cls, image: WireImageData | None) -> ByteMap:
        width, height = _dimensions(image)
        return cls(width=width, height=height, data=image.data if image is not None else b"")

    def __getitem__(self, cell: tuple[int, int]) -> int:
        x, y = cell
        _check_bounds(x, y, self.width, self.height)
        return self.data[y * self.width + x]
