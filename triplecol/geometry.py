"""
Geometry Types

Plain value types shared by the partitioner, the weight adjuster and the
layouts: rectangles, edge-resize deltas and split directions.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntFlag, auto
from typing import Tuple


class WindowEdges(IntFlag):
    """Edges of a tile that touch the border of the layout area."""

    NONE = 0
    TOP = 1
    BOTTOM = 2
    LEFT = 4
    RIGHT = 8

    ALL = TOP | BOTTOM | LEFT | RIGHT


class LayoutDirection(Enum):
    """Split direction for partitions."""

    HORIZONTAL = auto()  # Partitions arranged left-to-right
    VERTICAL = auto()  # Partitions arranged top-to-bottom


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle. Every split produces new instances."""

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def line(self, direction: LayoutDirection) -> Tuple[float, float]:
        """Return ``(begin, length)`` of this rectangle along ``direction``."""
        if direction == LayoutDirection.HORIZONTAL:
            return self.x, self.width
        return self.y, self.height

    def with_line(
        self, direction: LayoutDirection, begin: float, length: float
    ) -> "Rect":
        """Copy of this rectangle with its extent along ``direction`` replaced."""
        if direction == LayoutDirection.HORIZONTAL:
            return Rect(begin, self.y, length, self.height)
        return Rect(self.x, begin, self.width, length)

    def rounded(self) -> Tuple[int, int, int, int]:
        """Integer ``(x, y, width, height)`` for hosts that place in whole pixels."""
        x = round(self.x)
        y = round(self.y)
        return x, y, round(self.max_x) - x, round(self.max_y) - y


@dataclass(frozen=True)
class ResizeDelta:
    """
    Outward movement of each edge of a tile during a resize gesture.

    Positive values grow the tile past that edge, negative values shrink it.
    """

    north: float = 0
    south: float = 0
    east: float = 0
    west: float = 0

    @classmethod
    def from_rects(cls, basis: Rect, target: Rect) -> "ResizeDelta":
        """Delta that turns ``basis`` into ``target``."""
        return cls(
            north=basis.y - target.y,
            south=target.max_y - basis.max_y,
            east=target.max_x - basis.max_x,
            west=basis.x - target.x,
        )

    def along(self, direction: LayoutDirection) -> Tuple[float, float]:
        """
        Return ``(forward, backward)`` components for ``direction``.

        Forward is the east/south edge, backward the west/north edge.
        """
        if direction == LayoutDirection.HORIZONTAL:
            return self.east, self.west
        return self.south, self.north

    @property
    def is_horizontal(self) -> bool:
        return self.east != 0 or self.west != 0

    @property
    def is_vertical(self) -> bool:
        return self.north != 0 or self.south != 0
