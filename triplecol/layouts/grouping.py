"""
Column Grouping

Decides, from the tile count alone, how an ordered tile list is cut into
groups (columns, or rows for the row-based layout). Both ``apply`` and
``adjust`` derive their grouping from here so the two always agree.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


class Regime(Enum):
    """Structural arrangement selected for a tile count."""

    SINGLE = auto()  # One group fills the area
    SPLIT = auto()  # Two tiles side by side
    STACK = auto()  # Master beside two stacked tiles
    MASTER_STACK = auto()  # Full master column beside a single tile
    THREE_COLUMNS = auto()  # Master, left stack and right stack
    ROWS = auto()  # Master beside rows of up to two tiles


@dataclass(frozen=True)
class Grouping:
    """
    Sizes of consecutive tile groups, in spatial order.

    Group 0 is always the master group (or the only group).
    """

    regime: Regime
    sizes: Tuple[int, ...]

    @property
    def count(self) -> int:
        return len(self.sizes)

    @property
    def tile_count(self) -> int:
        return sum(self.sizes)

    def bounds(self, group: int) -> Tuple[int, int]:
        """Half-open index range ``[start, end)`` of ``group``."""
        start = sum(self.sizes[:group])
        return start, start + self.sizes[group]

    def split(self, items: Sequence[T]) -> List[List[T]]:
        """Cut ``items`` into the groups."""
        return [list(items[slice(*self.bounds(g))]) for g in range(self.count)]

    def locate(self, index: int) -> Optional[Tuple[int, int]]:
        """Return ``(group, position_within_group)`` of a tile index."""
        if index < 0:
            return None
        start = 0
        for group, size in enumerate(self.sizes):
            if index < start + size:
                return group, index - start
            start += size
        return None


def column_groups(tile_count: int, master_capacity: int) -> Grouping:
    """
    Grouping of the left-master column layout.

    The two- and three-tile arrangements take precedence over the master
    capacity. Beyond ``master_capacity + 1`` tiles the rest is shared by two
    stacks, the left one taking the larger half.
    """
    master_capacity = max(master_capacity, 1)

    if tile_count <= 0:
        return Grouping(Regime.SINGLE, ())
    if tile_count == 1:
        return Grouping(Regime.SINGLE, (1,))
    if tile_count == 2:
        return Grouping(Regime.SPLIT, (1, 1))
    if tile_count == 3:
        return Grouping(Regime.STACK, (1, 2))
    if tile_count <= master_capacity:
        return Grouping(Regime.SINGLE, (tile_count,))
    if tile_count == master_capacity + 1:
        return Grouping(Regime.MASTER_STACK, (master_capacity, 1))

    rest = tile_count - master_capacity
    right = rest // 2
    return Grouping(Regime.THREE_COLUMNS, (master_capacity, rest - right, right))


def row_groups(tile_count: int) -> Grouping:
    """
    Grouping of the row-based layout: one master tile, then rows of two.

    The last row holds a single tile when the stack count is odd.
    """
    if tile_count <= 0:
        return Grouping(Regime.SINGLE, ())
    if tile_count == 1:
        return Grouping(Regime.SINGLE, (1,))
    if tile_count == 2:
        return Grouping(Regime.SPLIT, (1, 1))
    if tile_count == 3:
        return Grouping(Regime.STACK, (1, 2))

    stack = tile_count - 1
    rows = [2] * (stack // 2)
    if stack % 2:
        rows.append(1)
    return Grouping(Regime.ROWS, (1, *rows))
