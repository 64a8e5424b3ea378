"""
Tile Objects

Host-side records for the items positioned by the layouts.
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Optional

from .geometry import Rect, WindowEdges


class TileState(Enum):
    """Tile state tracking."""

    UNMANAGED = auto()
    TILED = auto()


class Tile:
    """
    Represents a managed tile.

    The host owns tiles and decides which of them exist and in which order.
    Layouts only read and write ``weight``, ``width_weight``, ``geometry``,
    ``tiled_edges`` and ``state``.

    ``weight`` is the tile's share of the extent it is stacked along: its
    column height share, or the height share of the row it leads in the
    row-based layout. ``width_weight`` is its share of a row it shares with
    a neighbour.
    """

    def __init__(
        self,
        object_id: int,
        title: Optional[str] = None,
        weight: float = 1.0,
        width_weight: float = 1.0,
    ):
        self.object_id = object_id
        self.title = title

        self.weight = weight
        self.width_weight = width_weight

        self.geometry = Rect()
        self.tiled_edges = WindowEdges.NONE
        self.state = TileState.UNMANAGED

    @property
    def is_tiled(self) -> bool:
        return self.state == TileState.TILED

    def __repr__(self) -> str:
        return (
            f"Tile({self.object_id}, weight={self.weight:.3f}, "
            f"geometry={self.geometry})"
        )
