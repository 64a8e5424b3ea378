"""
Triple Column Left Layout

Master column on the left, with up to two stack columns to its right.
"""

from __future__ import annotations
import logging
from typing import List, Optional, TYPE_CHECKING

from .grouping import Grouping, column_groups
from .layout_base import Layout, Shortcut
from .layout_utils import (
    adjust_area_half_weights,
    adjust_area_weights,
    clip,
    place_tile,
    slide,
    split_area_weighted,
)
from ..config import LayoutConfig
from ..geometry import LayoutDirection, Rect, ResizeDelta
from ..objects import TileState

if TYPE_CHECKING:
    from ..objects import Tile

log = logging.getLogger(__name__)


class TripleColumnLeftLayout(Layout):
    """
    Left-master three column layout.

    Up to ``master_capacity`` tiles share the master column. The master
    column takes ``master_ratio`` of the width; once both stack columns
    exist they split the remaining width evenly.
    """

    id = "TripleColumnLeft"

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        master_ratio: Optional[float] = None,
        master_capacity: Optional[int] = None,
    ):
        self.config = config or LayoutConfig()
        self.master_ratio = (
            self.config.default_master_ratio if master_ratio is None else master_ratio
        )
        self.master_capacity = (
            self.config.default_master_capacity
            if master_capacity is None
            else master_capacity
        )

    @property
    def name(self) -> str:
        return self.id

    @property
    def gap(self) -> float:
        return self.config.tile_layout_gap

    def describe(self) -> str:
        return f"Triple Column Left [{self.master_capacity}]"

    def __str__(self) -> str:
        return f"TripleColumnLeft(nmaster={self.master_capacity})"

    def grouping(self, tile_count: int) -> Grouping:
        return column_groups(tile_count, self.master_capacity)

    def column_weights(self, grouping: Grouping) -> List[float]:
        """Horizontal weights of the columns of ``grouping``."""
        if grouping.count <= 1:
            return [1.0]
        stack_ratio = 1 - self.master_ratio
        if grouping.count == 2:
            return [self.master_ratio, stack_ratio]
        return [self.master_ratio, stack_ratio / 2, stack_ratio / 2]

    def column_areas(self, area: Rect, grouping: Grouping) -> List[Rect]:
        return split_area_weighted(
            area, self.column_weights(grouping), self.gap, LayoutDirection.HORIZONTAL
        )

    def apply(self, tiles: List["Tile"], area: Rect) -> None:
        for tile in tiles:
            tile.state = TileState.TILED
        if not tiles:
            return

        grouping = self.grouping(len(tiles))
        columns = self.column_areas(area, grouping)
        for column, group in zip(columns, grouping.split(tiles)):
            rects = split_area_weighted(
                column,
                [tile.weight for tile in group],
                self.gap,
                LayoutDirection.VERTICAL,
            )
            for tile, rect in zip(group, rects):
                place_tile(tile, rect, area)

        log.debug(
            "Applied %s to %d tiles (%s %s)",
            self,
            len(tiles),
            grouping.regime.name,
            grouping.sizes,
        )

    def adjust(
        self, area: Rect, tiles: List["Tile"], basis: "Tile", delta: ResizeDelta
    ) -> None:
        if len(tiles) <= 1:
            return
        if basis not in tiles:
            log.warning("Resized tile %r is not laid out by %s", basis, self)
            return

        grouping = self.grouping(len(tiles))
        group, position = grouping.locate(tiles.index(basis))

        # Column boundaries first, then the boundaries inside the column
        if grouping.count > 1 and delta.is_horizontal:
            self._adjust_master_ratio(area, grouping, group, delta)

        members = grouping.split(tiles)[group]
        if len(members) > 1 and delta.is_vertical:
            column = self.column_areas(area, grouping)[group]
            weights = adjust_area_weights(
                column,
                [tile.weight for tile in members],
                self.gap,
                position,
                delta,
                LayoutDirection.VERTICAL,
            )
            for tile, weight in zip(members, weights):
                tile.weight = weight * len(members)

    def _adjust_master_ratio(
        self, area: Rect, grouping: Grouping, column: int, delta: ResizeDelta
    ):
        if grouping.count == 2:
            ratio = adjust_area_half_weights(
                area,
                self.master_ratio,
                self.gap,
                column,
                delta,
                LayoutDirection.HORIZONTAL,
            )
        else:
            master, left, _ = adjust_area_weights(
                area,
                self.column_weights(grouping),
                self.gap,
                column,
                delta,
                LayoutDirection.HORIZONTAL,
            )
            if column == 0 or (column == 1 and delta.west != 0):
                ratio = master
            else:
                # Stacks split the rest evenly, so the border between them
                # sits at (1 + r) / 2 of the width
                ratio = 2 * (master + left) - 1

        self.master_ratio = clip(
            ratio, self.config.min_master_ratio, self.config.max_master_ratio
        )

    def handle_shortcut(self, shortcut: Shortcut) -> bool:
        if shortcut == Shortcut.INCREASE_MASTER:
            self.resize_master(+1)
        elif shortcut == Shortcut.DECREASE_MASTER:
            self.resize_master(-1)
        elif shortcut == Shortcut.SHIFT_MASTER_LEFT:
            self.shift_master(-self.config.master_ratio_step)
        elif shortcut == Shortcut.SHIFT_MASTER_RIGHT:
            self.shift_master(+self.config.master_ratio_step)
        else:
            return False
        return True

    def resize_master(self, step: int):
        self.master_capacity = int(
            clip(self.master_capacity + step, 1, self.config.max_master_capacity)
        )
        log.info("Master capacity set to %d", self.master_capacity)

    def shift_master(self, step: float):
        self.master_ratio = clip(
            slide(self.master_ratio, step),
            self.config.min_master_ratio,
            self.config.max_master_ratio,
        )
        log.info("Master ratio set to %.2f", self.master_ratio)

    def clone(self) -> "TripleColumnLeftLayout":
        return TripleColumnLeftLayout(
            self.config,
            master_ratio=self.master_ratio,
            master_capacity=self.master_capacity,
        )
