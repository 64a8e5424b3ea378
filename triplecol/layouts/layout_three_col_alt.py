"""
Three Column Alt Layout

A single master tile on the left; the stack on the right is filled with
rows of two tiles.
"""

from __future__ import annotations
import logging
from typing import List, Optional, TYPE_CHECKING

from .grouping import Grouping, Regime, row_groups
from .layout_base import Layout, Shortcut
from .layout_utils import (
    adjust_area_half_weights,
    adjust_area_weights,
    clip,
    place_tile,
    slide,
    split_area_half_weighted,
    split_area_weighted,
)
from ..config import LayoutConfig
from ..geometry import LayoutDirection, Rect, ResizeDelta
from ..objects import TileState

if TYPE_CHECKING:
    from ..objects import Tile

log = logging.getLogger(__name__)


class ThreeColAltLayout(Layout):
    """
    Left-master layout with a stack of rows.

    Row heights follow the ``weight`` of each row's tiles (both tiles of a
    row carry the same value, the leading tile's is authoritative). The
    two tiles of a row share its width by their ``width_weight``.
    """

    id = "ThreeColAlt"

    def __init__(
        self, config: Optional[LayoutConfig] = None, master_ratio: Optional[float] = None
    ):
        self.config = config or LayoutConfig()
        self.master_ratio = (
            self.config.default_alt_master_ratio
            if master_ratio is None
            else master_ratio
        )

    @property
    def name(self) -> str:
        return self.id

    @property
    def gap(self) -> float:
        return self.config.tile_layout_gap

    def describe(self) -> str:
        return "Three Column Alt"

    def __str__(self) -> str:
        return "ThreeColAlt"

    def grouping(self, tile_count: int) -> Grouping:
        return row_groups(tile_count)

    def _split_master(self, area: Rect) -> List[Rect]:
        return split_area_half_weighted(
            area, self.master_ratio, self.gap, LayoutDirection.HORIZONTAL
        )

    def _row_areas(self, stack_area: Rect, rows: List[List["Tile"]]) -> List[Rect]:
        return split_area_weighted(
            stack_area, [row[0].weight for row in rows], self.gap, LayoutDirection.VERTICAL
        )

    def apply(self, tiles: List["Tile"], area: Rect) -> None:
        for tile in tiles:
            tile.state = TileState.TILED
        if not tiles:
            return

        grouping = self.grouping(len(tiles))
        if grouping.regime == Regime.SINGLE:
            place_tile(tiles[0], area, area)
            return

        master_area, stack_area = self._split_master(area)
        place_tile(tiles[0], master_area, area)

        if grouping.regime == Regime.STACK:
            # Two tiles stacked on top of each other, one per row
            rows = [[tile] for tile in tiles[1:]]
        else:
            rows = grouping.split(tiles)[1:]

        for row, row_area in zip(rows, self._row_areas(stack_area, rows)):
            rects = split_area_weighted(
                row_area,
                [tile.width_weight for tile in row],
                self.gap,
                LayoutDirection.HORIZONTAL,
            )
            for tile, rect in zip(row, rects):
                place_tile(tile, rect, area)

        log.debug("Applied %s to %d tiles (%d rows)", self, len(tiles), len(rows))

    def adjust(
        self, area: Rect, tiles: List["Tile"], basis: "Tile", delta: ResizeDelta
    ) -> None:
        if len(tiles) <= 1:
            return
        if basis not in tiles:
            log.warning("Resized tile %r is not laid out by %s", basis, self)
            return

        grouping = self.grouping(len(tiles))
        index = tiles.index(basis)

        if index == 0:
            if delta.is_horizontal:
                self._adjust_master_ratio(area, 0, delta)
            return

        if grouping.regime == Regime.STACK:
            rows = [[tile] for tile in tiles[1:]]
            row_index, position = index - 1, 0
        else:
            rows = grouping.split(tiles)[1:]
            group, position = grouping.locate(index)
            row_index = group - 1

        # The west edge of a row's leading tile is the master boundary
        if delta.west != 0 and position == 0:
            self._adjust_master_ratio(area, 1, delta)

        stack_area = self._split_master(area)[1]

        if delta.is_vertical and len(rows) > 1:
            row_weights = adjust_area_weights(
                stack_area,
                [row[0].weight for row in rows],
                self.gap,
                row_index,
                delta,
                LayoutDirection.VERTICAL,
            )
            for row, weight in zip(rows, row_weights):
                for tile in row:
                    tile.weight = weight * len(rows)

        row = rows[row_index]
        if delta.is_horizontal and len(row) == 2:
            row_area = self._row_areas(stack_area, rows)[row_index]
            widths = adjust_area_weights(
                row_area,
                [tile.width_weight for tile in row],
                self.gap,
                position,
                delta,
                LayoutDirection.HORIZONTAL,
            )
            for tile, weight in zip(row, widths):
                tile.width_weight = weight * len(row)

    def _adjust_master_ratio(self, area: Rect, side: int, delta: ResizeDelta):
        ratio = adjust_area_half_weights(
            area, self.master_ratio, self.gap, side, delta, LayoutDirection.HORIZONTAL
        )
        self.master_ratio = clip(
            ratio, self.config.min_master_ratio, self.config.max_master_ratio
        )

    def handle_shortcut(self, shortcut: Shortcut) -> bool:
        if shortcut == Shortcut.SHIFT_MASTER_LEFT:
            step = -self.config.master_ratio_step
        elif shortcut == Shortcut.SHIFT_MASTER_RIGHT:
            step = self.config.master_ratio_step
        else:
            return False

        self.master_ratio = clip(
            slide(self.master_ratio, step),
            self.config.min_master_ratio,
            self.config.max_master_ratio,
        )
        log.info("Master ratio set to %.2f", self.master_ratio)
        return True

    def clone(self) -> "ThreeColAltLayout":
        return ThreeColAltLayout(self.config, master_ratio=self.master_ratio)
