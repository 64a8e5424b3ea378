"""
Operation Manager

Handles interactive resize operations for tiled tiles.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from .geometry import Rect, ResizeDelta, WindowEdges

if TYPE_CHECKING:
    from .layouts.layout_base import Workspace
    from .objects import Tile

log = logging.getLogger(__name__)

# Smallest size a drag may request for a tile
MIN_SIZE = 50


@dataclass
class Operation:
    """Represents an active interactive resize."""

    tile: Tile
    edges: WindowEdges
    start: Rect


class OperationManager:
    """Manages interactive resize operations."""

    def __init__(self, get_tile_workspace_fn: Callable[["Tile"], Optional["Workspace"]]):
        """Initialize operation manager.

        Args:
            get_tile_workspace_fn: Function to get the workspace containing a tile
        """
        self.current: Optional[Operation] = None
        self._get_tile_workspace = get_tile_workspace_fn

    def is_active(self) -> bool:
        """Check if an operation is currently active."""
        return self.current is not None

    def start_resize(self, tile: Tile, edges: WindowEdges) -> bool:
        """Start an interactive resize operation.

        Args:
            tile: The tile to resize
            edges: Which edges to resize from

        Returns:
            True if operation started, False if an operation is already
            active or the tile is not in a workspace
        """
        if self.current is not None:
            return False
        if edges == WindowEdges.NONE:
            return False
        if self._get_tile_workspace(tile) is None:
            return False

        self.current = Operation(tile=tile, edges=edges, start=tile.geometry)
        log.debug("Resize of %r started from %s", tile, edges)
        return True

    def target_geometry(self, dx: float, dy: float) -> Optional[Rect]:
        """Geometry requested by a pointer offset from the operation start."""
        if not self.current:
            return None

        start = self.current.start
        edges = self.current.edges
        x, y, width, height = start.x, start.y, start.width, start.height

        # Calculate new dimensions based on which edges are being dragged
        if edges & WindowEdges.RIGHT:
            width = max(MIN_SIZE, start.width + dx)
        elif edges & WindowEdges.LEFT:
            width = max(MIN_SIZE, start.width - dx)
            x = start.max_x - width

        if edges & WindowEdges.BOTTOM:
            height = max(MIN_SIZE, start.height + dy)
        elif edges & WindowEdges.TOP:
            height = max(MIN_SIZE, start.height - dy)
            y = start.max_y - height

        return Rect(x, y, width, height)

    def handle_delta(self, dx: float, dy: float):
        """Handle pointer motion during the operation.

        Args:
            dx: X delta from operation start
            dy: Y delta from operation start
        """
        if not self.current:
            return

        workspace = self._get_tile_workspace(self.current.tile)
        if not workspace:
            return

        tile = self.current.tile
        target = self.target_geometry(dx, dy)
        delta = ResizeDelta.from_rects(tile.geometry, target)
        workspace.resize(tile, delta)

    def end_operation(self):
        """End the current operation."""
        if not self.current:
            return
        log.debug("Resize of %r ended at %s", self.current.tile, self.current.tile.geometry)
        self.current = None

    def get_current_tile(self) -> Optional[Tile]:
        """Get the tile involved in the current operation."""
        return self.current.tile if self.current else None
