"""
triplecol

Geometry engine for left-master tiling layouts.

This package provides:
- Weighted rectangle partitioning with gaps
- Conversion of pixel resize gestures into weight updates
- Column grouping driven by tile count and master capacity
- Two layouts: Triple Column Left and Three Column Alt
- Host glue for workspaces, shortcuts and interactive resizing

Example usage:
    from triplecol import LayoutConfig, Rect, Tile, TripleColumnLeftLayout

    layout = TripleColumnLeftLayout(LayoutConfig(tile_layout_gap=10))
    tiles = [Tile(i) for i in range(4)]
    layout.apply(tiles, Rect(0, 0, 1200, 800))

Or print a layout directly:
    python -m triplecol --tiles 4
"""

__version__ = "0.1.0"

from .geometry import (
    Rect,
    ResizeDelta,
    LayoutDirection,
    WindowEdges,
)

from .objects import Tile, TileState

from .config import LayoutConfig

from .layouts import (
    Layout,
    Shortcut,
    Workspace,
    LayoutManager,
    Grouping,
    Regime,
    column_groups,
    row_groups,
    TripleColumnLeftLayout,
    ThreeColAltLayout,
)

from .operation_manager import OperationManager

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Rect",
    "ResizeDelta",
    "LayoutDirection",
    "WindowEdges",
    # Objects
    "Tile",
    "TileState",
    # Configuration
    "LayoutConfig",
    # Layouts
    "Layout",
    "Shortcut",
    "Workspace",
    "LayoutManager",
    "Grouping",
    "Regime",
    "column_groups",
    "row_groups",
    "TripleColumnLeftLayout",
    "ThreeColAltLayout",
    # Interactive resize
    "OperationManager",
    # Event topics
    "topics",
]
