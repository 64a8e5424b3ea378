"""
Layout System

Provides the weighted partitioning utilities and the left-master layouts.
"""

from .layout_base import (
    Layout,
    Shortcut,
    Workspace,
    LayoutManager,
)
from .grouping import Grouping, Regime, column_groups, row_groups
from .layout_triple_column import TripleColumnLeftLayout
from .layout_three_col_alt import ThreeColAltLayout

__all__ = [
    # Base classes
    "Layout",
    "Shortcut",
    "Workspace",
    "LayoutManager",
    # Grouping
    "Grouping",
    "Regime",
    "column_groups",
    "row_groups",
    # Layout implementations
    "TripleColumnLeftLayout",
    "ThreeColAltLayout",
]
