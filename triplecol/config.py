"""
Layout Configuration

Tunables shared by the layouts. The host owns the configuration object and
may change ``tile_layout_gap`` at runtime; layouts read it on every call.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import List, Mapping, Optional


@dataclass
class LayoutConfig:
    """Layout engine configuration."""

    # Pixels between neighbouring tiles
    tile_layout_gap: float = 0

    # Master ratio bounds and shortcut step
    min_master_ratio: float = 0.2
    max_master_ratio: float = 0.75
    master_ratio_step: float = 0.05

    # Initial state of new layouts
    default_master_ratio: float = 0.6
    default_alt_master_ratio: float = 0.5
    default_master_capacity: int = 1

    # Upper bound for the master capacity shortcuts
    max_master_capacity: int = 10

    # Layouts (default to both built-in layouts)
    layouts: Optional[List] = None

    def __post_init__(self):
        """Validate values."""
        if self.tile_layout_gap < 0:
            raise ValueError(
                f"tile_layout_gap must be non-negative, got {self.tile_layout_gap}"
            )
        if not 0 < self.min_master_ratio <= self.max_master_ratio < 1:
            raise ValueError(
                "master ratio bounds must satisfy 0 < min <= max < 1, got "
                f"{self.min_master_ratio}..{self.max_master_ratio}"
            )
        if self.master_ratio_step <= 0:
            raise ValueError(
                f"master_ratio_step must be positive, got {self.master_ratio_step}"
            )
        if self.max_master_capacity < 1:
            raise ValueError(
                f"max_master_capacity must be at least 1, got {self.max_master_capacity}"
            )
        if not 1 <= self.default_master_capacity <= self.max_master_capacity:
            raise ValueError(
                "default_master_capacity must be within 1.."
                f"{self.max_master_capacity}, got {self.default_master_capacity}"
            )
        for ratio in (self.default_master_ratio, self.default_alt_master_ratio):
            if not self.min_master_ratio <= ratio <= self.max_master_ratio:
                raise ValueError(
                    f"default master ratio {ratio} outside "
                    f"{self.min_master_ratio}..{self.max_master_ratio}"
                )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides):
        """
        Build a configuration from environment variables.

        Recognized variables:
        - TRIPLECOL_GAP: tile_layout_gap in pixels
        - TRIPLECOL_MASTER_RATIO: default_master_ratio

        Keyword arguments take precedence over the environment.
        """
        environ = os.environ if environ is None else environ

        values = {}
        gap = environ.get("TRIPLECOL_GAP")
        if gap:
            values["tile_layout_gap"] = float(gap)
        ratio = environ.get("TRIPLECOL_MASTER_RATIO")
        if ratio:
            values["default_master_ratio"] = float(ratio)
        values.update(overrides)
        return cls(**values)

    def get_layouts(self):
        """Get configured layouts or default layouts."""
        if self.layouts is not None:
            return self.layouts

        from .layouts import TripleColumnLeftLayout, ThreeColAltLayout

        return [
            TripleColumnLeftLayout(self),
            ThreeColAltLayout(self),
        ]
