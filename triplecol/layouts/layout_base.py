"""
Tile Layout Base Classes

Provides the Layout interface and the host glue that drives layouts
per workspace.
"""

from __future__ import annotations
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, TYPE_CHECKING

from pubsub import pub

from .. import topics
from ..config import LayoutConfig
from ..geometry import Rect, ResizeDelta

if TYPE_CHECKING:
    from ..objects import Tile

log = logging.getLogger(__name__)


class Shortcut(Enum):
    """Discrete layout commands."""

    INCREASE_MASTER = auto()
    DECREASE_MASTER = auto()
    SHIFT_MASTER_LEFT = auto()
    SHIFT_MASTER_RIGHT = auto()


class Layout(ABC):
    """Abstract base class for tile layouts."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Layout identifier."""

    @abstractmethod
    def apply(self, tiles: List["Tile"], area: Rect) -> None:
        """
        Mark every tile as tiled and write its geometry.

        Args:
            tiles: Ordered tiles to lay out, master first
            area: Available area for the layout
        """

    @abstractmethod
    def adjust(
        self, area: Rect, tiles: List["Tile"], basis: "Tile", delta: ResizeDelta
    ) -> None:
        """
        Update weights and ratios after ``basis`` was resized by ``delta``.

        Geometry is not touched; call ``apply`` afterwards.
        """

    @abstractmethod
    def handle_shortcut(self, shortcut: Shortcut) -> bool:
        """Apply a layout command. Returns whether it was recognized."""

    @abstractmethod
    def clone(self) -> "Layout":
        """Independent copy of this layout's state."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable configuration, for notifications."""


@dataclass
class Workspace:
    """A named set of ordered tiles arranged by one layout instance."""

    name: str
    area: Rect = field(default_factory=Rect)
    tiles: List["Tile"] = field(default_factory=list)
    layout: Optional[Layout] = None

    def add_tile(self, tile: "Tile"):
        """Add a tile to the end of the workspace."""
        if tile not in self.tiles:
            self.tiles.append(tile)

    def remove_tile(self, tile: "Tile"):
        """Remove a tile from the workspace."""
        if tile in self.tiles:
            self.tiles.remove(tile)

    def arrange(self):
        """Recompute geometry of every tile."""
        if self.layout is None:
            return
        self.layout.apply(self.tiles, self.area)

    def resize(self, tile: "Tile", delta: ResizeDelta):
        """Feed a resize gesture to the layout and re-arrange."""
        if self.layout is None:
            return
        self.layout.adjust(self.area, self.tiles, tile, delta)
        self.arrange()


class LayoutManager:
    """
    Manages layouts for multiple workspaces.

    Subscribes to layout command events and publishes LAYOUT_CHANGED,
    LAYOUT_APPLIED and LAYOUT_NOTIFICATION events.

    Responsibilities:
    - Keep one layout instance per workspace, cloned from the prototypes
    - CMD_INCREASE_MASTER/CMD_DECREASE_MASTER: Change master capacity
    - CMD_SHIFT_MASTER_LEFT/RIGHT: Move the master boundary
    - CMD_CYCLE_LAYOUT: Cycle through available layouts
    - CMD_SWITCH_WORKSPACE: Switch to workspace
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        layouts: Optional[List[Layout]] = None,
        num_workspaces: int = 9,
    ):
        self.config = config or LayoutConfig()
        self.layouts: List[Layout] = (
            layouts if layouts is not None else self.config.get_layouts()
        )
        self.workspaces: Dict[str, Workspace] = {}
        self.active_workspace: Optional[str] = None

        for i in range(1, num_workspaces + 1):
            name = str(i)
            layout = self.layouts[0].clone() if self.layouts else None
            self.workspaces[name] = Workspace(name=name, layout=layout)
        if self.workspaces:
            self.active_workspace = next(iter(self.workspaces))

        self._setup_subscriptions()

    def _setup_subscriptions(self):
        """Subscribe to events LayoutManager cares about."""
        pub.subscribe(self._on_increase_master, topics.CMD_INCREASE_MASTER)
        pub.subscribe(self._on_decrease_master, topics.CMD_DECREASE_MASTER)
        pub.subscribe(self._on_shift_master_left, topics.CMD_SHIFT_MASTER_LEFT)
        pub.subscribe(self._on_shift_master_right, topics.CMD_SHIFT_MASTER_RIGHT)
        pub.subscribe(self._on_cycle_layout, topics.CMD_CYCLE_LAYOUT)
        pub.subscribe(self._on_switch_workspace, topics.CMD_SWITCH_WORKSPACE)

        if os.getenv("TRIPLECOL_DEBUG"):
            pub.subscribe(self.debug_event_logger, pub.ALL_TOPICS)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log every event published on the bus."""
        log.debug("EVENT: %s | %s", topic.getName(), kwargs)

    def get_active_workspace(self) -> Optional[Workspace]:
        """Get the active workspace."""
        if self.active_workspace is None:
            return None
        return self.workspaces.get(self.active_workspace)

    def set_area(self, area: Rect, workspace: Optional[Workspace] = None):
        """Set the usable area of a workspace (the active one by default)."""
        workspace = workspace or self.get_active_workspace()
        if workspace is not None:
            workspace.area = area

    def add_tile(self, tile: "Tile", workspace: Optional[Workspace] = None):
        """Add a tile and re-arrange its workspace."""
        workspace = workspace or self.get_active_workspace()
        if workspace is None:
            return
        workspace.add_tile(tile)
        self.arrange(workspace)

    def remove_tile(self, tile: "Tile"):
        """Remove a tile from whichever workspace holds it."""
        workspace = self.find_workspace(tile)
        if workspace is None:
            return
        workspace.remove_tile(tile)
        self.arrange(workspace)

    def find_workspace(self, tile: "Tile") -> Optional[Workspace]:
        """Workspace that holds ``tile``."""
        for workspace in self.workspaces.values():
            if tile in workspace.tiles:
                return workspace
        return None

    def arrange(self, workspace: Optional[Workspace] = None):
        """Apply the workspace layout and announce it."""
        workspace = workspace or self.get_active_workspace()
        if workspace is None or workspace.layout is None:
            return
        workspace.arrange()
        log.debug(
            "Arranged %d tiles on workspace %s with %s",
            len(workspace.tiles),
            workspace.name,
            workspace.layout,
        )
        pub.sendMessage(topics.LAYOUT_APPLIED, workspace=workspace.name)

    def handle_shortcut(self, shortcut: Shortcut) -> bool:
        """Forward a shortcut to the active layout."""
        workspace = self.get_active_workspace()
        if workspace is None or workspace.layout is None:
            return False

        if not workspace.layout.handle_shortcut(shortcut):
            log.debug("%s ignored %s", workspace.layout.name, shortcut.name)
            return False

        pub.sendMessage(
            topics.LAYOUT_NOTIFICATION,
            text=workspace.layout.describe(),
            workspace=workspace.name,
        )
        self.arrange(workspace)
        return True

    def switch_workspace(self, workspace_id):
        """Switch to a different workspace."""
        name = str(workspace_id)
        if name not in self.workspaces:
            log.warning("Unknown workspace %s", name)
            return
        self.active_workspace = name
        self.arrange()

    def cycle_layout(self, direction: int = 1):
        """Replace the active workspace layout with the next one."""
        workspace = self.get_active_workspace()
        if workspace is None or not self.layouts:
            return

        current_idx = 0
        if workspace.layout:
            for i, layout in enumerate(self.layouts):
                if layout.name == workspace.layout.name:
                    current_idx = i
                    break

        new_idx = (current_idx + direction) % len(self.layouts)
        workspace.layout = self.layouts[new_idx].clone()
        log.info("Workspace %s now uses %s", workspace.name, workspace.layout.name)

        pub.sendMessage(topics.LAYOUT_CHANGED, layout_name=workspace.layout.name)
        self.arrange(workspace)

    # Command event handlers
    def _on_increase_master(self):
        """Handle CMD_INCREASE_MASTER command."""
        self.handle_shortcut(Shortcut.INCREASE_MASTER)

    def _on_decrease_master(self):
        """Handle CMD_DECREASE_MASTER command."""
        self.handle_shortcut(Shortcut.DECREASE_MASTER)

    def _on_shift_master_left(self):
        """Handle CMD_SHIFT_MASTER_LEFT command."""
        self.handle_shortcut(Shortcut.SHIFT_MASTER_LEFT)

    def _on_shift_master_right(self):
        """Handle CMD_SHIFT_MASTER_RIGHT command."""
        self.handle_shortcut(Shortcut.SHIFT_MASTER_RIGHT)

    def _on_cycle_layout(self):
        """Handle CMD_CYCLE_LAYOUT command."""
        self.cycle_layout(direction=1)

    def _on_switch_workspace(self, workspace_id):
        """Handle CMD_SWITCH_WORKSPACE command."""
        self.switch_workspace(workspace_id)
