"""
Event Topics for the triplecol layout engine

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Layout command events (imperative - tell the layout manager to do something)
# These are triggered by user input (keybinds) in the host

CMD_INCREASE_MASTER = "cmd.increase_master"
"""Command: Allow one more tile in the master column."""

CMD_DECREASE_MASTER = "cmd.decrease_master"
"""Command: Allow one tile less in the master column."""

CMD_SHIFT_MASTER_LEFT = "cmd.shift_master_left"
"""Command: Move the master boundary left by one step."""

CMD_SHIFT_MASTER_RIGHT = "cmd.shift_master_right"
"""Command: Move the master boundary right by one step."""

CMD_CYCLE_LAYOUT = "cmd.cycle_layout"
"""Command: Cycle to next layout."""

CMD_SWITCH_WORKSPACE = "cmd.switch_workspace"
"""Command: Switch to a workspace. Requires workspace_id parameter."""

# Layout notifications
LAYOUT_CHANGED = "layout.changed"
"""Published when a workspace switches layout. Params: layout_name"""

LAYOUT_APPLIED = "layout.applied"
"""Published after tile geometry was recomputed. Params: workspace"""

LAYOUT_NOTIFICATION = "layout.notification"
"""Published when a shortcut changed layout state. Params: text, workspace"""
