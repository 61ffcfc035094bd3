"""Interactive terminal UI for browsing and pruning known_hosts."""

from knownhosts.tui.app import TuiApp
from knownhosts.tui.state import HostsState, ViewMode, update

__all__ = ["HostsState", "TuiApp", "ViewMode", "update"]
