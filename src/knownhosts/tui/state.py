"""TUI state machine — immutable state, messages, effects and ``update``.

``update`` is pure: it never touches the filesystem or the terminal. It
returns the next state plus a list of effects which the app turns into
background tasks; their results come back as ordinary messages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace

from knownhosts.hosts.matcher import search

# How long a status line stays visible, in seconds
STATUS_DURATION = 3.0

QUIT_KEYS = frozenset({"q", "escape", "ctrl+c"})


class ViewMode(enum.Enum):
    """Which view the TUI is currently showing."""

    LIST = "list"
    CONFIRM_DELETE = "confirm_delete"


@dataclass(frozen=True)
class HostsState:
    """Everything the TUI needs to render one frame."""

    hosts: tuple[str, ...] = ()
    filtered: tuple[str, ...] = ()
    cursor: int = 0
    query: str = ""
    searching: bool = False
    mode: ViewMode = ViewMode.LIST
    error: str = ""
    status_message: str = ""
    status_expiry: float = 0.0
    clock: float = 0.0

    @property
    def selected(self) -> str | None:
        """The line under the cursor, if the cursor is on a filtered row."""
        if 0 <= self.cursor < len(self.filtered):
            return self.filtered[self.cursor]
        return None


# --- Messages -------------------------------------------------------------


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class HostsLoaded:
    lines: tuple[str, ...]


@dataclass(frozen=True)
class HostsSaved:
    count: int


@dataclass(frozen=True)
class IoFailed:
    """A background load or save failed."""

    message: str


@dataclass(frozen=True)
class Tick:
    now: float


Message = KeyPress | HostsLoaded | HostsSaved | IoFailed | Tick


# --- Effects --------------------------------------------------------------


@dataclass(frozen=True)
class LoadHosts:
    pass


@dataclass(frozen=True)
class SaveHosts:
    lines: tuple[str, ...]


@dataclass(frozen=True)
class ScheduleTick:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Effect = LoadHosts | SaveHosts | ScheduleTick | Quit


def initial_effects() -> list[Effect]:
    """Effects to run when the TUI starts: first tick and the initial load."""
    return [ScheduleTick(), LoadHosts()]


def update(state: HostsState, message: Message) -> tuple[HostsState, list[Effect]]:
    """Apply one message to *state*, returning the new state and effects."""
    if isinstance(message, KeyPress):
        return _handle_key(state, message.key)
    if isinstance(message, HostsLoaded):
        lines = tuple(message.lines)
        return replace(state, hosts=lines, filtered=lines, cursor=0), []
    if isinstance(message, HostsSaved):
        return (
            replace(
                state,
                status_message=f"Saved {message.count} host(s)",
                status_expiry=state.clock + STATUS_DURATION,
            ),
            [],
        )
    if isinstance(message, IoFailed):
        return replace(state, error=message.message), []
    if isinstance(message, Tick):
        state = replace(state, clock=message.now)
        if state.status_message and message.now >= state.status_expiry:
            state = replace(state, status_message="")
        return state, [ScheduleTick()]
    raise TypeError(f"Unknown message: {message!r}")


def _handle_key(state: HostsState, key: str) -> tuple[HostsState, list[Effect]]:
    if state.error:
        # The error view stays up until the user quits
        if key in QUIT_KEYS:
            return state, [Quit()]
        return state, []

    if state.mode == ViewMode.LIST:
        return _handle_list_key(state, key)
    if state.mode == ViewMode.CONFIRM_DELETE:
        return _handle_confirm_key(state, key)
    raise ValueError(f"Unknown view mode: {state.mode!r}")


def _handle_list_key(state: HostsState, key: str) -> tuple[HostsState, list[Effect]]:
    if key == "ctrl+c":
        return state, [Quit()]

    if key in ("up", "down", "home", "end"):
        return _move_cursor(state, key), []

    if state.searching:
        return _handle_search_key(state, key), []

    if key == "k":
        return _move_cursor(state, "up"), []
    if key == "j":
        return _move_cursor(state, "down"), []
    if key == "g":
        return _move_cursor(state, "home"), []
    if key == "G":
        return _move_cursor(state, "end"), []
    if key == "/":
        return replace(state, searching=True, query="", cursor=0), []
    if key == "d":
        if state.filtered:
            return replace(state, mode=ViewMode.CONFIRM_DELETE), []
        return state, []
    if key in ("q", "escape"):
        return state, [Quit()]
    return state, []


def _handle_search_key(state: HostsState, key: str) -> HostsState:
    if key in ("enter", "q", "escape"):
        return replace(state, searching=False)
    if key == "backspace":
        if not state.query:
            return state
        return _refilter(replace(state, query=state.query[:-1]))
    if key == "/":
        return state
    if len(key) == 1 and key.isprintable():
        return _refilter(replace(state, query=state.query + key))
    return state


def _handle_confirm_key(state: HostsState, key: str) -> tuple[HostsState, list[Effect]]:
    if key in ("y", "Y"):
        line = state.selected
        if line is None:
            return replace(state, mode=ViewMode.LIST), []
        # Only identical lines go; other entries for the same host stay
        hosts = tuple(h for h in state.hosts if h != line)
        filtered = tuple(h for h in state.filtered if h != line)
        cursor = max(0, min(state.cursor, len(filtered) - 1))
        new_state = replace(
            state,
            hosts=hosts,
            filtered=filtered,
            cursor=cursor,
            mode=ViewMode.LIST,
        )
        return new_state, [SaveHosts(hosts)]
    if key in ("n", "N", "q", "escape", "ctrl+c"):
        return replace(state, mode=ViewMode.LIST), []
    return state, []


def _move_cursor(state: HostsState, key: str) -> HostsState:
    last = len(state.filtered) - 1
    if key == "up":
        cursor = state.cursor - 1 if state.cursor > 0 else state.cursor
    elif key == "down":
        cursor = state.cursor + 1 if state.cursor < last else state.cursor
    elif key == "home":
        cursor = 0
    else:
        cursor = max(0, last)
    return replace(state, cursor=cursor)


def _refilter(state: HostsState) -> HostsState:
    """Re-run the search; the cursor resets only when something matched."""
    filtered = tuple(search(state.hosts, state.query))
    if filtered:
        return replace(state, filtered=filtered, cursor=0)
    return replace(state, filtered=filtered)
