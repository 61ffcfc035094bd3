"""TUI display — builds Rich renderables from HostsState."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from knownhosts.errors import InvalidFormat
from knownhosts.hosts.matcher import host_part
from knownhosts.hosts.parser import parse_record
from knownhosts.hosts.store import printable
from knownhosts.tui.state import HostsState, ViewMode

TITLE_STYLE = "bold #FAFAFA on #7D56F4"
SELECTED_STYLE = "bold #7D56F4"
ERROR_STYLE = "bold #FF5F87"
SEARCH_STYLE = "#7D56F4"
FOOTER_STYLE = "#626262"

CONTROLS = "Controls: ↑↓ navigate | d delete | / search | q quit"


class TuiDisplay:
    """Builds Rich Layout objects from the current HostsState."""

    def render(self, state: HostsState, height: int = 24, width: int = 80) -> Layout:
        """Build the full screen layout from current state."""
        layout = Layout()

        if state.error:
            layout.update(self._render_error(state))
            return layout

        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        if state.mode == ViewMode.LIST:
            layout["header"].update(self._render_header("Known Hosts Manager"))
            layout["body"].update(self._render_list(state, height - 6))
            layout["footer"].update(self._render_footer(state, CONTROLS))
        elif state.mode == ViewMode.CONFIRM_DELETE:
            layout["header"].update(self._render_header("Confirm Deletion"))
            layout["body"].update(self._render_confirm(state))
            layout["footer"].update(
                self._render_footer(state, "Press 'y' to confirm, 'n' to cancel")
            )

        return layout

    def _render_header(self, title: str) -> Panel:
        return Panel(Text(f" {title} ", style=TITLE_STYLE), border_style="dim")

    def _render_error(self, state: HostsState) -> Panel:
        text = Text()
        text.append(f"Error: {state.error}", style=ERROR_STYLE)
        text.append("\n\nPress 'q' to quit")
        return Panel(text, title="Error", border_style="red")

    def _render_list(self, state: HostsState, body_height: int) -> Panel:
        parts: list[RenderableType] = []

        if state.searching:
            parts.append(_search_bar("Search: ", f"{state.query}_"))
        elif state.query:
            parts.append(_search_bar("Filter: ", state.query))

        total = len(state.filtered)
        if total == 0:
            parts.append(Text("No hosts found", style="italic"))
            return Panel(Group(*parts), title="Hosts", border_style="blue")

        visible_rows = max(1, body_height - 2 - 2 * len(parts))
        start, end = _viewport(state.cursor, total, visible_rows)

        rows = Text()
        for i in range(start, end):
            is_cursor = i == state.cursor
            prefix = ">" if is_cursor else " "
            label, ok = _host_label(state.filtered[i])
            if is_cursor:
                style = SELECTED_STYLE
            elif not ok:
                style = "dim"
            else:
                style = ""
            rows.append(f"{prefix} {label}", style=style)
            if i < end - 1:
                rows.append("\n")
        parts.append(rows)

        scroll_info = ""
        if total > visible_rows:
            scroll_info = f" [{start + 1}-{end}/{total}]"

        return Panel(Group(*parts), title=f"Hosts{scroll_info}", border_style="blue")

    def _render_confirm(self, state: HostsState) -> Panel:
        line = state.selected
        if line is None:
            return Panel(Text("No host selected"), border_style="yellow")

        try:
            record = parse_record(line)
        except InvalidFormat as exc:
            return Panel(
                Text(f"Error: {exc}", style=ERROR_STYLE), border_style="red"
            )

        text = Text()
        text.append("Delete this host?\n\n")
        text.append(printable(record.label), style=SELECTED_STYLE)
        text.append(f"\n{record.key_type}", style="dim")
        return Panel(text, border_style="yellow")

    def _render_footer(self, state: HostsState, keys: str) -> Panel:
        text = Text(keys, style=FOOTER_STYLE)
        if state.status_message:
            text.append(f"   {state.status_message}", style="yellow")
        return Panel(text, border_style="dim")


def _search_bar(label: str, value: str) -> Text:
    text = Text()
    text.append(label, style=SEARCH_STYLE)
    text.append(value)
    text.append("\n")
    return text


def _host_label(line: str) -> tuple[str, bool]:
    """Display label for a line, falling back to its raw host part."""
    try:
        return printable(parse_record(line).label), True
    except InvalidFormat:
        return printable(host_part(line)), False


def _viewport(cursor: int, total: int, visible_rows: int) -> tuple[int, int]:
    """First and one-past-last row index that keep the cursor visible."""
    start = 0
    if cursor >= visible_rows:
        start = cursor - visible_rows + 1
    start = max(0, min(start, total - visible_rows))
    return start, min(start + visible_rows, total)
