from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.events import Click, MouseScrollDown, MouseScrollUp, Resize
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Static

from hexgrid.core.grid import (
    EMPTY_TEXT,
    HEX_START,
    OFFSET_DIGITS,
    ByteGridModel,
    RowText,
    ascii_column_start,
    column_at,
    hex_block_width,
    hex_column_start,
)
from hexgrid.core.selection import SELECTION_KEYMAP, ByteSelection, ScrollAlign, SelectionCommand
from hexgrid.ui.palette import PALETTE

WHEEL_ROWS = 3


def format_header(width: int) -> str:
    """Column header aligned with the formatted rows."""
    half = width // 2
    cells: list[str] = []
    for idx in range(width):
        if idx == half:
            cells.append(" ")
        cells.append(f"{idx:02X}")
        if idx + 1 != width:
            cells.append(" ")
    return f"{'Offset':<{OFFSET_DIGITS}}  {''.join(cells)}  |{' ' * width}|"


class SelectionChanged(Message):
    """Posted whenever the selected byte changes (keyboard or click)."""

    def __init__(self, offset: int | None) -> None:
        super().__init__()
        self.offset = offset


class ByteGridHeader(Static):
    def __init__(self, width: int) -> None:
        super().__init__(Text(format_header(width), style=Style(color=PALETTE.header_fg, bold=True)))


class ByteGrid(Widget):
    """Hex grid with a selectable byte.

    The selected byte is highlighted in both the hex and ASCII columns. Arrow keys
    (and h/j/k/l) move the selection; after a keyboard move the selected row is
    scrolled into view, aligned with the edge matching the direction of travel.
    Clicking a hex or ASCII cell selects it. The mouse wheel scrolls rows.
    """

    BINDINGS = [
        (key, f"select('{command.value}')", command.value.title())
        for key, command in SELECTION_KEYMAP.items()
    ]

    DEFAULT_CSS = """
    ByteGrid {
        height: 1fr;
    }
    """

    can_focus = True

    def __init__(self, model: ByteGridModel, *, id: str | None = None) -> None:  # noqa: A002
        super().__init__(id=id)
        self.model = model
        self.selection = ByteSelection(model)

    def visible_rows(self) -> int:
        return max(1, self.size.height or 1)

    def on_resize(self, event: Resize) -> None:
        self.model.set_view_rows(self.visible_rows())

    # ---- Input ----
    def action_select(self, command: str) -> None:
        self.selection.apply(SelectionCommand(command))
        self.scroll_selection_into_view()
        self.refresh()
        self.post_message(SelectionChanged(self.selection.selection_offset))

    def on_click(self, event: Click) -> None:
        pos = event.get_content_offset(self)
        if pos is None:
            return
        offset = self.offset_at(pos.x, pos.y)
        if offset is None:
            return
        self.selection.click(offset)
        self.refresh()
        self.post_message(SelectionChanged(offset))

    def on_mouse_scroll_down(self, event: MouseScrollDown) -> None:
        self.model.scroll_rows(WHEEL_ROWS)
        self.refresh()

    def on_mouse_scroll_up(self, event: MouseScrollUp) -> None:
        self.model.scroll_rows(-WHEEL_ROWS)
        self.refresh()

    def offset_at(self, x: int, y: int) -> int | None:
        """Absolute byte offset of the cell at content position (x, y), if any."""
        rows = self.model.rows_in_range(self.model.scroll_row + max(0, y), 1)
        if not rows:
            return None
        col = column_at(x, self.model.row_width)
        if col is None or col >= len(rows[0].bytes):
            return None
        return rows[0].offset + col

    def scroll_selection_into_view(self) -> None:
        row = self.selection.selected_row()
        if row is None:
            return
        top = row - self.model.scroll_row
        height = self.visible_rows()
        align = self.selection.scroll_into_view(top, top + 1, 0, height)
        if align is ScrollAlign.TOP:
            self.model.scroll_to_row(row)
        elif align is ScrollAlign.BOTTOM:
            self.model.scroll_to_row(row - height + 1)

    # ---- Rendering ----
    def _render_row(self, row: RowText) -> Text:
        bpr = self.model.row_width
        hex_end = HEX_START + hex_block_width(bpr)
        line = Text(row.text)
        line.stylize(Style(color=PALETTE.offset_fg), 0, OFFSET_DIGITS)
        line.stylize(Style(color=PALETTE.hex_fg), HEX_START, hex_end)
        line.stylize(Style(color=PALETTE.ascii_fg), hex_end + 3, len(row.text) - 1)
        if not self.selection.row_contains_selection(row):
            return line
        selected = Style(bgcolor=PALETTE.selection_bg, color=PALETTE.selection_fg)
        for col in range(len(row.bytes)):
            if not self.selection.is_selected(row.offset + col):
                continue
            start = hex_column_start(col, bpr)
            line.stylize(selected, start, start + 2)
            start = ascii_column_start(col, bpr)
            line.stylize(selected, start, start + 1)
        return line

    def render(self) -> Text:
        if self.model.size == 0:
            return Text(EMPTY_TEXT, style=Style(color=PALETTE.empty_fg))
        rows = self.model.rows_in_range(self.model.scroll_row, self.visible_rows())
        return Text("\n").join(self._render_row(r) for r in rows)
