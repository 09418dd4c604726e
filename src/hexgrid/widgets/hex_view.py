from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.events import Resize
from textual.message import Message
from textual.widget import Widget

from hexgrid.core.grid import (
    EMPTY_TEXT,
    END_OF_FILE_TEXT,
    HEX_START,
    ByteGridModel,
    hex_block_width,
)
from hexgrid.core.navigation import ROW_KEYMAP, RowCommand, RowScroller
from hexgrid.ui.palette import PALETTE


class RowsScrolled(Message):
    """Posted after the top row changes so the status line can follow."""

    def __init__(self, row: int, offset: int) -> None:
        super().__init__()
        self.row = row
        self.offset = offset


class QuitRequested(Message):
    """Posted when the row scroller reaches its terminal state."""


class HexView(Widget):
    """Read-only hex viewer that scrolls whole rows.

    - Renders only the rows that fit the widget height.
    - Page size follows the widget height on every resize.
    - Every key in `ROW_KEYMAP` is bound to `action_row`; nothing is selected.
    """

    BINDINGS = [
        (key, f"row('{command.value}')", command.value.replace("_", " ").title())
        for key, command in ROW_KEYMAP.items()
    ]

    DEFAULT_CSS = """
    HexView {
        border: round #3b4252;
        height: 1fr;
    }
    HexView:focus {
        border: round #ffa657;
    }
    """

    can_focus = True

    def __init__(self, model: ByteGridModel, *, id: str | None = None) -> None:  # noqa: A002
        super().__init__(id=id)
        self.model = model
        self.scroller = RowScroller(model)

    def visible_rows(self) -> int:
        return max(1, self.size.height or 1)

    def on_mount(self) -> None:
        self.border_title = f" {self.model.name} "

    def on_resize(self, event: Resize) -> None:
        self.scroller.resize(self.visible_rows())

    def action_row(self, command: str) -> None:
        if not self.scroller.apply(RowCommand(command)):
            self.post_message(QuitRequested())
            return
        self.refresh()
        row, offset = self.scroller.position()
        self.post_message(RowsScrolled(row, offset))

    # ---- Rendering ----
    def render(self) -> Text:
        lines = self.model.render_lines(self.visible_rows())
        if lines[0] in (EMPTY_TEXT, END_OF_FILE_TEXT):
            return Text(lines[0], style=Style(color=PALETTE.empty_fg))

        bpr = self.model.row_width
        hex_end = HEX_START + hex_block_width(bpr)
        text = Text()
        for i, line in enumerate(lines):
            if i:
                text.append("\n")
            text.append(line[:HEX_START], style=Style(color=PALETTE.offset_fg))
            text.append(line[HEX_START:hex_end], style=Style(color=PALETTE.hex_fg))
            text.append(line[hex_end : hex_end + 3], style=Style(color=PALETTE.punct_fg))
            text.append(line[hex_end + 3 : -1], style=Style(color=PALETTE.ascii_fg))
            text.append(line[-1:], style=Style(color=PALETTE.punct_fg))
        return text
