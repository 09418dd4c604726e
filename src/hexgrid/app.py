from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.widgets import Static

from hexgrid.core.grid import ByteGridModel
from hexgrid.ui.palette import PALETTE
from hexgrid.widgets.hex_view import HexView, QuitRequested, RowsScrolled

logger = logging.getLogger(__name__)


class HexgridApp(App):
    """Console frontend: scroll the hex dump one row or one page at a time."""

    TITLE = "hexgrid"
    TICK_RATE = 0.25

    CSS = """
    #status {
        height: 1;
    }
    """

    def __init__(self, model: ByteGridModel) -> None:
        super().__init__()
        self.model = model
        self.hex_view: HexView | None = None
        self.status = Static(id="status")

    def compose(self) -> ComposeResult:
        self.hex_view = HexView(self.model, id="hex")
        yield self.hex_view
        yield self.status

    def on_mount(self) -> None:
        logger.debug(
            "console frontend: %s (%d bytes, width %d)",
            self.model.name,
            self.model.size,
            self.model.row_width,
        )
        if self.hex_view is not None:
            self.set_focus(self.hex_view)
        self.update_status()
        # Periodic redraw even without input
        self.set_interval(self.TICK_RATE, self.update_status)

    def update_status(self) -> None:
        self.status.update(Text(self.model.status_line(), style=PALETTE.status_fg))

    def on_rows_scrolled(self, message: RowsScrolled) -> None:
        self.update_status()

    def on_quit_requested(self, message: QuitRequested) -> None:
        self.exit()
