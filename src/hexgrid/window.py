from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

from hexgrid.core.grid import ByteGridModel
from hexgrid.ui.palette import PALETTE
from hexgrid.widgets.byte_grid import ByteGrid, ByteGridHeader, SelectionChanged

logger = logging.getLogger(__name__)


class HexgridWindowApp(App):
    """Windowed frontend: select individual bytes with the keyboard or the mouse."""

    TITLE = "hexgrid"
    TICK_RATE = 0.25

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("escape", "quit", "Quit"),
    ]

    CSS = """
    #grid-pane {
        border: round #3b4252;
        height: 1fr;
    }
    #status-panel {
        height: 2;
        dock: bottom;
    }
    #status-stats {
        width: auto;
        margin-right: 2;
    }
    """

    def __init__(self, model: ByteGridModel) -> None:
        super().__init__()
        self.model = model
        self.grid: ByteGrid | None = None
        self._file_label = Static(id="status-file")
        self._stats = Static(id="status-stats")
        self._selection_label = Static(id="status-selection")

    def compose(self) -> ComposeResult:
        self.grid = ByteGrid(self.model, id="grid")
        with Vertical(id="grid-pane"):
            if self.model.size:
                yield ByteGridHeader(self.model.row_width)
            yield self.grid
        with Vertical(id="status-panel"):
            yield self._file_label
            with Horizontal():
                yield self._stats
                yield self._selection_label

    def on_mount(self) -> None:
        logger.debug(
            "windowed frontend: %s (%d bytes, width %d)",
            self.model.name,
            self.model.size,
            self.model.row_width,
        )
        if self.grid is not None:
            self.set_focus(self.grid)
        self.update_status()
        self.set_interval(self.TICK_RATE, self.update_status)

    def update_status(self) -> None:
        style = PALETTE.status_fg
        self._file_label.update(Text(self.model.name, style=style))
        self._stats.update(Text(self.model.summary(), style=style))
        if self.grid is not None:
            self._selection_label.update(Text(self.grid.selection.status(), style=style))

    def on_selection_changed(self, message: SelectionChanged) -> None:
        self.update_status()
