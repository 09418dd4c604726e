"""Row-granularity navigation for the console frontend."""

from __future__ import annotations

import logging
from enum import Enum

from hexgrid.core.grid import ByteGridModel

logger = logging.getLogger(__name__)


class RowCommand(Enum):
    DOWN = "down"
    UP = "up"
    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    START = "start"
    END = "end"
    QUIT = "quit"


# Textual key names -> commands
ROW_KEYMAP: dict[str, RowCommand] = {
    "down": RowCommand.DOWN,
    "j": RowCommand.DOWN,
    "up": RowCommand.UP,
    "k": RowCommand.UP,
    "pagedown": RowCommand.PAGE_DOWN,
    "space": RowCommand.PAGE_DOWN,
    "pageup": RowCommand.PAGE_UP,
    "home": RowCommand.START,
    "g": RowCommand.START,
    "end": RowCommand.END,
    "G": RowCommand.END,
    "q": RowCommand.QUIT,
    "escape": RowCommand.QUIT,
}


class RowScroller:
    """Translates row commands into scroll moves on a `ByteGridModel`.

    Holds no position of its own: the scroll position and page size live on the model.
    Once QUIT is applied the scroller is finished and ignores further commands.
    """

    def __init__(self, model: ByteGridModel) -> None:
        self.model = model
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    def resize(self, height: int) -> None:
        """Record the display height so page moves match the viewport."""
        self.model.set_view_rows(height)

    def apply(self, command: RowCommand) -> bool:
        """Apply one transition; return False once the loop should stop."""
        if self._finished:
            return False
        model = self.model
        if command is RowCommand.QUIT:
            self._finished = True
            logger.debug("row-scroll: quit")
            return False
        if command is RowCommand.DOWN:
            model.scroll_rows(1)
        elif command is RowCommand.UP:
            model.scroll_rows(-1)
        elif command is RowCommand.PAGE_DOWN:
            model.scroll_rows(model.view_rows)
        elif command is RowCommand.PAGE_UP:
            model.scroll_rows(-model.view_rows)
        elif command is RowCommand.START:
            model.scroll_to_start()
        elif command is RowCommand.END:
            model.scroll_to_end()
        logger.debug("row-scroll: %s -> row %d", command.value, model.scroll_row)
        return True

    def position(self) -> tuple[int, int]:
        """1-based current row and the byte offset of the top row."""
        return self.model.scroll_row + 1, self.model.current_offset()
