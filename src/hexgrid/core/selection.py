"""Byte-granularity selection for the windowed frontend."""

from __future__ import annotations

import logging
from enum import Enum

from hexgrid.core.grid import ByteGridModel, RowText

logger = logging.getLogger(__name__)


class VerticalMove(Enum):
    UP = "up"
    DOWN = "down"
    NONE = "none"


class ScrollAlign(Enum):
    TOP = "top"
    BOTTOM = "bottom"


class SelectionCommand(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


SELECTION_KEYMAP: dict[str, SelectionCommand] = {
    "left": SelectionCommand.LEFT,
    "h": SelectionCommand.LEFT,
    "right": SelectionCommand.RIGHT,
    "l": SelectionCommand.RIGHT,
    "up": SelectionCommand.UP,
    "k": SelectionCommand.UP,
    "down": SelectionCommand.DOWN,
    "j": SelectionCommand.DOWN,
}


def scroll_align(
    row_top: float,
    row_bottom: float,
    clip_top: float,
    clip_bottom: float,
    last_move: VerticalMove,
) -> ScrollAlign | None:
    """Decide how to scroll a row into view.

    Returns None when the row already lies fully inside the clip region. Otherwise
    the row aligns with the edge matching the last vertical move; without one, with
    the edge it is violating (top if it starts above the clip, else bottom).
    """
    if row_top >= clip_top and row_bottom <= clip_bottom:
        return None
    if last_move is VerticalMove.UP:
        return ScrollAlign.TOP
    if last_move is VerticalMove.DOWN:
        return ScrollAlign.BOTTOM
    return ScrollAlign.TOP if row_top < clip_top else ScrollAlign.BOTTOM


class ByteSelection:
    """Selected byte plus the direction of the most recent vertical move."""

    def __init__(self, model: ByteGridModel) -> None:
        self.model = model
        self.selection_offset: int | None = 0 if model.size > 0 else None
        self.last_vertical_move = VerticalMove.NONE
        # Set by keyboard moves; consumed by scroll_into_view
        self.pending_scroll = False

    def _clamp(self, offset: int) -> int:
        return max(0, min(offset, self.model.size - 1))

    def move_by(self, delta: int) -> None:
        if self.model.size == 0:
            self.selection_offset = None
            return
        current = self.selection_offset or 0
        self.selection_offset = self._clamp(current + delta)

    def apply(self, command: SelectionCommand) -> None:
        if self.model.size == 0:
            return
        stride = self.model.row_width
        if command is SelectionCommand.LEFT:
            delta, move = -1, VerticalMove.NONE
        elif command is SelectionCommand.RIGHT:
            delta, move = 1, VerticalMove.NONE
        elif command is SelectionCommand.UP:
            delta, move = -stride, VerticalMove.UP
        else:
            delta, move = stride, VerticalMove.DOWN
        self.last_vertical_move = move
        self.move_by(delta)
        self.pending_scroll = True
        logger.debug("selection: key=%s delta=%d -> %s", command.value, delta, self.selection_offset)

    def click(self, offset: int) -> None:
        if self.model.size == 0:
            return
        self.selection_offset = self._clamp(offset)
        self.last_vertical_move = VerticalMove.NONE
        self.pending_scroll = False

    def is_selected(self, offset: int) -> bool:
        return self.selection_offset == offset

    def selected_row(self) -> int | None:
        if self.selection_offset is None:
            return None
        return self.model.row_of(self.selection_offset)

    def row_contains_selection(self, row: RowText) -> bool:
        sel = self.selection_offset
        if sel is None:
            return False
        return row.offset <= sel < row.offset + len(row.bytes)

    def scroll_into_view(
        self,
        row_top: float,
        row_bottom: float,
        clip_top: float,
        clip_bottom: float,
    ) -> ScrollAlign | None:
        """Consume a pending keyboard move and decide the scroll for the selected row."""
        if not self.pending_scroll:
            return None
        self.pending_scroll = False
        align = scroll_align(row_top, row_bottom, clip_top, clip_bottom, self.last_vertical_move)
        if align is not None:
            row = self.selected_row() or 0
            if align is ScrollAlign.TOP:
                rect_edge, clip_edge = row_top, clip_top
            else:
                rect_edge, clip_edge = row_bottom, clip_bottom
            logger.debug(
                "scroll: dir=%s row=0x%08X rect=%.2f clip=%.2f",
                "up" if align is ScrollAlign.TOP else "down",
                row * self.model.row_width,
                rect_edge,
                clip_edge,
            )
        return align

    def status(self) -> str:
        if self.selection_offset is None:
            return "Selection: none"
        return f"Selection: 0x{self.selection_offset:08X}"
