from __future__ import annotations

import random

from hexgrid.core.grid import ByteGridModel
from hexgrid.core.selection import (
    ByteSelection,
    ScrollAlign,
    SelectionCommand,
    VerticalMove,
    scroll_align,
)


def test_initial_selection() -> None:
    assert ByteSelection(ByteGridModel(bytes(10), 8)).selection_offset == 0
    empty = ByteSelection(ByteGridModel(b"", 8))
    assert empty.selection_offset is None
    for cmd in SelectionCommand:
        empty.apply(cmd)
    empty.click(3)
    assert empty.selection_offset is None
    assert empty.status() == "Selection: none"


def test_single_byte_clamps() -> None:
    sel = ByteSelection(ByteGridModel(b"\x00", 16))
    sel.apply(SelectionCommand.LEFT)
    assert sel.selection_offset == 0
    sel.apply(SelectionCommand.RIGHT)
    assert sel.selection_offset == 0


def test_vertical_moves_record_direction() -> None:
    sel = ByteSelection(ByteGridModel(bytes(100), 16))
    sel.apply(SelectionCommand.DOWN)
    assert sel.selection_offset == 16
    assert sel.last_vertical_move is VerticalMove.DOWN
    sel.apply(SelectionCommand.UP)
    assert sel.selection_offset == 0
    assert sel.last_vertical_move is VerticalMove.UP
    sel.apply(SelectionCommand.RIGHT)
    assert sel.last_vertical_move is VerticalMove.NONE
    # Down from the last row clamps to the final byte
    sel.click(90)
    sel.apply(SelectionCommand.DOWN)
    assert sel.selection_offset == 99


def test_click_clears_direction_and_pending_scroll() -> None:
    sel = ByteSelection(ByteGridModel(bytes(64), 16))
    sel.apply(SelectionCommand.DOWN)
    assert sel.pending_scroll
    sel.click(40)
    assert sel.selection_offset == 40
    assert sel.last_vertical_move is VerticalMove.NONE
    assert not sel.pending_scroll
    assert sel.selected_row() == 2
    assert sel.is_selected(40)
    assert sel.status() == "Selection: 0x00000028"


def test_selection_stays_in_bounds() -> None:
    rng = random.Random(1234)
    for n in (1, 7, 33, 200):
        sel = ByteSelection(ByteGridModel(bytes(n), 8))
        cmds = list(SelectionCommand)
        for _ in range(300):
            sel.apply(rng.choice(cmds))
            assert sel.selection_offset is not None
            assert 0 <= sel.selection_offset < n


def test_row_contains_selection() -> None:
    model = ByteGridModel(bytes(20), 16)
    sel = ByteSelection(model)
    r0, r1 = model.rows_in_range(0, 2)
    sel.click(17)
    assert not sel.row_contains_selection(r0)
    assert sel.row_contains_selection(r1)
    sel.click(15)
    assert sel.row_contains_selection(r0)


def test_scroll_align_decisions() -> None:
    # Fully visible: nothing to do
    assert scroll_align(2, 3, 0, 10, VerticalMove.DOWN) is None
    assert scroll_align(0, 1, 0, 10, VerticalMove.UP) is None
    # Direction wins
    assert scroll_align(10, 11, 0, 10, VerticalMove.UP) is ScrollAlign.TOP
    assert scroll_align(-1, 0, 0, 10, VerticalMove.DOWN) is ScrollAlign.BOTTOM
    # No direction: nearest violated edge
    assert scroll_align(-1, 0, 0, 10, VerticalMove.NONE) is ScrollAlign.TOP
    assert scroll_align(10, 11, 0, 10, VerticalMove.NONE) is ScrollAlign.BOTTOM
    # Partially clipped rows also scroll
    assert scroll_align(9.5, 10.5, 0, 10, VerticalMove.NONE) is ScrollAlign.BOTTOM


def test_scroll_into_view_consumes_pending() -> None:
    sel = ByteSelection(ByteGridModel(bytes(64), 16))
    assert sel.scroll_into_view(5, 6, 0, 3) is None  # no keyboard move yet
    sel.apply(SelectionCommand.DOWN)
    assert sel.scroll_into_view(5, 6, 0, 3) is ScrollAlign.BOTTOM
    assert sel.scroll_into_view(5, 6, 0, 3) is None
