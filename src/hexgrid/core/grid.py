from __future__ import annotations

from dataclasses import dataclass

EMPTY_TEXT = "File is empty."
END_OF_FILE_TEXT = "(End of file)"

# Layout of a formatted row: "<offset>  <hex block>  |<ascii>|"
OFFSET_DIGITS = 8
HEX_START = OFFSET_DIGITS + 2


class InvalidRow(ValueError):
    """Raised when a negative row index or row count is provided."""


@dataclass(frozen=True)
class RowText:
    """A single rendered row and its starting offset."""

    offset: int
    text: str
    bytes: bytes


def printable(byte: int) -> str:
    """Return the ASCII column character for `byte`.

    ASCII graphic characters and the space render as themselves, everything else as '.'.
    """
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def format_row(offset: int, chunk: bytes, width: int) -> str:
    half = width // 2
    hex_parts: list[str] = []
    for idx in range(width):
        if idx == half:
            hex_parts.append(" ")
        hex_parts.append(f"{chunk[idx]:02X}" if idx < len(chunk) else "  ")
        if idx + 1 != width:
            hex_parts.append(" ")

    ascii_parts = [printable(chunk[idx]) if idx < len(chunk) else " " for idx in range(width)]
    return f"{offset:08X}  {''.join(hex_parts)}  |{''.join(ascii_parts)}|"


# ---- Row geometry (character columns within a formatted row) ----
def hex_column_start(col: int, width: int) -> int:
    """First character position of hex cell `col`."""
    return HEX_START + col * 3 + (1 if col >= width // 2 else 0)


def hex_block_width(width: int) -> int:
    # 2 digits per cell, width-1 separators, plus the half-row gap
    return width * 3


def ascii_column_start(col: int, width: int) -> int:
    """Character position of ASCII cell `col` (just past the opening '|')."""
    return HEX_START + hex_block_width(width) + 3 + col


def column_at(x: int, width: int) -> int | None:
    """Map a character position in a formatted row to the byte column under it.

    Both the two hex digits of a cell and its ASCII character map to that cell's
    column. Separators, the offset gutter and the '|' borders map to None.
    """
    first_ascii = ascii_column_start(0, width)
    if first_ascii <= x < first_ascii + width:
        return x - first_ascii
    for col in range(width):
        start = hex_column_start(col, width)
        if start <= x < start + 2:
            return col
    return None


class ByteGridModel:
    """Immutable byte buffer viewed as fixed-width rows.

    Owns the scroll position (topmost visible row) and the number of rows the
    active frontend can display. All scroll moves are clamped to the valid row
    range; an empty buffer is a supported state with zero rows.
    """

    def __init__(self, data: bytes, row_width: int = 16, *, name: str = "") -> None:
        self._data = bytes(data)
        self._row_width = max(1, int(row_width))
        self._scroll_row = 0
        self._view_rows = 1
        self.name = name

    @property
    def size(self) -> int:
        """Buffer length in bytes."""
        return len(self._data)

    @property
    def row_width(self) -> int:
        return self._row_width

    @property
    def scroll_row(self) -> int:
        return self._scroll_row

    @property
    def view_rows(self) -> int:
        return self._view_rows

    def set_view_rows(self, rows: int) -> None:
        self._view_rows = max(1, int(rows))

    def total_rows(self) -> int:
        if not self._data:
            return 0
        return (len(self._data) + self._row_width - 1) // self._row_width

    def row_of(self, offset: int) -> int:
        """Row index containing byte `offset`."""
        return offset // self._row_width

    # ---- Scrolling ----
    def scroll_rows(self, delta: int) -> None:
        self.scroll_to_row(self._scroll_row + delta)

    def scroll_to_row(self, row: int) -> None:
        total = self.total_rows()
        if total == 0:
            self._scroll_row = 0
            return
        self._scroll_row = max(0, min(row, total - 1))

    def scroll_to_start(self) -> None:
        self._scroll_row = 0

    def scroll_to_end(self) -> None:
        self._scroll_row = max(0, self.total_rows() - 1)

    def current_offset(self) -> int:
        return self._scroll_row * self._row_width

    # ---- Rows ----
    def rows_in_range(self, start_row: int, count: int) -> list[RowText]:
        """Return formatted rows for `[start_row, start_row + count)`.

        - Negative `start_row` or `count` raises `InvalidRow`.
        - The range is truncated at `total_rows()`; an empty buffer yields [].
        """
        if start_row < 0:
            raise InvalidRow("start_row must be >= 0")
        if count < 0:
            raise InvalidRow("count must be >= 0")
        if not self._data or count == 0:
            return []

        bpr = self._row_width
        limit = min(start_row + count, self.total_rows())
        rows: list[RowText] = []
        for row in range(start_row, limit):
            offset = row * bpr
            chunk = self._data[offset : offset + bpr]
            rows.append(RowText(offset=offset, text=format_row(offset, chunk, bpr), bytes=chunk))
        return rows

    def render_lines(self, rows: int) -> list[str]:
        """Display lines for `rows` rows starting at the scroll position."""
        if not self._data:
            return [EMPTY_TEXT]
        lines = [r.text for r in self.rows_in_range(self._scroll_row, max(0, rows))]
        return lines or [END_OF_FILE_TEXT]

    # ---- Status ----
    def status_line(self) -> str:
        total = max(1, self.total_rows())
        current = min(self._scroll_row + 1, total)
        return (
            f"{self.name} | bytes: {self.size} | row: {current}/{total} | "
            f"offset: 0x{self.current_offset():08X} | press q to quit"
        )

    def summary(self) -> str:
        return f"bytes: {self.size} | rows: {self.total_rows()} | width: {self._row_width}"
