from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    offset_fg: str
    hex_fg: str
    ascii_fg: str
    punct_fg: str
    header_fg: str
    selection_bg: str
    selection_fg: str
    status_fg: str
    empty_fg: str


DEFAULT = Palette(
    offset_fg="#8892a0",
    hex_fg="#ffffff",
    ascii_fg="#d8dee9",
    punct_fg="#6b7280",
    header_fg="#5ea1ff",
    selection_bg="#314f76",
    selection_fg="#ffffff",
    status_fg="grey",
    empty_fg="#6b7280",
)

PALETTE = DEFAULT
