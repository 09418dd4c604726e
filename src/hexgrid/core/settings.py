from __future__ import annotations

from dataclasses import dataclass

import yaml

MIN_ROW_WIDTH = 8
MAX_ROW_WIDTH = 32
DEFAULT_ROW_WIDTH = 16


class SettingsError(Exception):
    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass(frozen=True)
class Settings:
    width: int = DEFAULT_ROW_WIDTH
    gui: bool = False
    debug: bool = False
    log_file: str | None = None


def clamp_row_width(value: int) -> int:
    """Clamp bytes per row to the supported range."""
    return max(MIN_ROW_WIDTH, min(int(value), MAX_ROW_WIDTH))


def load_settings(text: str) -> Settings:
    """Parse a YAML settings document.

    Unknown keys and wrongly typed values are collected and reported together.
    The width is returned as written; callers clamp it with `clamp_row_width`.
    """
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise SettingsError([f"YAML parse error: {e}"]) from None

    if not isinstance(data, dict):
        raise SettingsError(["Top-level YAML must be a mapping (width, gui, debug, log_file)."])

    errors: list[str] = []
    known = {"width", "gui", "debug", "log_file"}
    for key in data:
        if key not in known:
            errors.append(f"Unknown setting '{key}'")

    width = data.get("width", DEFAULT_ROW_WIDTH)
    # bool is an int subclass; reject it explicitly
    if not isinstance(width, int) or isinstance(width, bool):
        errors.append(f"width must be an integer, got {type(width).__name__}")
        width = DEFAULT_ROW_WIDTH

    flags: dict[str, bool] = {}
    for key in ("gui", "debug"):
        value = data.get(key, False)
        if not isinstance(value, bool):
            errors.append(f"{key} must be true or false, got {value!r}")
            value = False
        flags[key] = value

    log_file = data.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        errors.append(f"log_file must be a string, got {type(log_file).__name__}")
        log_file = None

    if errors:
        raise SettingsError(errors)
    return Settings(width=width, gui=flags["gui"], debug=flags["debug"], log_file=log_file)


def read_settings(path: str) -> Settings:
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except OSError as e:
        raise SettingsError([f"Cannot read settings file {path}: {e.strerror or e}"]) from None
    return load_settings(text)
