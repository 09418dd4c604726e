from __future__ import annotations

import logging

from textual.logging import TextualHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool = False, log_file: str | None = None) -> None:
    """Route `hexgrid` log records to the Textual devtools console and optionally a file.

    The terminal belongs to the running app, so nothing is written to stderr.
    """
    root = logging.getLogger("hexgrid")
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [TextualHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.propagate = False
