from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileLoadError(OSError):
    """Raised when the input file cannot be read."""


def load_bytes(path: str) -> bytes:
    """Read the whole file at `path` into memory.

    - A missing file raises `FileNotFoundError` with a clear message.
    - Any other read failure raises `FileLoadError` chained to the cause.
    """
    try:
        data = Path(path).read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None
    except OSError as e:
        raise FileLoadError(f"Failed to read input file: {path}") from e
    logger.debug("loaded %s (%d bytes)", path, len(data))
    return data
