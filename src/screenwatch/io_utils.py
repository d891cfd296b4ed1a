"""JSON file helpers and logging setup shared by the stores and the CLI."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Base class for problems with the JSON-backed stores."""


class StoreWriteError(StoreError):
    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")


def load_json(path: Path) -> Any:
    """Read JSON from disk. Errors propagate to the caller."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def dump_json(path: Path, data: Any, indent: int = 2) -> None:
    """Write JSON to a unique temp file next to `path`, then rename it into place."""
    tmp = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent,
            prefix=path.name + ".", suffix=".tmp", delete=False
        ) as f:
            tmp = Path(f.name)
            json.dump(data, f, indent=indent, ensure_ascii=False)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except OSError as e:
        if tmp is not None and tmp.exists():
            tmp.unlink()
        raise StoreWriteError(path, e.strerror or str(e)) from e
    logger.debug("Wrote JSON file %s", path)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging once; later calls only adjust the level."""
    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_time=False, show_path=False)],
    )
