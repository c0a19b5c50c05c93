"""Persistence of the downloaded introspection result.

The file is always replaced as a whole: content goes to a temporary file in
the same directory first and is moved over the target with `os.replace`, so a
failed write never leaves a truncated schema behind.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def write_schema_file(*, path: Path, content: str) -> Path:
    """Atomically overwrite `path` with `content` (UTF-8, newlines untouched)."""

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return path
