"""Filesystem helpers for reading lock files."""

from __future__ import annotations

import json
import os
from pathlib import Path

from .exceptions import LockParseError
from .models import LockDocument


def path_exists(path: str) -> bool:
    """Return whether ``path`` exists.

    Only a missing file counts as "does not exist"; permission and other
    I/O errors propagate to the caller.
    """
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


def load_lock_document(path: str) -> LockDocument:
    """Read and decode a JSON lock file.

    Parameters
    ----------
    path:
        Location of the lock file.

    Returns
    -------
    LockDocument
        The decoded document. Unexpected shapes decode to zero packages.

    Raises
    ------
    LockParseError
        If the file is empty, is not UTF-8, is not valid JSON or is nested
        too deeply to decode. A leading UTF-8 BOM is accepted.
    OSError
        If the file cannot be read.
    """

    try:
        content = Path(path).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise LockParseError("Lock file is not valid UTF-8", path=path, original_exception=e) from e

    if not content.strip():
        raise LockParseError("Lock file is empty", path=path)

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise LockParseError("Invalid JSON syntax", path=path, original_exception=e) from e
    except RecursionError as e:
        raise LockParseError("Lock file is nested too deeply to decode", path=path, original_exception=e) from e

    return LockDocument.from_raw(data)
