"""dirsplit error kinds and the exception that carries them."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Failure categories. Exit codes for these live in ``dirsplit.cli``."""

    OPEN = "open"                       # marker list can't be opened for append
    WRITE = "write"                     # append to marker list failed
    READ_DIR = "read_dir"
    READ_MARKERS = "read_markers"
    MAKE_DIR = "make_dir"
    MOVE = "move"
    BAD_FILE = "bad_file"               # argument missing
    ADD_DIR = "add_dir"                 # argument is a directory
    CWD = "cwd"
    EMPTY_MARKERS = "empty_markers"
    NAME_COLLISION = "name_collision"   # output dir name already used by a file
    REMOVE_MARKERS = "remove_markers"


class DirSplitError(Exception):
    """Base exception for all dirsplit errors.

    Carries the failure ``kind``, the ``path`` involved and the underlying
    ``cause`` (usually an ``OSError``), so the message always names both.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        path: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        self.kind = kind
        self.path = path
        self.cause = cause
        text = message
        if path is not None:
            text = f"{text}: {path}"
        if cause is not None:
            text = f"{text} - {cause}"
        super().__init__(text)
