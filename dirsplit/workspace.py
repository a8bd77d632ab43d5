"""Directory abstraction that the marker recorder and the splitter operate on.

``Workspace`` is the interface; ``LocalWorkspace`` binds it to a real
directory on disk. Every method raises plain ``OSError`` on failure and
leaves classification to the caller.
"""

from __future__ import annotations

import logging
import os
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional

logger = logging.getLogger("dirsplit.workspace")


class Workspace(ABC):
    """A flat working directory whose entries are addressed by name.

    Subclasses must implement every operation below. Names are relative
    to the directory returned by ``resolve``.
    """

    @abstractmethod
    def resolve(self) -> Path:
        """Return the absolute path of the working directory."""
        ...

    @abstractmethod
    def list_files(self) -> list[str]:
        """Names of all entries that are not directories, unsorted.

        Symlinks count as files even when they point at a directory.
        """
        ...

    @abstractmethod
    def stat(self, name: str) -> os.stat_result:
        """Stat ``name``; raises ``FileNotFoundError`` when it is missing."""
        ...

    @abstractmethod
    def open_append(self, name: str, mode: int) -> IO[str]:
        """Open ``name`` for appending text, creating it with ``mode`` if absent."""
        ...

    @abstractmethod
    def read_text(self, name: str) -> str:
        ...

    @abstractmethod
    def make_dir(self, name: str, mode: int) -> None:
        """Create directory ``name`` and its parents; no-op if it exists."""
        ...

    @abstractmethod
    def move(self, name: str, dest_dir: str) -> None:
        """Move entry ``name`` into directory ``dest_dir``, keeping its name."""
        ...

    @abstractmethod
    def remove(self, name: str) -> None:
        ...


class LocalWorkspace(Workspace):
    """Workspace backed by a directory on the local filesystem.

    Usage::

        ws = LocalWorkspace()                 # process cwd, resolved lazily
        ws = LocalWorkspace(Path("photos"))
        ws.list_files()
    """

    def __init__(self, root: Optional[Path] = None):
        self.root = root

    def resolve(self) -> Path:
        if self.root is None:
            return Path.cwd()
        return Path(self.root).resolve()

    def _path(self, name: str) -> Path:
        return self.resolve() / name

    def list_files(self) -> list[str]:
        with os.scandir(self.resolve()) as entries:
            return [e.name for e in entries if not e.is_dir(follow_symlinks=False)]

    def stat(self, name: str) -> os.stat_result:
        return self._path(name).stat()

    def open_append(self, name: str, mode: int) -> IO[str]:
        fd = os.open(self._path(name), os.O_CREAT | os.O_WRONLY | os.O_APPEND, mode)
        return os.fdopen(fd, "a", encoding="utf-8", errors="surrogateescape")

    def read_text(self, name: str) -> str:
        with open(
            self._path(name), encoding="utf-8", errors="surrogateescape", newline=""
        ) as f:
            return f.read()

    def make_dir(self, name: str, mode: int) -> None:
        self._path(name).mkdir(mode=mode, parents=True, exist_ok=True)

    def move(self, name: str, dest_dir: str) -> None:
        src = self._path(name)
        dst = self._path(dest_dir) / name
        shutil.move(str(src), str(dst))
        logger.debug("Moved %s to %s", name, dest_dir)

    def remove(self, name: str) -> None:
        self._path(name).unlink()
