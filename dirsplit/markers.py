"""Marker list persistence — record, read and clear split-point filenames.

The marker list is a plain text file in the working directory holding one
filename per line. ``add_markers`` appends to it, ``read_markers`` parses it
and ``clear_markers`` deletes it once a split has gone through.
"""

from __future__ import annotations

import logging
import stat
from typing import Iterable

from dirsplit.core.config import DEFAULT_CONFIG, DirSplitConfig
from dirsplit.core.exceptions import DirSplitError, ErrorKind
from dirsplit.workspace import Workspace

logger = logging.getLogger("dirsplit.markers")


def add_markers(
    filenames: Iterable[str],
    workspace: Workspace,
    config: DirSplitConfig = DEFAULT_CONFIG,
) -> list[str]:
    """Validate each filename and append it to the marker list.

    Every name must refer to an existing non-directory entry of the
    workspace. Names are written and flushed one at a time, so a failure
    part-way leaves the earlier ones recorded. Returns the names added.
    """
    try:
        handle = workspace.open_append(config.marker_file, config.marker_mode)
    except OSError as exc:
        raise DirSplitError(
            ErrorKind.OPEN, "failed to open marker list", config.marker_file, exc
        ) from exc

    added: list[str] = []
    with handle:
        for name in filenames:
            _check_markable(name, workspace)
            try:
                handle.write(name + "\n")
                handle.flush()
            except (OSError, UnicodeEncodeError) as exc:
                raise DirSplitError(
                    ErrorKind.WRITE, "failed to add marker", name, exc
                ) from exc
            added.append(name)

    logger.info("Recorded %d marker(s) in %s", len(added), config.marker_file)
    return added


def _check_markable(name: str, workspace: Workspace) -> None:
    try:
        st = workspace.stat(name)
    except (OSError, ValueError) as exc:
        raise DirSplitError(
            ErrorKind.BAD_FILE, "file probably doesn't exist", name, exc
        ) from exc
    if stat.S_ISDIR(st.st_mode):
        raise DirSplitError(ErrorKind.ADD_DIR, "can't add directories", name)


def read_markers(
    workspace: Workspace, config: DirSplitConfig = DEFAULT_CONFIG
) -> list[str]:
    """Return the recorded markers in file order, trimmed, blank lines dropped."""
    try:
        text = workspace.read_text(config.marker_file)
    except OSError as exc:
        raise DirSplitError(
            ErrorKind.READ_MARKERS, "failed to read marker list", config.marker_file, exc
        ) from exc

    return [line.strip() for line in text.split("\n") if line.strip()]


def clear_markers(
    workspace: Workspace, config: DirSplitConfig = DEFAULT_CONFIG
) -> None:
    """Delete the marker list file."""
    try:
        workspace.remove(config.marker_file)
    except OSError as exc:
        raise DirSplitError(
            ErrorKind.REMOVE_MARKERS, "failed to remove marker list", config.marker_file, exc
        ) from exc
    logger.info("Removed marker list %s", config.marker_file)
