"""Split executor — partitions a working directory into numbered sub-directories.

Reads the file listing and the marker list, computes partitions and then
moves every file into ``<prefix><index>``. Each step is a hard failure
point: the first error aborts the run and whatever was already moved stays
where it is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from dirsplit.core.config import DEFAULT_CONFIG, DirSplitConfig
from dirsplit.core.exceptions import DirSplitError, ErrorKind
from dirsplit.core.partition import partition
from dirsplit.markers import clear_markers, read_markers
from dirsplit.workspace import Workspace

logger = logging.getLogger("dirsplit.splitter")


@dataclass
class SplitResult:
    """Outcome of a completed split."""

    directories: list[str] = field(default_factory=list)
    partitions: list[list[str]] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return sum(len(p) for p in self.partitions)

    def summary(self) -> str:
        """Return a human-readable summary string."""
        lines = [
            f"📂 Split {self.file_count} file(s) into {len(self.directories)} director(ies)"
        ]
        for name, files in zip(self.directories, self.partitions):
            lines.append(f"   • {name}: {len(files)} file(s), starting at {files[0]}")
        return "\n".join(lines)


def split(
    workspace: Workspace, config: DirSplitConfig = DEFAULT_CONFIG
) -> SplitResult:
    """Partition the workspace at the recorded markers and move files accordingly."""
    try:
        base = workspace.resolve()
    except OSError as exc:
        raise DirSplitError(ErrorKind.CWD, "failed to get working directory", cause=exc) from exc

    try:
        all_files = sorted(
            name for name in workspace.list_files() if name != config.marker_file
        )
    except OSError as exc:
        raise DirSplitError(
            ErrorKind.READ_DIR, "failed to read directory", str(base), exc
        ) from exc

    markers = read_markers(workspace, config)
    if not markers:
        raise DirSplitError(ErrorKind.EMPTY_MARKERS, "empty marker list", config.marker_file)
    markers.sort()

    partitions = partition(all_files, markers)
    directories = [config.dir_name(i) for i in range(len(partitions))]
    _check_collisions(directories, all_files)

    logger.info(
        "Splitting %d file(s) in %s into %d partition(s)",
        len(all_files),
        base,
        len(partitions),
    )
    for out_dir, files in zip(directories, partitions):
        try:
            workspace.make_dir(out_dir, config.dir_mode)
        except OSError as exc:
            raise DirSplitError(
                ErrorKind.MAKE_DIR, "failed to create directory", out_dir, exc
            ) from exc
        for name in files:
            try:
                workspace.move(name, out_dir)
            except OSError as exc:
                raise DirSplitError(ErrorKind.MOVE, "failed to move", name, exc) from exc

    clear_markers(workspace, config)
    return SplitResult(directories=directories, partitions=partitions)


def _check_collisions(directories: list[str], all_files: list[str]) -> None:
    """Refuse to run when a planned output directory name is taken by a file."""
    taken = set(all_files)
    for name in directories:
        if name in taken:
            raise DirSplitError(
                ErrorKind.NAME_COLLISION,
                "output directory name is used by a file",
                name,
            )
