"""dirsplit configuration — marker list name, output directory naming, file modes."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class DirSplitConfig:
    """Top-level dirsplit configuration."""

    marker_file: str = ".split"
    dir_prefix: str = "split_"
    dir_mode: int = 0o700
    marker_mode: int = 0o600

    def dir_name(self, index: int) -> str:
        """Name of the output directory for partition ``index``."""
        return f"{self.dir_prefix}{index}"

    @classmethod
    def from_env(cls) -> "DirSplitConfig":
        """Build a config, letting ``DIRSPLIT_*`` variables override defaults."""
        return cls(
            marker_file=os.getenv("DIRSPLIT_MARKER_FILE", cls.marker_file),
            dir_prefix=os.getenv("DIRSPLIT_DIR_PREFIX", cls.dir_prefix),
        )


DEFAULT_CONFIG = DirSplitConfig()
