"""dirsplit — split a flat directory into numbered sub-directories at marker files.

One-liner API::

    from dirsplit import LocalWorkspace, add_markers, split

    ws = LocalWorkspace()
    add_markers(["b.jpg", "f.jpg"], ws)
    split(ws)
"""

__version__ = "1.0.0"

from dirsplit.core.exceptions import DirSplitError, ErrorKind
from dirsplit.core.partition import partition
from dirsplit.markers import add_markers, clear_markers, read_markers
from dirsplit.splitter import SplitResult, split
from dirsplit.workspace import LocalWorkspace, Workspace

__all__ = [
    "add_markers",
    "read_markers",
    "clear_markers",
    "partition",
    "split",
    "SplitResult",
    "Workspace",
    "LocalWorkspace",
    "DirSplitError",
    "ErrorKind",
    "__version__",
]
