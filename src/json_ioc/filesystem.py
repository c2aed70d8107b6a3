"""Filesystem access used by the discoverer.

:class:`FileSystem` is the read-only protocol the discoverer walks through;
:class:`OsFileSystem` is the default implementation over :mod:`os`. Tests and
embedders can pass any object with the same three methods.
"""

import os
import stat
from typing import List, Protocol


class FileSystem(Protocol):
    """Protocol for the directory listing and status checks needed by discovery."""

    def list_dir(self, path: str) -> List[str]: ...

    def is_dir(self, path: str) -> bool: ...

    def is_file(self, path: str) -> bool: ...


class OsFileSystem:
    """:class:`FileSystem` backed by the local disk.

    Entries are returned sorted by name so repeated scans of the same tree
    visit files in the same order. Errors from :func:`os.listdir` and
    :func:`os.stat` propagate as :class:`OSError`, so a dangling symlink or
    an entry that cannot be inspected is never skipped silently.
    """

    def list_dir(self, path: str) -> List[str]:
        return sorted(os.listdir(path))

    def is_dir(self, path: str) -> bool:
        return stat.S_ISDIR(os.stat(path).st_mode)

    def is_file(self, path: str) -> bool:
        return stat.S_ISREG(os.stat(path).st_mode)
