"""File descriptors: metadata about one configuration source."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .records import ConfigRecord


class FileKind(Enum):
    """Classification of a configuration file, decided by its filename."""

    SERVICE = "service"
    PARAMETER = "parameter"
    ENVIRONMENT_SERVICE = "environment_service"


@dataclass(frozen=True)
class FileDescriptor:
    """One configuration source, discovered on disk or synthesized for an import.

    Attributes:
        path: Absolute path of the configuration file.
        directory: Absolute directory containing the file; relative imports
            are resolved against it.
        depth: Hierarchy level counted from the scan root (root = 0).
        kind: How the file's contents are applied.
        preloaded_config: An already-parsed record. When set, the resolver
            uses it instead of loading ``path``.
    """

    path: str
    directory: str
    depth: int
    kind: FileKind = FileKind.SERVICE
    preloaded_config: Optional[ConfigRecord] = None

    @classmethod
    def for_path(cls, path: str, depth: int, kind: FileKind = FileKind.SERVICE) -> "FileDescriptor":
        return cls(path=path, directory=os.path.dirname(path), depth=depth, kind=kind)
