"""Recursive discovery of configuration files.

:class:`FileDiscoverer` walks a directory tree depth-first and turns every
``*services.json``, ``*parameters.json`` and (when an environment is set)
``*services_<env>.json`` file into a :class:`FileDescriptor` annotated with
its depth below the scan root. The result is unordered; ordering is the job of
:func:`json_ioc.sorting.sort_by_hierarchy`.
"""

import os
from collections import Counter
from pathlib import PurePath
from typing import List, Optional

from .constants import LOGGER, NODE_MODULES_DIR, PARAMETERS_SUFFIX, SERVICES_SUFFIX
from .descriptor import FileDescriptor, FileKind
from .exceptions import DiscoveryError
from .filesystem import FileSystem, OsFileSystem
from .options import BuilderOptions


class FileDiscoverer:
    """Finds configuration files below a root directory.

    Args:
        filesystem: Directory reader; defaults to :class:`OsFileSystem`.
        options: Builder options (environment name, ``node_modules`` pruning).
    """

    def __init__(self, filesystem: Optional[FileSystem] = None, options: Optional[BuilderOptions] = None):
        self._fs = filesystem or OsFileSystem()
        self._options = options or BuilderOptions()
        self._env_suffix = self._options.env_suffix

    def classify(self, filename: str) -> Optional[FileKind]:
        """Return the kind of *filename*, or ``None`` if it is not a config file.

        Patterns are checked in priority order: service, parameter,
        environment service.
        """
        if filename.endswith(SERVICES_SUFFIX):
            return FileKind.SERVICE
        if filename.endswith(PARAMETERS_SUFFIX):
            return FileKind.PARAMETER
        if self._env_suffix and filename.endswith(self._env_suffix):
            return FileKind.ENVIRONMENT_SERVICE
        return None

    def discover(self, root: str) -> List[FileDescriptor]:
        """Walk *root* and return a descriptor for every configuration file.

        Raises:
            DiscoveryError: If *root* cannot be listed or any entry below it
                cannot be inspected.
        """
        found: List[FileDescriptor] = []
        self._walk(root, 0, found)
        counts = Counter(d.kind for d in found)
        LOGGER.info(
            "Discovered %d config files under '%s' (services: %d, environment: %d, parameters: %d)",
            len(found),
            root,
            counts[FileKind.SERVICE],
            counts[FileKind.ENVIRONMENT_SERVICE],
            counts[FileKind.PARAMETER],
        )
        return found

    def _is_pruned(self, path: str) -> bool:
        # Whole path segments only: "my_node_modules" is walked.
        return self._options.ignore_node_modules_directory and NODE_MODULES_DIR in PurePath(path).parts

    def _walk(self, directory: str, depth: int, found: List[FileDescriptor]) -> None:
        try:
            names = self._fs.list_dir(directory)
        except OSError as e:
            raise DiscoveryError(directory, e) from e

        for name in names:
            path = os.path.join(directory, name)
            try:
                is_dir = self._fs.is_dir(path)
                is_file = not is_dir and self._fs.is_file(path)
            except OSError as e:
                raise DiscoveryError(path, e) from e

            if is_dir:
                if self._is_pruned(path):
                    LOGGER.debug("Skipping directory '%s'", path)
                    continue
                self._walk(path, depth + 1, found)
            elif is_file:
                kind = self.classify(name)
                if kind is None:
                    continue
                LOGGER.debug("Found %s file '%s' at depth %d", kind.value, path, depth)
                found.append(FileDescriptor(path=path, directory=directory, depth=depth, kind=kind))
