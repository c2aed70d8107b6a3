"""Import and namespace resolution.

:class:`ImportResolver` processes one configuration file: it follows the
file's ``imports`` depth-first, then emits the file's own parameters and
service definitions into a :class:`~json_ioc.container.ContainerSink` under
the composed namespace. Imports are applied before the importing file, so the
importing file's entries override what it imports.

Import cycles are not detected. A cyclic import recurses until Python's
recursion limit raises :class:`RecursionError`.
"""

import os
from typing import Optional

from .constants import LOGGER, NAMESPACE_SEPARATOR
from .container import ContainerSink
from .descriptor import FileDescriptor, FileKind
from .exceptions import InvalidArgumentError
from .loader import ConfigLoader, FileConfigLoader
from .normalizer import normalize_definition
from .records import ConfigRecord


def compose_namespace(inherited: str, declared: Optional[str]) -> str:
    if not declared:
        return inherited
    if inherited:
        return f"{inherited}{NAMESPACE_SEPARATOR}{declared}"
    return declared


def compose_name(namespace: str, key: str) -> str:
    return f"{namespace}{NAMESPACE_SEPARATOR}{key}" if namespace else key


def resolve_import_path(directory: str, ref: str) -> str:
    """Return the absolute path of import *ref* declared in *directory*.

    ``./x.json``, ``../x.json`` and ``x.json`` are relative to *directory*;
    absolute references are kept.
    """
    return os.path.normpath(os.path.join(directory, ref))


class ImportResolver:
    """Resolves a file and its transitive imports into a sink.

    Args:
        loader: Parses configuration paths; defaults to
            :class:`FileConfigLoader`.

    Attributes:
        files_loaded: Number of files processed, imports included.
        parameters_emitted: Number of ``set_parameter`` calls made.
        definitions_emitted: Number of ``set`` calls made.
    """

    def __init__(self, loader: Optional[ConfigLoader] = None):
        self._loader = loader or FileConfigLoader()
        self.files_loaded = 0
        self.parameters_emitted = 0
        self.definitions_emitted = 0

    def _record_for(self, descriptor: FileDescriptor) -> ConfigRecord:
        if descriptor.preloaded_config is not None:
            return descriptor.preloaded_config
        return self._loader.load(descriptor.path)

    def resolve(self, descriptor: FileDescriptor, sink: ContainerSink, inherited_namespace: str = "") -> None:
        """Apply *descriptor* and everything it imports to *sink*.

        Raises:
            LoadError: If the file or one of its imports cannot be loaded.
            InvalidArgumentError: If a service declares a malformed call.
        """
        record = self._record_for(descriptor)
        self.files_loaded += 1
        namespace = compose_namespace(inherited_namespace, record.namespace)
        LOGGER.debug("Resolving '%s' (namespace=%r, depth=%d)", descriptor.path, namespace, descriptor.depth)

        for ref in record.imports:
            child = FileDescriptor.for_path(resolve_import_path(descriptor.directory, ref), depth=descriptor.depth)
            LOGGER.debug("Following import '%s' from '%s'", ref, descriptor.path)
            self.resolve(child, sink, namespace)

        for key, value in record.parameters.items():
            name = compose_name(namespace, key)
            sink.set_parameter(name, value)
            self.parameters_emitted += 1
            LOGGER.debug("Set parameter '%s'", name)

        if descriptor.kind is FileKind.PARAMETER:
            if record.services:
                LOGGER.debug("Ignoring services declared in parameter file '%s'", descriptor.path)
            return

        for svc_name, raw in record.services.items():
            name = compose_name(namespace, svc_name)
            try:
                definition = normalize_definition(raw, descriptor.directory, namespace)
            except InvalidArgumentError as e:
                raise InvalidArgumentError(f"{descriptor.path}: service '{name}': {e}") from e
            sink.set(name, definition)
            self.definitions_emitted += 1
            LOGGER.debug("Set service '%s' from '%s'", name, descriptor.path)
