"""Container construction.

:class:`ContainerBuilder` wires the pipeline together: discover the
configuration files under a root directory, sort them into precedence order,
and resolve each one into a fresh container. Every collaborator is
injectable so the builder can run against an in-memory tree.
"""

import os
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Union

from .constants import LOGGER
from .container import ContainerSink, ServiceContainer
from .descriptor import FileDescriptor
from .discovery import FileDiscoverer
from .filesystem import FileSystem, OsFileSystem
from .loader import ConfigLoader, FileConfigLoader
from .options import BuilderOptions
from .resolver import ImportResolver
from .sorting import sort_by_hierarchy

ContainerFactory = Callable[[str], ContainerSink]
OptionsT = Union[None, BuilderOptions, Mapping]


class ContainerBuilder:
    """Builds containers from ``services.json`` trees.

    Args:
        filesystem: Directory reader used for discovery.
        loader: Configuration loader used for every file and import.
        container_factory: Called with the root directory to create the
            empty container; defaults to :class:`ServiceContainer`.
    """

    def __init__(
        self,
        filesystem: Optional[FileSystem] = None,
        loader: Optional[ConfigLoader] = None,
        container_factory: Optional[ContainerFactory] = None,
    ) -> None:
        self._fs = filesystem or OsFileSystem()
        self._loader = loader or FileConfigLoader()
        self._container_factory = container_factory or ServiceContainer

    def make_empty_container(self, root_directory: str) -> Any:
        return self._container_factory(root_directory)

    def find_config_files(self, root_directory: str, options: OptionsT = None) -> List[FileDescriptor]:
        """Return the configuration files under *root_directory* in processing order."""
        opts = BuilderOptions.coerce(options)
        files = FileDiscoverer(self._fs, opts).discover(root_directory)
        return sort_by_hierarchy(files)

    def build_container(self, root_directory: str, options: OptionsT = None) -> Any:
        """Build a container from every configuration file under *root_directory*.

        Args:
            root_directory: Directory to scan; made absolute first.
            options: :class:`BuilderOptions`, a mapping of option values, or
                ``None`` for the defaults.

        Returns:
            The populated container.

        Raises:
            ConfigurationError: If *options* is invalid.
            DiscoveryError: If the tree cannot be walked.
            LoadError: If a configuration file or import cannot be loaded.
            InvalidArgumentError: If a service declares a malformed call.
        """
        opts = BuilderOptions.coerce(options)
        root = os.path.abspath(root_directory)
        LOGGER.info("Building container from '%s' (env=%s)", root, opts.env or "-")

        container = self.make_empty_container(root)
        files = self.find_config_files(root, opts)

        resolver = ImportResolver(self._loader)
        for descriptor in files:
            resolver.resolve(descriptor, container)

        LOGGER.info(
            "Container built: %d files, %d definitions, %d parameters",
            resolver.files_loaded,
            resolver.definitions_emitted,
            resolver.parameters_emitted,
        )
        return container
