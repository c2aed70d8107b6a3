from typing import Any, Optional

from .builder import ContainerBuilder, ContainerFactory, OptionsT
from .filesystem import FileSystem
from .loader import ConfigLoader


def build_container(
    root_directory: str,
    options: OptionsT = None,
    *,
    filesystem: Optional[FileSystem] = None,
    loader: Optional[ConfigLoader] = None,
    container_factory: Optional[ContainerFactory] = None,
) -> Any:
    """Build a container from the configuration files under *root_directory*.

    Example:
        >>> container = build_container("/srv/app", {"env": "prod"})
        >>> container.get_definition("logger").file
        'lib/Logger'
    """
    builder = ContainerBuilder(filesystem=filesystem, loader=loader, container_factory=container_factory)
    return builder.build_container(root_directory, options)
