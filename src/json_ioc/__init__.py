# json_ioc/__init__.py
__version__ = "1.0.0"

from .api import build_container
from .builder import ContainerBuilder
from .container import ContainerSink, ServiceContainer
from .definition import Definition
from .descriptor import FileDescriptor, FileKind
from .discovery import FileDiscoverer
from .exceptions import (
    ConfigurationError,
    DiscoveryError,
    InvalidArgumentError,
    JsonIocError,
    LoadError,
    ParameterNotFoundError,
    ServiceNotFoundError,
)
from .filesystem import FileSystem, OsFileSystem
from .loader import ConfigLoader, DictConfigLoader, FileConfigLoader
from .normalizer import normalize_definition
from .options import BuilderOptions
from .records import ConfigRecord, RawServiceRecord
from .resolver import ImportResolver
from .sorting import sort_by_hierarchy

__all__ = [
    "__version__",
    "build_container",
    "ContainerBuilder",
    "ContainerSink",
    "ServiceContainer",
    "Definition",
    "FileDescriptor",
    "FileKind",
    "FileDiscoverer",
    "FileSystem",
    "OsFileSystem",
    "ConfigLoader",
    "DictConfigLoader",
    "FileConfigLoader",
    "ConfigRecord",
    "RawServiceRecord",
    "ImportResolver",
    "normalize_definition",
    "sort_by_hierarchy",
    "BuilderOptions",
    "JsonIocError",
    "DiscoveryError",
    "LoadError",
    "InvalidArgumentError",
    "ConfigurationError",
    "ServiceNotFoundError",
    "ParameterNotFoundError",
]
