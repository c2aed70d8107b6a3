"""Configuration loaders.

Provides the :class:`ConfigLoader` protocol and its implementations:
:class:`FileConfigLoader` (JSON files, plus YAML files reached through
``imports``) and :class:`DictConfigLoader` (in-memory documents keyed by path).
"""

import json
import os
from typing import Any, Mapping, Protocol

from .exceptions import LoadError
from .records import ConfigRecord

YAML_SUFFIXES = (".yaml", ".yml")


class ConfigLoader(Protocol):
    """Protocol for turning a configuration path into a :class:`ConfigRecord`."""

    def load(self, path: str) -> ConfigRecord:
        """Load and parse the configuration at *path*.

        Raises:
            LoadError: If the file is missing, unreadable, or not valid
                structured data.
        """
        ...


class DictConfigLoader:
    """Loader backed by in-memory documents.

    Args:
        documents: Absolute path to parsed document.

    Example:
        >>> loader = DictConfigLoader({"/app/services.json": {"parameters": {"a": 1}}})
        >>> loader.load("/app/services.json").parameters["a"]
        1
    """

    def __init__(self, documents: Mapping[str, Any]):
        self._documents = {os.path.normpath(k): v for k, v in documents.items()}

    def load(self, path: str) -> ConfigRecord:
        key = os.path.normpath(path)
        if key not in self._documents:
            raise LoadError(path, "no such document")
        return ConfigRecord.from_mapping(self._documents[key], path)


class FileConfigLoader:
    """Loader that reads configuration files from disk.

    ``.yaml``/``.yml`` files are parsed with PyYAML (``pip install
    json-ioc[yaml]``); everything else is parsed as JSON.
    """

    def load(self, path: str) -> ConfigRecord:
        if path.endswith(YAML_SUFFIXES):
            data = self._load_yaml(path)
        else:
            data = self._load_json(path)
        return ConfigRecord.from_mapping(data, path)

    def _load_json(self, path: str) -> Any:
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise LoadError(path, e) from e

    def _load_yaml(self, path: str) -> Any:
        try:
            import yaml
        except ImportError as e:
            raise LoadError(path, "PyYAML not installed") from e
        try:
            with open(path, encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoadError(path, e) from e
