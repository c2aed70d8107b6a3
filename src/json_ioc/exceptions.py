"""Exception hierarchy for json-ioc.

All package-specific exceptions inherit from :class:`JsonIocError`, so a
failed build can be caught with a single ``except JsonIocError`` clause.
"""

from typing import Any, Optional


class JsonIocError(Exception):
    """Base exception for all json-ioc errors."""

    pass


class DiscoveryError(JsonIocError):
    """Raised when walking the configuration tree fails.

    Attributes:
        path: The file or directory being inspected when the walk failed.
        cause: The original filesystem error.
    """

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"Failed to scan '{path}': {cause.__class__.__name__}: {cause}")
        self.path = path
        self.cause = cause


class LoadError(JsonIocError):
    """Raised when a configuration file cannot be read, parsed or has the wrong shape.

    Attributes:
        path: The configuration file that failed to load.
        cause: The original exception, or ``None`` for shape errors.
    """

    def __init__(self, path: str, reason: Any):
        if isinstance(reason, Exception):
            detail = f"{reason.__class__.__name__}: {reason}"
            cause: Optional[Exception] = reason
        else:
            detail = str(reason)
            cause = None
        super().__init__(f"Failed to load config '{path}': {detail}")
        self.path = path
        self.cause = cause


class InvalidArgumentError(JsonIocError, ValueError):
    """Raised for malformed calls on a :class:`~json_ioc.definition.Definition`."""

    def __init__(self, msg: str):
        super().__init__(msg)


class ConfigurationError(JsonIocError):
    """Raised for invalid builder options (unknown keys, bad env names)."""

    def __init__(self, msg: str):
        super().__init__(msg)


class ServiceNotFoundError(JsonIocError, KeyError):
    """Raised when the container holds no definition for a service name.

    Attributes:
        name: The fully qualified service name that was requested.
    """

    def __init__(self, name: str):
        super().__init__(f"Service definition '{name}' not found")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class ParameterNotFoundError(JsonIocError, KeyError):
    """Raised when the container holds no parameter with the requested name.

    Attributes:
        name: The fully qualified parameter name that was requested.
    """

    def __init__(self, name: str):
        super().__init__(f"Parameter '{name}' not found")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]
