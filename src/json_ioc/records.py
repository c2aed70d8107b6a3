"""Typed views of parsed configuration files.

A configuration file is parsed into a :class:`ConfigRecord`; each entry of its
``services`` object becomes a :class:`RawServiceRecord`. Every field is
optional. Only the container types of the top-level fields are checked, the
values themselves are kept as authored.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .exceptions import LoadError


def _get(data: Mapping[str, Any], key: str, default: Any) -> Any:
    value = data.get(key)
    return default if value is None else value


@dataclass(frozen=True)
class RawServiceRecord:
    """A service entry exactly as written in a ``services`` object.

    Attributes:
        class_name: The raw ``class`` field (module path or class name).
        constructor_method: Optional named constructor.
        arguments: Constructor arguments, or ``None`` when absent.
        calls: ``[method, args]`` pairs, or ``None`` when absent.
        properties: Property injection map, or ``None`` when absent.
        is_object: Raw ``isObject`` flag.
        is_function: Raw ``isFunction`` flag.
        is_singleton: Raw ``isSingleton`` flag; ``None`` when absent.
        tags: Tag records, or ``None`` when absent.
    """

    class_name: Optional[str] = None
    constructor_method: Optional[str] = None
    arguments: Optional[Any] = None
    calls: Optional[Any] = None
    properties: Optional[Any] = None
    is_object: Optional[bool] = None
    is_function: Optional[bool] = None
    is_singleton: Optional[bool] = None
    tags: Optional[Any] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RawServiceRecord":
        return cls(
            class_name=data.get("class"),
            constructor_method=data.get("constructorMethod"),
            arguments=data.get("arguments"),
            calls=data.get("calls"),
            properties=data.get("properties"),
            is_object=data.get("isObject"),
            is_function=data.get("isFunction"),
            is_singleton=data.get("isSingleton"),
            tags=data.get("tags"),
        )


@dataclass(frozen=True)
class ConfigRecord:
    """The parsed content of one configuration file.

    Attributes:
        namespace: Namespace declared by the file, if any.
        imports: Paths relative to the file's directory, in declared order.
        parameters: Parameter name to value.
        services: Service name to raw service record.
    """

    namespace: Optional[str] = None
    imports: Tuple[str, ...] = ()
    parameters: Mapping[str, Any] = field(default_factory=dict)
    services: Mapping[str, RawServiceRecord] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Any, path: str = "<memory>") -> "ConfigRecord":
        """Build a record from a parsed document.

        Args:
            data: The parsed document; must be a mapping.
            path: Source path, used in error messages.

        Raises:
            LoadError: If *data* or one of its known fields has the wrong
                container type.
        """
        if not isinstance(data, Mapping):
            raise LoadError(path, f"expected an object at top level, got {type(data).__name__}")

        namespace = data.get("namespace")
        if namespace is not None and not isinstance(namespace, str):
            raise LoadError(path, "'namespace' must be a string")

        imports = _get(data, "imports", [])
        if not isinstance(imports, list) or not all(isinstance(i, str) for i in imports):
            raise LoadError(path, "'imports' must be a list of paths")

        parameters = _get(data, "parameters", {})
        if not isinstance(parameters, Mapping):
            raise LoadError(path, "'parameters' must be an object")

        raw_services = _get(data, "services", {})
        if not isinstance(raw_services, Mapping):
            raise LoadError(path, "'services' must be an object")
        services = {}
        for name, svc in raw_services.items():
            if not isinstance(svc, Mapping):
                raise LoadError(path, f"service '{name}' must be an object")
            services[name] = RawServiceRecord.from_mapping(svc)

        return cls(
            namespace=namespace or None,
            imports=tuple(imports),
            parameters=dict(parameters),
            services=services,
        )
