"""The container sink.

:class:`ContainerSink` is the only interface the builder writes to.
:class:`ServiceContainer` is the default implementation: a passive registry
of service definitions and parameters for a runtime to consume. It performs
no discovery, merging or instantiation.
"""

from typing import Any, Dict, Protocol

from .definition import Definition
from .exceptions import ParameterNotFoundError, ServiceNotFoundError


class ContainerSink(Protocol):
    """Protocol for objects that receive parameters and definitions."""

    def set_parameter(self, name: str, value: Any) -> None: ...

    def set(self, name: str, definition: Definition) -> None: ...


class ServiceContainer:
    """Registry of service definitions and parameters.

    Later writes for the same name replace earlier ones.

    Args:
        root_directory: Application root the container was built from.
    """

    def __init__(self, root_directory: str) -> None:
        self.root_directory = root_directory
        self._definitions: Dict[str, Definition] = {}
        self._parameters: Dict[str, Any] = {}

    def set(self, name: str, definition: Definition) -> None:
        self._definitions[name] = definition

    def set_parameter(self, name: str, value: Any) -> None:
        self._parameters[name] = value

    def has(self, name: str) -> bool:
        return name in self._definitions

    def get_definition(self, name: str) -> Definition:
        """Return the definition registered under *name*.

        Raises:
            ServiceNotFoundError: If no definition has that name.
        """
        if name not in self._definitions:
            raise ServiceNotFoundError(name)
        return self._definitions[name]

    def definitions(self) -> Dict[str, Definition]:
        return dict(self._definitions)

    def has_parameter(self, name: str) -> bool:
        return name in self._parameters

    def get_parameter(self, name: str) -> Any:
        """Return the parameter registered under *name*.

        Raises:
            ParameterNotFoundError: If no parameter has that name.
        """
        if name not in self._parameters:
            raise ParameterNotFoundError(name)
        return self._parameters[name]

    def parameters(self) -> Dict[str, Any]:
        return dict(self._parameters)

    def stats(self) -> Dict[str, Any]:
        return {
            "root_directory": self.root_directory,
            "definitions": len(self._definitions),
            "parameters": len(self._parameters),
        }
