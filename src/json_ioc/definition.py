"""Service definitions.

A :class:`Definition` is the normalized blueprint for one service: what to
load, how to construct it, and which injections to apply afterwards. The
builder hands definitions to the container and never touches them again.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .exceptions import InvalidArgumentError

MethodCall = Tuple[str, Any]


@dataclass
class Definition:
    """Blueprint for constructing one service.

    Attributes:
        file: Implementation to load (the raw ``class`` field).
        root_directory: Directory of the defining file; ``file`` is resolved
            against it at runtime.
        constructor_method: Optional named constructor or factory method.
        arguments: Constructor injection arguments.
        calls: Setter injection, ``(method, arguments)`` pairs in call order.
        properties: Property injection map.
        is_object: The target is an already-built object, not a class.
        is_function: The target is a factory function.
        is_singleton: Cache the instance after first construction.
        tags: Tag records, each with at least a ``name`` key.
        namespace: Dotted namespace active where the service was declared.
    """

    file: Optional[str] = None
    root_directory: Optional[str] = None
    constructor_method: Optional[str] = None
    arguments: List[Any] = field(default_factory=list)
    calls: List[MethodCall] = field(default_factory=list)
    properties: Dict[str, Any] = field(default_factory=dict)
    is_object: bool = False
    is_function: bool = False
    is_singleton: bool = True
    tags: List[Mapping[str, Any]] = field(default_factory=list)
    namespace: str = ""

    def add_method_call(self, method: str, arguments: Any = None) -> "Definition":
        """Append a post-construction method call.

        *arguments* is stored as given; ``None`` becomes an empty list and a
        list or tuple is copied into a new list.

        Raises:
            InvalidArgumentError: If *method* is empty or not a string.
        """
        if not method or not isinstance(method, str):
            raise InvalidArgumentError(f"Method name must be a non-empty string, got {method!r}")
        if arguments is None:
            arguments = []
        elif isinstance(arguments, (list, tuple)):
            arguments = list(arguments)
        self.calls.append((method, arguments))
        return self

    def set_method_calls(self, calls: Iterable[Sequence[Any]]) -> "Definition":
        """Apply :meth:`add_method_call` for each ``(method, arguments)`` pair.

        A failing pair aborts the rest of the batch; calls added before it
        are kept.
        """
        if isinstance(calls, (str, bytes)) or not isinstance(calls, Sequence):
            raise InvalidArgumentError(f"Method calls must be a list of [method, arguments] pairs, got {calls!r}")
        for call in calls:
            if isinstance(call, (str, bytes)) or not isinstance(call, Sequence) or not 1 <= len(call) <= 2:
                raise InvalidArgumentError(f"Method call must be a [method, arguments] pair, got {call!r}")
            self.add_method_call(call[0], call[1] if len(call) > 1 else None)
        return self

    def has_method_call(self, method: str) -> bool:
        return any(name == method for name, _ in self.calls)

    def get_tag(self, name: str) -> Optional[Mapping[str, Any]]:
        if not isinstance(self.tags, list):
            return None
        for tag in self.tags:
            if isinstance(tag, Mapping) and tag.get("name") == name:
                return tag
        return None

    def has_tag(self, name: str) -> bool:
        return self.get_tag(name) is not None
