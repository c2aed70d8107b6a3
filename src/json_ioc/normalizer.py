import copy
from typing import Optional

from .definition import Definition
from .records import RawServiceRecord


def normalize_definition(raw: RawServiceRecord, containing_directory: str, namespace: Optional[str] = "") -> Definition:
    """Translate a raw service record into a :class:`Definition`.

    Absent fields get explicit defaults: ``is_singleton`` is ``True`` unless
    the record says otherwise, ``tags`` is an empty list, and the injection
    containers are empty. Present values are deep-copied as written, whatever
    their type, so the definition never shares state with the record.

    The three flags are always booleans on the result. A JSON ``null`` counts
    as absent, and any other value is coerced by truthiness, so the string
    ``"false"`` is true.

    Raises:
        InvalidArgumentError: If ``calls`` holds a malformed entry.
    """
    definition = Definition(
        file=raw.class_name,
        root_directory=containing_directory,
        constructor_method=raw.constructor_method,
        arguments=copy.deepcopy(raw.arguments) if raw.arguments is not None else [],
        properties=copy.deepcopy(raw.properties) if raw.properties is not None else {},
        is_object=bool(raw.is_object),
        is_function=bool(raw.is_function),
        is_singleton=True if raw.is_singleton is None else bool(raw.is_singleton),
        tags=copy.deepcopy(raw.tags) if raw.tags is not None else [],
        namespace=namespace or "",
    )
    if raw.calls:
        definition.set_method_calls(copy.deepcopy(raw.calls))
    return definition
