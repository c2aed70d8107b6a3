import json
from typing import Any, List, Tuple

import pytest


class RecordingSink:
    """Container sink that records every call in order."""

    def __init__(self, root_directory: str = "") -> None:
        self.root_directory = root_directory
        self.calls: List[Tuple[str, str, Any]] = []

    def set_parameter(self, name, value):
        self.calls.append(("parameter", name, value))

    def set(self, name, definition):
        self.calls.append(("service", name, definition))

    @property
    def services(self) -> List[Tuple[str, Any]]:
        return [(n, v) for kind, n, v in self.calls if kind == "service"]

    @property
    def parameters(self) -> List[Tuple[str, Any]]:
        return [(n, v) for kind, n, v in self.calls if kind == "parameter"]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def sink_factory():
    return RecordingSink


@pytest.fixture
def write_json(tmp_path):
    def _write(relative_path: str, data: Any) -> str:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write
