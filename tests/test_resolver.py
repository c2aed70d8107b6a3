from unittest.mock import MagicMock

import pytest

from json_ioc.descriptor import FileDescriptor, FileKind
from json_ioc.exceptions import InvalidArgumentError, LoadError
from json_ioc.loader import DictConfigLoader
from json_ioc.records import ConfigRecord
from json_ioc.resolver import ImportResolver, compose_name, compose_namespace, resolve_import_path


def test_compose_helpers():
    assert compose_namespace("", None) == ""
    assert compose_namespace("a", None) == "a"
    assert compose_namespace("", "b") == "b"
    assert compose_namespace("a", "b") == "a.b"
    assert compose_name("", "key") == "key"
    assert compose_name("a.b", "key") == "a.b.key"


@pytest.mark.parametrize(
    "ref, expected",
    [
        ("./lib/services.json", "/app/mod/lib/services.json"),
        ("lib/services.json", "/app/mod/lib/services.json"),
        ("../shared/services.json", "/app/shared/services.json"),
        ("./../../root.json", "/root.json"),
        ("/etc/app/services.json", "/etc/app/services.json"),
    ],
)
def test_resolve_import_path(ref, expected):
    assert resolve_import_path("/app/mod", ref) == expected


def test_nested_namespaces_compose(sink):
    loader = DictConfigLoader(
        {
            "/app/services.json": {"namespace": "a", "imports": ["./lib/b.json"]},
            "/app/lib/b.json": {"namespace": "b", "parameters": {"p": 5}},
        }
    )
    ImportResolver(loader).resolve(FileDescriptor.for_path("/app/services.json", depth=0), sink)

    assert sink.parameters == [("a.b.p", 5)]


def test_imports_without_namespace_inherit(sink):
    loader = DictConfigLoader(
        {
            "/app/services.json": {"imports": ["./common.json"]},
            "/app/common.json": {"services": {"cache": {"class": "Cache"}}},
        }
    )
    ImportResolver(loader).resolve(FileDescriptor.for_path("/app/services.json", depth=0), sink, "outer")

    [(name, definition)] = sink.services
    assert name == "outer.cache"
    assert definition.namespace == "outer"


def test_imports_are_applied_before_own_entries(sink):
    loader = DictConfigLoader(
        {
            "/app/services.json": {
                "imports": ["./first.json", "./second.json"],
                "parameters": {"level": "own"},
                "services": {"svc": {"class": "Own"}},
            },
            "/app/first.json": {"parameters": {"level": "first"}, "services": {"svc": {"class": "First"}}},
            "/app/second.json": {"parameters": {"level": "second"}},
        }
    )
    ImportResolver(loader).resolve(FileDescriptor.for_path("/app/services.json", depth=0), sink)

    assert [(k, n) for k, n, _ in sink.calls] == [
        ("parameter", "level"),
        ("service", "svc"),
        ("parameter", "level"),
        ("parameter", "level"),
        ("service", "svc"),
    ]
    assert [v for _, v in sink.parameters] == ["first", "second", "own"]
    assert sink.services[-1][1].file == "Own"


def test_imported_definitions_use_import_directory(sink):
    loader = DictConfigLoader(
        {
            "/app/mod/services.json": {"imports": ["../shared/db.json"]},
            "/app/shared/db.json": {"services": {"db": {"class": "./Db"}}},
        }
    )
    ImportResolver(loader).resolve(FileDescriptor.for_path("/app/mod/services.json", depth=1), sink)

    [(_, definition)] = sink.services
    assert definition.root_directory == "/app/shared"


def test_parameter_file_services_are_never_set(sink):
    loader = DictConfigLoader(
        {"/app/parameters.json": {"parameters": {"x": 1}, "services": {"svc": {"class": "Svc"}}}}
    )
    descriptor = FileDescriptor.for_path("/app/parameters.json", depth=0, kind=FileKind.PARAMETER)
    resolver = ImportResolver(loader)
    resolver.resolve(descriptor, sink)

    assert sink.services == []
    assert sink.parameters == [("x", 1)]
    assert resolver.definitions_emitted == 0


def test_imports_of_parameter_file_are_plain_service_files(sink):
    loader = DictConfigLoader(
        {
            "/app/parameters.json": {"imports": ["./more.json"]},
            "/app/more.json": {"services": {"svc": {"class": "Svc"}}},
        }
    )
    descriptor = FileDescriptor.for_path("/app/parameters.json", depth=0, kind=FileKind.PARAMETER)
    ImportResolver(loader).resolve(descriptor, sink)

    assert [n for n, _ in sink.services] == ["svc"]


def test_preloaded_config_skips_loader(sink):
    loader = MagicMock()
    record = ConfigRecord.from_mapping({"parameters": {"a": 1}})
    descriptor = FileDescriptor(path="/virtual.json", directory="/", depth=0, preloaded_config=record)

    ImportResolver(loader).resolve(descriptor, sink)

    loader.load.assert_not_called()
    assert sink.parameters == [("a", 1)]


def test_import_descriptors_keep_depth_and_are_service_kind(sink):
    class SpyResolver(ImportResolver):
        def __init__(self, loader):
            super().__init__(loader)
            self.seen = []

        def resolve(self, descriptor, sink, inherited_namespace=""):
            self.seen.append(descriptor)
            super().resolve(descriptor, sink, inherited_namespace)

    loader = MagicMock()
    loader.load.side_effect = [
        ConfigRecord.from_mapping({"imports": ["../child.json"]}),
        ConfigRecord(),
    ]
    resolver = SpyResolver(loader)
    resolver.resolve(FileDescriptor.for_path("/app/env/parameters.json", depth=3, kind=FileKind.PARAMETER), sink)

    child = resolver.seen[1]
    assert child.path == "/app/child.json"
    assert child.directory == "/app"
    assert child.depth == 3
    assert child.kind is FileKind.SERVICE
    assert [c.args[0] for c in loader.load.call_args_list] == ["/app/env/parameters.json", "/app/child.json"]


def test_missing_import_is_fatal(sink):
    loader = DictConfigLoader({"/app/services.json": {"imports": ["./missing.json"], "parameters": {"a": 1}}})
    with pytest.raises(LoadError) as exc:
        ImportResolver(loader).resolve(FileDescriptor.for_path("/app/services.json", depth=0), sink)

    assert exc.value.path == "/app/missing.json"
    assert sink.calls == []


def test_malformed_call_names_file_and_service(sink):
    loader = DictConfigLoader({"/app/services.json": {"namespace": "n", "services": {"db": {"calls": [[1, []]]}}}})
    with pytest.raises(InvalidArgumentError) as exc:
        ImportResolver(loader).resolve(FileDescriptor.for_path("/app/services.json", depth=0), sink)

    assert "/app/services.json" in str(exc.value)
    assert "n.db" in str(exc.value)


def test_cyclic_imports_are_not_detected(sink):
    loader = DictConfigLoader({"/app/loop.json": {"imports": ["./loop.json"]}})
    with pytest.raises(RecursionError):
        ImportResolver(loader).resolve(FileDescriptor.for_path("/app/loop.json", depth=0), sink)


def test_counters(sink):
    loader = DictConfigLoader(
        {
            "/app/services.json": {"imports": ["./a.json"], "parameters": {"x": 1, "y": 2}},
            "/app/a.json": {"services": {"s": {"class": "S"}}},
        }
    )
    resolver = ImportResolver(loader)
    resolver.resolve(FileDescriptor.for_path("/app/services.json", depth=0), sink)

    assert resolver.files_loaded == 2
    assert resolver.parameters_emitted == 2
    assert resolver.definitions_emitted == 1
