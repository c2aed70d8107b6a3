from typing import Iterable, List

from .descriptor import FileDescriptor, FileKind


def _deepest_first(descriptor: FileDescriptor) -> int:
    return -descriptor.depth


def sort_by_hierarchy(descriptors: Iterable[FileDescriptor]) -> List[FileDescriptor]:
    """Order descriptors so that later files win name collisions correctly.

    The result is plain service files, then environment service files, then
    parameter files. The two service groups are sorted deepest first, so files
    closer to the root are applied later and override deeper ones. Sorting is
    stable: files at the same depth keep their discovery order, and parameter
    files are never reordered.
    """
    services: List[FileDescriptor] = []
    env_services: List[FileDescriptor] = []
    parameters: List[FileDescriptor] = []
    for d in descriptors:
        if d.kind is FileKind.ENVIRONMENT_SERVICE:
            env_services.append(d)
        elif d.kind is FileKind.PARAMETER:
            parameters.append(d)
        else:
            services.append(d)

    return sorted(services, key=_deepest_first) + sorted(env_services, key=_deepest_first) + parameters
