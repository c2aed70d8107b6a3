"""Builder options.

:class:`BuilderOptions` is the immutable options object consumed by the
discoverer and the builder. It can be created directly, coerced from a plain
mapping (camelCase keys as written in application code, or snake_case), or
read from the process environment.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from .constants import ENV_SERVICES_TEMPLATE, ENV_VAR_ENV, ENV_VAR_IGNORE_NODE_MODULES
from .exceptions import ConfigurationError

_ENV_NAME = re.compile(r"^[A-Za-z0-9_.-]+$")

_KEY_ALIASES: Dict[str, str] = {
    "env": "env",
    "ignoreNodeModulesDirectory": "ignore_node_modules_directory",
    "ignore_node_modules_directory": "ignore_node_modules_directory",
}


def _truthy(s: str) -> bool:
    return s.strip().lower() in {"1", "true", "yes", "on", "y", "t"}


def _normalize_env(env: Any) -> Optional[str]:
    if env is None or env is False or env == "":
        return None
    if not isinstance(env, str) or not _ENV_NAME.match(env):
        raise ConfigurationError(f"Invalid env name: {env!r}")
    return env


@dataclass(frozen=True)
class BuilderOptions:
    """Immutable options for a container build.

    Attributes:
        env: Environment name. When set, ``services_<env>.json`` files are
            discovered as environment-specific service files.
        ignore_node_modules_directory: Prune ``node_modules`` directories
            from the walk.
    """

    env: Optional[str] = None
    ignore_node_modules_directory: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "env", _normalize_env(self.env))
        object.__setattr__(self, "ignore_node_modules_directory", bool(self.ignore_node_modules_directory))

    @classmethod
    def coerce(cls, value: Union[None, "BuilderOptions", Mapping[str, Any]]) -> "BuilderOptions":
        """Return a :class:`BuilderOptions` for *value*.

        Args:
            value: ``None`` (all defaults), an existing ``BuilderOptions``, or
                a mapping. Keys missing from the mapping keep their defaults.

        Raises:
            ConfigurationError: On unknown keys or an unsupported value type.

        Example:
            >>> BuilderOptions.coerce({"env": "test"}).ignore_node_modules_directory
            True
        """
        if value is None:
            return cls()
        if isinstance(value, BuilderOptions):
            return value
        if not isinstance(value, Mapping):
            raise ConfigurationError(f"Unsupported options type: {type(value)}")

        kwargs: Dict[str, Any] = {}
        unknown = []
        for k, v in value.items():
            field_name = _KEY_ALIASES.get(k)
            if field_name is None:
                unknown.append(k)
            else:
                kwargs[field_name] = v
        if unknown:
            raise ConfigurationError(f"Unknown builder options: {sorted(str(u) for u in unknown)}")
        return cls(**kwargs)

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "BuilderOptions":
        """Read options from ``JSON_IOC_ENV`` and ``JSON_IOC_IGNORE_NODE_MODULES``."""
        env_map = os.environ if environ is None else environ
        env = (env_map.get(ENV_VAR_ENV) or "").strip() or None
        raw_ignore = env_map.get(ENV_VAR_IGNORE_NODE_MODULES)
        ignore = True if raw_ignore is None else _truthy(raw_ignore)
        return cls(env=env, ignore_node_modules_directory=ignore)

    @property
    def env_suffix(self) -> Optional[str]:
        if not self.env:
            return None
        return ENV_SERVICES_TEMPLATE.format(env=self.env)
