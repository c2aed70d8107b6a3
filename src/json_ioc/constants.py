"""Constants used throughout the json-ioc builder.

This module defines the framework logger, the on-disk file naming convention
and the environment variables read by :meth:`BuilderOptions.from_environ`.
"""

import logging

LOGGER_NAME: str = "json_ioc"
"""Default logger name for the json-ioc package."""

LOGGER: logging.Logger = logging.getLogger(LOGGER_NAME)
"""Package logger for discovery, import resolution and build diagnostics."""

SERVICES_SUFFIX: str = "services.json"
"""Filename suffix of service configuration files."""

PARAMETERS_SUFFIX: str = "parameters.json"
"""Filename suffix of parameter configuration files."""

ENV_SERVICES_TEMPLATE: str = "services_{env}.json"
"""Filename suffix of environment-specific service files, formatted with the env name."""

NODE_MODULES_DIR: str = "node_modules"
"""Directory segment pruned from the walk when ``ignore_node_modules_directory`` is set."""

NAMESPACE_SEPARATOR: str = "."

ENV_VAR_ENV: str = "JSON_IOC_ENV"
ENV_VAR_IGNORE_NODE_MODULES: str = "JSON_IOC_IGNORE_NODE_MODULES"
