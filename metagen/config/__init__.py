"""Centralized configuration management for metagen.

Example:
    >>> from metagen.config import EnvVar, get_environment, load_config
    >>>
    >>> level = get_environment(EnvVar.LOG_LEVEL)
    >>> config = load_config("metagen.config.json", output_folder_path="out")

Environment Variable Categories:
    paths: metadata source and output root
    layout: nested/base sub-folders and module prefix
    logging: log verbosity
"""

from .lib import (
    ConfigError,
    EnvConfig,
    EnvVar,
    GeneratorConfig,
    get_environment,
    get_environment_info,
    list_environment_variables,
    load_config,
)

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    "GeneratorConfig",
    "ConfigError",
    # Main interface
    "get_environment",
    "get_environment_info",
    "load_config",
    # Introspection
    "list_environment_variables",
]
