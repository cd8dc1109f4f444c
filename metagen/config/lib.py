"""Configuration management for metagen.

Provides:
- A registry of environment variables with metadata (default, type, description)
- ``get_environment()`` with consistent resolution: override > environment > default
- ``GeneratorConfig``, the settings of one generation run, loadable from a JSON
  config file with camelCase keys (``sourceMetadataFilePath``)

Example:
    >>> from metagen.config import EnvVar, get_environment, load_config
    >>>
    >>> nested = get_environment(EnvVar.NESTED_PATH_PART)  # "nested"
    >>> config = load_config(source_metadata_file_path="metadata.json")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from metagen.core import MetadataError
from metagen.store import JSONFileStore, MetadataStore

# =============================================================================
# Environment Variable Configuration
# =============================================================================


class ConfigError(MetadataError):
    """Raised when generator configuration is missing or invalid."""


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "METAGEN_OUTPUT_DIR").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by metagen.

    Categories:
        - paths: input and output locations
        - layout: sub-locations and module naming of the output
        - logging: log verbosity
    """

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------
    SOURCE_PATH = EnvConfig(
        name="METAGEN_SOURCE_PATH",
        default=None,
        var_type=Path,
        description="Widget metadata JSON document to read",
        category="paths",
    )
    OUTPUT_DIR = EnvConfig(
        name="METAGEN_OUTPUT_DIR",
        default=Path("metadata"),
        var_type=Path,
        description="Root folder for generated descriptors",
        category="paths",
    )

    # -------------------------------------------------------------------------
    # Output Layout
    # -------------------------------------------------------------------------
    NESTED_PATH_PART = EnvConfig(
        name="METAGEN_NESTED_PATH_PART",
        default="nested",
        var_type=str,
        description="Sub-folder of the output root for nested components",
        category="layout",
    )
    BASE_PATH_PART = EnvConfig(
        name="METAGEN_BASE_PATH_PART",
        default="base",
        var_type=str,
        description="Sub-folder of the nested folder for base components",
        category="layout",
    )
    MODULE_PREFIX = EnvConfig(
        name="METAGEN_MODULE_PREFIX",
        default="devextreme/",
        var_type=str,
        description="Prefix joined to widget module paths",
        category="layout",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL = EnvConfig(
        name="METAGEN_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level name (DEBUG, INFO, WARNING)",
        category="logging",
    )


# =============================================================================
# Main Interface
# =============================================================================


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if value is None or empty.

    Returns:
        Converted value or default.
    """
    if value is None or value == "":
        return default

    if var_type is Path:
        return Path(value)

    return value


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type (str or Path).

    Example:
        >>> get_environment(EnvVar.BASE_PATH_PART)
        'base'
        >>> get_environment(EnvVar.BASE_PATH_PART, override="shared")
        'shared'
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Get metadata for an environment variable."""
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (paths, layout, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


# =============================================================================
# Generator Configuration
# =============================================================================


class GeneratorConfig(BaseModel):
    """Settings of one generation run.

    Accepts both snake_case names and the camelCase keys used in config
    files.

    Attributes:
        source_metadata_file_path: Widget metadata document.
        output_folder_path: Root folder for widget descriptors.
        nested_path_part: Sub-folder for nested component descriptors.
        base_path_part: Sub-folder, under the nested one, for bases.
        module_prefix: Prefix joined to widget module paths.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    source_metadata_file_path: Path
    output_folder_path: Path
    nested_path_part: str = EnvVar.NESTED_PATH_PART.value.default
    base_path_part: str = EnvVar.BASE_PATH_PART.value.default
    module_prefix: str = EnvVar.MODULE_PREFIX.value.default

    @property
    def nested_folder_path(self) -> Path:
        return self.output_folder_path / self.nested_path_part

    @property
    def base_folder_path(self) -> Path:
        return self.nested_folder_path / self.base_path_part


_CONFIG_ENV_VARS: dict[str, EnvVar] = {
    "source_metadata_file_path": EnvVar.SOURCE_PATH,
    "output_folder_path": EnvVar.OUTPUT_DIR,
    "nested_path_part": EnvVar.NESTED_PATH_PART,
    "base_path_part": EnvVar.BASE_PATH_PART,
    "module_prefix": EnvVar.MODULE_PREFIX,
}


def load_config(
    config_file: Path | str | None = None,
    store: MetadataStore | None = None,
    **overrides: Any,
) -> GeneratorConfig:
    """Resolve a GeneratorConfig.

    Resolution priority per setting:
        1. Keyword override that is not None (highest)
        2. JSON config file entry (camelCase or snake_case key)
        3. Environment variable
        4. Default (lowest)

    Args:
        config_file: Optional JSON config file.
        store: Store used to read the config file. Defaults to JSONFileStore.
        **overrides: Settings by snake_case name.

    Returns:
        Validated GeneratorConfig.

    Raises:
        ConfigError: On unknown settings, a missing source path or invalid
            values.
        StoreError: If the config file cannot be read.
    """
    unknown = set(overrides) - set(_CONFIG_ENV_VARS)
    if unknown:
        raise ConfigError(f"Unknown configuration settings: {sorted(unknown)}")

    file_values: dict[str, Any] = {}
    if config_file is not None:
        data = (store or JSONFileStore()).read(str(config_file))
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_file} must hold an object")
        file_values = _normalize_keys(data)

    values: dict[str, Any] = {}
    for name, env_var in _CONFIG_ENV_VARS.items():
        override = overrides.get(name)
        if override is None:
            override = file_values.get(name)
        values[name] = get_environment(env_var, override=override)

    if values["source_metadata_file_path"] is None:
        raise ConfigError(
            "No metadata source configured: pass a source path, set "
            "sourceMetadataFilePath in the config file or "
            f"{EnvVar.SOURCE_PATH.value.name}"
        )

    try:
        return GeneratorConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _normalize_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Map camelCase config file keys to setting names; drop unknown keys."""
    by_alias = {to_camel(name): name for name in _CONFIG_ENV_VARS}
    result: dict[str, Any] = {}
    for key, value in data.items():
        name = by_alias.get(key, key)
        if name in _CONFIG_ENV_VARS:
            result[name] = value
    return result


__all__ = [
    "ConfigError",
    "EnvConfig",
    "EnvVar",
    "GeneratorConfig",
    "get_environment",
    "get_environment_info",
    "list_environment_variables",
    "load_config",
]
