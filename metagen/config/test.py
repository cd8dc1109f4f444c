"""Tests for configuration management."""

from pathlib import Path

import pytest

from metagen.store import MemoryStore, StoreError

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

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every metagen variable from the environment."""
    for var in EnvVar:
        monkeypatch.delenv(var.value.name, raising=False)
    return monkeypatch


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, clean_env):
        """Unset variables fall back to their default."""
        assert get_environment(EnvVar.NESTED_PATH_PART) == "nested"
        assert get_environment(EnvVar.SOURCE_PATH) is None

    @pytest.mark.unit
    def test_override_takes_priority(self, clean_env):
        """Explicit override wins over environment."""
        clean_env.setenv("METAGEN_BASE_PATH_PART", "from-env")
        assert get_environment(EnvVar.BASE_PATH_PART, override="shared") == "shared"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, clean_env):
        """Environment value wins over default."""
        clean_env.setenv("METAGEN_BASE_PATH_PART", "from-env")
        assert get_environment(EnvVar.BASE_PATH_PART) == "from-env"

    @pytest.mark.unit
    def test_path_type_conversion(self, clean_env):
        """Path variables are converted to Path."""
        clean_env.setenv("METAGEN_OUTPUT_DIR", "build/metadata")
        result = get_environment(EnvVar.OUTPUT_DIR)
        assert result == Path("build/metadata")
        assert isinstance(result, Path)

    @pytest.mark.unit
    def test_empty_value_uses_default(self, clean_env):
        """Empty environment value uses the default."""
        clean_env.setenv("METAGEN_NESTED_PATH_PART", "")
        assert get_environment(EnvVar.NESTED_PATH_PART) == "nested"


class TestIntrospection:
    """Tests for registry introspection."""

    @pytest.mark.unit
    def test_info(self):
        """Info reports the variable name and type."""
        info = get_environment_info(EnvVar.SOURCE_PATH)
        assert isinstance(info, EnvConfig)
        assert info.name == "METAGEN_SOURCE_PATH"
        assert info.var_type is Path

    @pytest.mark.unit
    def test_names_are_prefixed(self):
        """Every variable name carries the METAGEN prefix."""
        for var in EnvVar:
            assert var.value.name.startswith("METAGEN_")

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Variables can be filtered by category."""
        paths = list_environment_variables("paths")
        assert set(paths) == {EnvVar.SOURCE_PATH, EnvVar.OUTPUT_DIR}
        assert list_environment_variables() == list(EnvVar)
        assert list_environment_variables("nope") == []


# =============================================================================
# Tests for GeneratorConfig / load_config
# =============================================================================


class TestGeneratorConfig:
    """Tests for the run configuration model."""

    @pytest.mark.unit
    def test_camel_case_keys(self):
        """Config keys are camelCase."""
        config = GeneratorConfig.model_validate(
            {
                "sourceMetadataFilePath": "meta.json",
                "outputFolderPath": "out",
                "nestedPathPart": "nested",
                "basePathPart": "base",
            }
        )
        assert config.source_metadata_file_path == Path("meta.json")
        assert config.nested_folder_path == Path("out/nested")
        assert config.base_folder_path == Path("out/nested/base")
        assert config.module_prefix == "devextreme/"


class TestLoadConfig:
    """Tests for configuration resolution."""

    @pytest.mark.unit
    def test_overrides_only(self, clean_env):
        """Overrides alone make a complete config."""
        config = load_config(
            source_metadata_file_path="meta.json", output_folder_path="out"
        )
        assert config.source_metadata_file_path == Path("meta.json")
        assert config.output_folder_path == Path("out")
        assert config.nested_path_part == "nested"
        assert config.base_path_part == "base"

    @pytest.mark.unit
    def test_defaults_output_folder(self, clean_env):
        """Output folder defaults to metadata."""
        config = load_config(source_metadata_file_path="meta.json")
        assert config.output_folder_path == Path("metadata")

    @pytest.mark.unit
    def test_environment(self, clean_env):
        """Environment supplies missing settings."""
        clean_env.setenv("METAGEN_SOURCE_PATH", "env-meta.json")
        clean_env.setenv("METAGEN_MODULE_PREFIX", "lib/")
        config = load_config()
        assert config.source_metadata_file_path == Path("env-meta.json")
        assert config.module_prefix == "lib/"

    @pytest.mark.unit
    def test_config_file(self, clean_env):
        """Config file values sit between overrides and environment."""
        store = MemoryStore(
            {
                "metagen.json": {
                    "sourceMetadataFilePath": "file-meta.json",
                    "outputFolderPath": "file-out",
                    "basePathPart": "shared",
                    "unrelated": True,
                }
            }
        )
        config = load_config("metagen.json", store=store)
        assert config.source_metadata_file_path == Path("file-meta.json")
        assert config.output_folder_path == Path("file-out")
        assert config.base_path_part == "shared"

    @pytest.mark.unit
    def test_priority(self, clean_env):
        """override > file > environment > default."""
        clean_env.setenv("METAGEN_OUTPUT_DIR", "env-out")
        clean_env.setenv("METAGEN_NESTED_PATH_PART", "env-nested")
        store = MemoryStore(
            {"c.json": {"sourceMetadataFilePath": "m.json", "outputFolderPath": "file-out"}}
        )
        config = load_config("c.json", store=store, source_metadata_file_path="cli.json")
        assert config.source_metadata_file_path == Path("cli.json")
        assert config.output_folder_path == Path("file-out")
        assert config.nested_path_part == "env-nested"
        assert config.base_path_part == "base"

    @pytest.mark.unit
    def test_missing_source_path(self, clean_env):
        """Missing source path is a config error."""
        with pytest.raises(ConfigError, match="METAGEN_SOURCE_PATH"):
            load_config()

    @pytest.mark.unit
    def test_unknown_override(self, clean_env):
        """Unknown override keys are rejected."""
        with pytest.raises(ConfigError, match="Unknown"):
            load_config(source_metadata_file_path="m.json", colour="red")

    @pytest.mark.unit
    def test_config_file_must_be_object(self, clean_env):
        """Config file must hold a JSON object."""
        store = MemoryStore({"c.json": ["not", "an", "object"]})
        with pytest.raises(ConfigError):
            load_config("c.json", store=store)

    @pytest.mark.unit
    def test_missing_config_file(self, clean_env):
        """Unreadable config file raises StoreError."""
        with pytest.raises(StoreError):
            load_config("missing.json", store=MemoryStore())

    @pytest.mark.unit
    def test_invalid_value(self, clean_env):
        """Invalid setting values are rejected."""
        with pytest.raises(ConfigError, match="Invalid"):
            load_config(source_metadata_file_path="m.json", nested_path_part=["x"])
