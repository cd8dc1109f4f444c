"""Tests for the generate CLI command."""

import json
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]

METADATA = {
    "Widgets": {
        "dxButton": {
            "Module": "ui/button",
            "Options": {
                "text": {},
                "onClick": {"IsEvent": True},
                "label": {"ComplexTypes": ["Label"]},
            },
        },
        "dxHidden": {"Options": {}},
    },
    "ExtraObjects": {"Label": {"Options": {"text": {}}}},
}


def run_cli(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        timeout=60,
    )


@pytest.fixture
def source(tmp_path: Path) -> Path:
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps(METADATA), encoding="utf-8")
    return path


@pytest.mark.integration
def test_generate_writes_descriptors(tmp_path, source):
    """generate writes widget, base and nested documents."""
    output = tmp_path / "out"
    result = run_cli(
        "generate", "--source", str(source), "--output", str(output)
    )
    assert result.returncode == 0, result.stderr
    assert (output / "button.json").exists()
    assert (output / "nested" / "label.json").exists()
    assert (output / "nested" / "base" / "label.json").exists()
    assert not (output / "hidden.json").exists()


@pytest.mark.integration
def test_generate_with_config_file(tmp_path, source):
    """Settings can come from a JSON config file."""
    output = tmp_path / "from-config"
    config = tmp_path / "metagen.config.json"
    config.write_text(
        json.dumps(
            {
                "sourceMetadataFilePath": str(source),
                "outputFolderPath": str(output),
                "nestedPathPart": "options",
                "basePathPart": "shared",
            }
        ),
        encoding="utf-8",
    )
    result = run_cli("generate", "--config", str(config))
    assert result.returncode == 0, result.stderr
    assert (output / "options" / "shared" / "label.json").exists()


@pytest.mark.integration
def test_dry_run_writes_nothing(tmp_path, source):
    """Dry run writes no output files."""
    output = tmp_path / "dry"
    result = run_cli(
        "generate",
        "--source",
        str(source),
        "--output",
        str(output),
        "--dry-run",
    )
    assert result.returncode == 0, result.stderr
    assert not output.exists()
    assert "would be written" in result.stderr


@pytest.mark.integration
def test_missing_source_fails(tmp_path):
    """Missing source exits with an error."""
    result = run_cli(
        "generate",
        "--source",
        str(tmp_path / "missing.json"),
        "--output",
        str(tmp_path / "out"),
    )
    assert result.returncode == 1
    assert "Generation failed" in result.stderr


@pytest.mark.integration
def test_unknown_command():
    """Unknown command prints help and fails."""
    result = run_cli("explode")
    assert result.returncode == 1
    assert "Usage" in result.stdout
