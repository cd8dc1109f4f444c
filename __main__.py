"""CLI entry point for metagen.

This module acts as the central entry point for the project's CLI tools.
It delegates commands to the appropriate submodules or runs specific tasks.
"""

import argparse
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

from metagen.config import EnvVar, get_environment, load_config
from metagen.core import MetadataError, get_logger, setup_logging
from metagen.generator import MetadataGenerator
from metagen.store import JSONFileStore, MemoryStore

# Load environment variables from .env file
load_dotenv()

logger = get_logger("cli")


# =============================================================================
# Generate Command
# =============================================================================


def cmd_generate(args: argparse.Namespace) -> int:
    """Handle the generate command."""
    try:
        config = load_config(
            args.config,
            source_metadata_file_path=args.source,
            output_folder_path=args.output,
            nested_path_part=args.nested_part,
            base_path_part=args.base_part,
            module_prefix=args.module_prefix,
        )

        store = JSONFileStore()
        if args.dry_run:
            # Read the real source, keep every write in memory
            store = MemoryStore(
                {
                    str(config.source_metadata_file_path): store.read(
                        str(config.source_metadata_file_path)
                    )
                }
            )

        result = MetadataGenerator(store).generate(config)

    except MetadataError as e:
        logger.error(f"Generation failed: {e}")
        return 1

    mode = "would be written" if args.dry_run else "written"
    logger.info(
        f"{len(result.widgets)} widget, {len(result.bases)} base and "
        f"{len(result.nested)} nested descriptors {mode} to {config.output_folder_path}"
    )
    return 0


def handle_generate_command(argv: list[str]) -> int:
    """Handle generate command argument parsing."""
    parser = argparse.ArgumentParser(
        prog="python . generate",
        description="Generate component descriptors from widget metadata",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="JSON config file (sourceMetadataFilePath, outputFolderPath, ...)",
    )
    parser.add_argument(
        "--source",
        "-s",
        type=Path,
        default=None,
        help=f"Widget metadata JSON (env: {EnvVar.SOURCE_PATH.value.name})",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help=f"Output folder (env: {EnvVar.OUTPUT_DIR.value.name}, default: metadata)",
    )
    parser.add_argument(
        "--nested-part",
        type=str,
        default=None,
        help="Sub-folder for nested components (default: nested)",
    )
    parser.add_argument(
        "--base-part",
        type=str,
        default=None,
        help="Sub-folder of the nested folder for base components (default: base)",
    )
    parser.add_argument(
        "--module-prefix",
        type=str,
        default=None,
        help="Prefix joined to widget module paths (default: devextreme/)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Run the pipeline without writing any file",
    )

    args = parser.parse_args(argv)
    return cmd_generate(args)


# =============================================================================
# Test Command
# =============================================================================


def cmd_test(extra_args: list[str]) -> int:
    """Run pytest with provided arguments and test tier options.

    Usage:
        python . test                # Run all tests
        python . test --unit         # Run only unit tests (no I/O)
        python . test --integration  # Run file system tests
        python . test -k "normalizer"

    Test Tiers:
        unit        - Fast tests with no I/O
        integration - Tests reading and writing real files
    """
    tier_markers = {
        "--unit": ["-m", "unit"],
        "--integration": ["-m", "integration"],
        "--all": [],
    }

    pytest_args: list[str] = []
    remaining_args: list[str] = []

    for arg in extra_args:
        if arg in tier_markers:
            pytest_args.extend(tier_markers[arg])
        else:
            remaining_args.append(arg)

    cmd = [sys.executable, "-m", "pytest", *pytest_args, *remaining_args]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        return subprocess.call(cmd)
    except KeyboardInterrupt:
        return 130


# =============================================================================
# Main
# =============================================================================


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python . {command} [args]")
    print("\nCommands:")
    print("  generate   Generate component descriptors from widget metadata")
    print("  test       Run the test suite")
    print("\nExamples:")
    print("  python . generate --source metadata.json --output out")
    print("  python . generate --config metagen.config.json --dry-run")
    print("  python . test --unit")


def main() -> int:
    """Main entry point for the CLI."""
    if len(sys.argv) < 2:
        show_help()
        return 1

    command = sys.argv[1]
    rest_args = sys.argv[2:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "generate": lambda: handle_generate_command(rest_args),
        "test": lambda: cmd_test(rest_args),
    }

    if command in commands:
        setup_logging(get_environment(EnvVar.LOG_LEVEL))
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
