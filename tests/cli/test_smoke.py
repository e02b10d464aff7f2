# topmark:header:start
#
#   project      : BiomeDump
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests for BiomeDump.

Provides minimal coverage that the CLI entry point is callable and that
`--help` and `--version` succeed without emitting the record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from packaging.version import Version

from biomedump.constants import BIOMEDUMP_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
@parametrize("flag", ["--help", "-h"])
def test_cli_help(flag: str) -> None:
    """It should show usage information and exit code SUCCESS."""
    result: Result = run_cli([flag])

    assert_SUCCESS(result)

    assert "Usage" in result.stdout
    assert "biome" in result.stdout
    assert "minecraft:plains" not in result.stdout


@mark_cli
def test_cli_version() -> None:
    """It should print the installed version and exit code SUCCESS."""
    result: Result = run_cli(["--version"])

    assert_SUCCESS(result)

    assert result.stdout == f"biomedump, version {BIOMEDUMP_VERSION}\n"
    # Must be a valid PEP 440 version
    Version(BIOMEDUMP_VERSION)
