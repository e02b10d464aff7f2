# topmark:header:start
#
#   project      : BiomeDump
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running BiomeDump through Click's test runner."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from biomedump.cli.exit_codes import ExitCode
from biomedump.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

EXPECTED_OUTPUT: str = '{\n    "biome": "minecraft:plains",\n    "temperature": 0.7\n}\n'


def run_cli(
    argv: str | Sequence[str] | None = None,
    *,
    env: Mapping[str, str | None] | None = None,
    obj: dict[str, Any] | None = None,
) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        env (Mapping[str, str | None] | None): Environment overrides for the run.
        obj (dict[str, Any] | None): Initial Click context object, e.g. to inject
            a console.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--help"])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, env=env, obj=obj)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output
