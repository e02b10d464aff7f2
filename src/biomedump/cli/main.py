# topmark:header:start
#
#   project      : BiomeDump
#   file         : main.py
#   file_relpath : src/biomedump/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BiomeDump Click entry point.

A single command: configure logging from the environment, write the biome
record to stdout, exit with `ExitCode.SUCCESS`. Positional arguments and
unknown options are accepted and ignored, as are values attached to a
recognized flag (``--version=1``); only ``-h/--help`` and
``--version`` are recognized.
"""

from __future__ import annotations

import click

from biomedump.cli.cli_types import LenientCommand
from biomedump.cli.console import ClickConsole
from biomedump.cli.exit_codes import ExitCode
from biomedump.config.logging import get_logger, resolve_env_log_level, setup_logging
from biomedump.constants import BIOMEDUMP_TOOL_NAME, BIOMEDUMP_VERSION
from biomedump.core.emitters import emit_record

logger = get_logger(__name__)


def init_common_state(ctx: click.Context) -> None:
    """Initialize shared state (log level & console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
    """
    ctx.obj = ctx.obj or {}

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.obj.setdefault("console", ClickConsole())


@click.command(
    name=BIOMEDUMP_TOOL_NAME,
    cls=LenientCommand,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    },
    help="Print the biome record as pretty-printed JSON.",
)
@click.version_option(
    version=BIOMEDUMP_VERSION,
    prog_name=BIOMEDUMP_TOOL_NAME,
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Entry point for the BiomeDump CLI."""
    init_common_state(ctx)

    if ctx.args:
        logger.debug("Ignoring command-line arguments: %s", ctx.args)

    emit_record(ctx.obj["console"])
    logger.trace("Record written, exiting with %s", ExitCode.SUCCESS.name)

    ctx.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    cli()
