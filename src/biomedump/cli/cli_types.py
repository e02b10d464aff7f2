# topmark:header:start
#
#   project      : BiomeDump
#   file         : cli_types.py
#   file_relpath : src/biomedump/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click types for the BiomeDump CLI."""

from __future__ import annotations

import click


class LenientCommand(click.Command):
    """Click command that never rejects its arguments.

    Unknown options and positional arguments are already collected into
    ``ctx.args`` by the ``ignore_unknown_options``/``allow_extra_args`` context
    settings. The remaining usage error is a value attached to a recognized
    flag (``--version=1``, ``--help=x``); such tokens are set aside before
    parsing and appended to ``ctx.args`` like any other ignored argument.
    """

    def _long_flag_names(self, ctx: click.Context) -> set[str]:
        return {
            name
            for param in self.get_params(ctx)
            if isinstance(param, click.Option) and param.is_flag
            for name in (*param.opts, *param.secondary_opts)
            if name.startswith("--")
        }

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Parse `args`, moving flags with attached values to ``ctx.args``.

        Args:
            ctx (click.Context): Current Click context.
            args (list[str]): Raw command-line arguments.

        Returns:
            list[str]: The ignored arguments (``ctx.args``).
        """
        flags: set[str] = self._long_flag_names(ctx)
        kept: list[str] = []
        set_aside: list[str] = []
        for arg in args:
            name, sep, _ = arg.partition("=")
            (set_aside if sep and name in flags else kept).append(arg)

        super().parse_args(ctx, kept)
        ctx.args = [*ctx.args, *set_aside]
        return ctx.args
