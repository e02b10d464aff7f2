# topmark:header:start
#
#   project      : BiomeDump
#   file         : console.py
#   file_relpath : src/biomedump/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. The record goes through the console; diagnostics go through
`logging` (on stderr).
"""

from __future__ import annotations

import sys
from typing import TextIO

import click

from biomedump.cli.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Output is always plain text: the record is machine-readable JSON and
    must never carry ANSI color codes.

    Args:
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`.

    Attributes:
        out (TextIO): Stream for standard output.
    """

    out: TextIO

    def __init__(self, *, out: TextIO | None = None) -> None:
        self.out = out or sys.stdout

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=False)
