# topmark:header:start
#
#   project      : BiomeDump
#   file         : exit_codes.py
#   file_relpath : src/biomedump/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the BiomeDump CLI application."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BiomeDump CLI.

    Attributes:
        SUCCESS (int): The record was written (also used for `--help` and `--version`).
        FAILURE (int): An unhandled fault escaped, e.g. the output stream could
            not be written. BiomeDump never returns this itself; it is what the
            interpreter reports for an uncaught exception.
    """

    SUCCESS = 0
    FAILURE = 1
