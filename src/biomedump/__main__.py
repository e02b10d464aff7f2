# topmark:header:start
#
#   project      : BiomeDump
#   file         : __main__.py
#   file_relpath : src/biomedump/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running BiomeDump via ``python -m biomedump``.

This module delegates directly to :func:`biomedump.cli.main.cli`, so the
module interface and the ``biomedump`` console script behave identically.

Examples:
    Print the biome record::

        python -m biomedump
"""

from __future__ import annotations

from biomedump.cli.main import cli

if __name__ == "__main__":
    # We call the Click command directly
    cli()
