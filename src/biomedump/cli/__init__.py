# topmark:header:start
#
#   project      : BiomeDump
#   file         : __init__.py
#   file_relpath : src/biomedump/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BiomeDump command-line interface package.

The Click entry point lives in [`biomedump.cli.main`][biomedump.cli.main];
console and exit-code helpers are kept in sibling modules so the core package
stays free of Click.
"""

from __future__ import annotations
