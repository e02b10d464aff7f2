# topmark:header:start
#
#   project      : BiomeDump
#   file         : __init__.py
#   file_relpath : src/biomedump/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for BiomeDump (environment-driven logging)."""

from __future__ import annotations
