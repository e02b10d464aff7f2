# topmark:header:start
#
#   project      : BiomeDump
#   file         : constants.py
#   file_relpath : src/biomedump/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BiomeDump Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

BIOMEDUMP_TOOL_NAME: str = "biomedump"

BIOMEDUMP_VERSION: str = get_version(BIOMEDUMP_TOOL_NAME)

# Spaces per nesting level in the rendered JSON.
DEFAULT_JSON_INDENT: int = 4

LOG_LEVEL_ENV_VAR: str = "BIOMEDUMP_LOG_LEVEL"
