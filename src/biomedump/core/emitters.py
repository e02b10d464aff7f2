# topmark:header:start
#
#   project      : BiomeDump
#   file         : emitters.py
#   file_relpath : src/biomedump/core/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Record emitter.

Renders the biome record and writes it to a console. Rendering and writing
are split so the rendered text can be checked without a console.

Output-stream failures are not handled here; they propagate to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from biomedump.config.logging import get_logger
from biomedump.constants import DEFAULT_JSON_INDENT
from biomedump.core.record import DEFAULT_RECORD, BiomeRecord
from biomedump.core.serializers import serialize_json_object

if TYPE_CHECKING:
    from biomedump.cli.console_api import ConsoleLike

logger = get_logger(__name__)


def render_record(
    record: BiomeRecord = DEFAULT_RECORD,
    *,
    indent: int = DEFAULT_JSON_INDENT,
) -> str:
    """Render a biome record as pretty-printed JSON (no trailing newline).

    Args:
        record (BiomeRecord): The record to render.
        indent (int): Spaces per nesting level.

    Returns:
        str: The rendered JSON document.
    """
    return serialize_json_object(record, indent=indent)


def emit_record(console: ConsoleLike, record: BiomeRecord = DEFAULT_RECORD) -> None:
    """Write the rendered record followed by a single newline.

    Args:
        console (ConsoleLike): Program-output console to write to.
        record (BiomeRecord): The record to emit.
    """
    text: str = render_record(record)
    logger.debug("Emitting record for biome %r (%d chars)", record.biome, len(text))
    console.print(text)
