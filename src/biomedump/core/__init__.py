# topmark:header:start
#
#   project      : BiomeDump
#   file         : __init__.py
#   file_relpath : src/biomedump/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-free core of BiomeDump: the record model, serialization and emission."""

from __future__ import annotations

from biomedump.core.emitters import emit_record, render_record
from biomedump.core.record import DEFAULT_RECORD, BiomeRecord, RecordKey
from biomedump.core.serializers import normalize_payload, serialize_json_object

__all__: list[str] = [
    "DEFAULT_RECORD",
    "BiomeRecord",
    "RecordKey",
    "emit_record",
    "normalize_payload",
    "render_record",
    "serialize_json_object",
]
