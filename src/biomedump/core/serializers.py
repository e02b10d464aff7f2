# topmark:header:start
#
#   project      : BiomeDump
#   file         : serializers.py
#   file_relpath : src/biomedump/core/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure JSON serialization utilities for BiomeDump output.

This module converts payload objects into JSON strings. It is intentionally:
- Console-free (no `ConsoleLike`, no printing)
- Click-free
- side-effect-free (serialization only)

Conventions:
- `json.dumps()` does not append a trailing newline; callers that print the
  result add it.
- Keys are never sorted: object members keep their insertion order.
- Non-ASCII text is written as-is (UTF-8), not as `\\uXXXX` escapes.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from enum import Enum
from pathlib import PurePath
from typing import Any, cast

from biomedump.config.logging import get_logger
from biomedump.constants import DEFAULT_JSON_INDENT

logger = get_logger(__name__)


def normalize_payload(obj: object) -> object:
    """Normalize a payload into JSON-serializable structures.

    Conversions:
      - PurePath -> str
      - Enum -> Enum.name
      - object with callable .to_dict() -> normalize(.to_dict())
      - Mapping -> dict[str, normalized value]
      - list/tuple/set/frozenset -> list[normalized item]
      - non-finite float (nan, inf, -inf) -> None

    Notes:
      - Keys in mappings are stringified to keep JSON object keys valid.
      - Mapping order is preserved.

    Args:
        obj (object): The payload to be transformed into a JSON-serializable value.

    Returns:
        object: The JSON-serializable representation of the payload.
    """
    if isinstance(obj, PurePath):
        return str(obj)

    if isinstance(obj, Enum):
        return obj.name

    # bool is a subclass of int, not float, so it is left alone here
    if isinstance(obj, float) and not math.isfinite(obj):
        logger.debug("Non-finite float %r rendered as null", obj)
        return None

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return normalize_payload(to_dict())

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        seq: Iterable[object] = cast("Iterable[object]", obj)
        return [normalize_payload(v) for v in seq]

    return obj


def serialize_json_object(obj: object, *, indent: int = DEFAULT_JSON_INDENT) -> str:
    """Serialize an object to pretty-printed JSON (no trailing newline).

    Floats are rendered in their shortest round-trip decimal form
    (``0.7`` stays ``0.7``), which does not depend on the process locale.

    Args:
        obj (object): The object to serialize.
        indent (int): Spaces per nesting level.

    Returns:
        str: A pretty-printed JSON string (no trailing newline).
    """
    normalized: object = normalize_payload(obj)
    logger.trace("Serializing %s with indent=%d", type(obj).__name__, indent)
    # json.dumps() doesn't append a trailing newline
    return json.dumps(
        normalized,
        indent=indent,
        separators=(",", ": "),
        ensure_ascii=False,
        allow_nan=False,
    )
