# topmark:header:start
#
#   project      : BiomeDump
#   file         : record.py
#   file_relpath : src/biomedump/core/record.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Biome record model.

The record is the single piece of data BiomeDump knows about: a biome
identifier and its temperature. It is immutable, and its
[`to_dict`][biomedump.core.record.BiomeRecord.to_dict] mapping preserves
field order (`biome` first, then `temperature`) so serialized output is
stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


class RecordKey:
    """Canonical keys of the serialized biome record."""

    BIOME: Final[str] = "biome"
    TEMPERATURE: Final[str] = "temperature"


@dataclass(frozen=True)
class BiomeRecord:
    """Immutable biome record.

    Attributes:
        biome (str): Namespaced biome identifier.
        temperature (float): Biome temperature.
    """

    biome: str = "minecraft:plains"
    temperature: float = 0.7

    def to_dict(self) -> dict[str, object]:
        """Return the record as an insertion-ordered mapping.

        Returns:
            dict[str, object]: ``{"biome": ..., "temperature": ...}`` in that order.
        """
        return {
            RecordKey.BIOME: self.biome,
            RecordKey.TEMPERATURE: self.temperature,
        }


DEFAULT_RECORD: Final[BiomeRecord] = BiomeRecord()
