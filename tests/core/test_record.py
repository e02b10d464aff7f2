# topmark:header:start
#
#   project      : BiomeDump
#   file         : test_record.py
#   file_relpath : tests/core/test_record.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the biome record model."""

from __future__ import annotations

import dataclasses

import pytest

from biomedump.core.record import DEFAULT_RECORD, BiomeRecord, RecordKey


def test_default_record_values() -> None:
    """The default record carries the plains biome at 0.7."""
    assert DEFAULT_RECORD.biome == "minecraft:plains"
    assert DEFAULT_RECORD.temperature == 0.7
    assert DEFAULT_RECORD == BiomeRecord()


def test_to_dict_preserves_field_order() -> None:
    """`to_dict()` lists biome before temperature."""
    assert list(DEFAULT_RECORD.to_dict().items()) == [
        (RecordKey.BIOME, "minecraft:plains"),
        (RecordKey.TEMPERATURE, 0.7),
    ]


def test_record_is_immutable() -> None:
    """Assigning to a field raises."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_RECORD.temperature = 1.0  # type: ignore[misc]


def test_to_dict_returns_fresh_mapping() -> None:
    """Mutating the returned mapping does not leak into the record."""
    data = DEFAULT_RECORD.to_dict()
    data[RecordKey.BIOME] = "minecraft:desert"

    assert DEFAULT_RECORD.biome == "minecraft:plains"
