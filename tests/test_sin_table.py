# tests/test_sin_table.py

import dataclasses
import logging
import math

import pytest

from digital.core.bits import f32
from digital.trig.constants import SIN_TO_COS, TABLE_MASK, TABLE_SIZE
from digital.trig.sin_table import (
    DEFAULT_TABLE,
    SIN_TABLE,
    SIN_TABLE_D,
    SineTable,
    sin_cos_at,
    sin_cos_at_f32,
)

CARDINALS = {0: 0.0, 4096: 1.0, 8192: 0.0, 12288: -1.0}
SLICE = 2.0 * math.pi / TABLE_SIZE


def test_table_constants():
    assert TABLE_SIZE == 16384
    assert TABLE_MASK == 16383
    assert SIN_TO_COS == 4096
    assert len(SIN_TABLE) == TABLE_SIZE
    assert len(SIN_TABLE_D) == TABLE_SIZE


def test_cardinal_entries_are_exact():
    for idx, value in CARDINALS.items():
        assert SIN_TABLE_D[idx] == value
        assert SIN_TABLE[idx] == value


def test_float_table_is_the_narrowed_double_table():
    for i in range(TABLE_SIZE):
        assert SIN_TABLE[i] == f32(SIN_TABLE_D[i])


def test_entries_sample_slice_centres():
    for i in range(TABLE_SIZE):
        if i in CARDINALS:
            continue
        centre = (i + 0.5) / TABLE_SIZE * 2.0 * math.pi
        assert abs(SIN_TABLE_D[i] - math.sin(centre)) < 1e-6


def test_cos_offset_identity():
    """table[(i + SIN_TO_COS) & mask] is the cosine at the centre of slice i."""
    for i in range(TABLE_SIZE):
        centre = (i + 0.5) / TABLE_SIZE * 2.0 * math.pi
        assert abs(SIN_TABLE_D[(i + SIN_TO_COS) & TABLE_MASK] - math.cos(centre)) <= SLICE


def test_tables_are_immutable():
    with pytest.raises(TypeError):
        SIN_TABLE[0] = 1.0  # type: ignore[index]
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_TABLE.bits = 3  # type: ignore[misc]


def test_index_accessors_wrap():
    assert DEFAULT_TABLE.sin_at(-1) == SIN_TABLE_D[TABLE_MASK]
    assert DEFAULT_TABLE.sin_at(TABLE_SIZE + 5) == SIN_TABLE_D[5]
    assert DEFAULT_TABLE.cos_at(0) == 1.0
    assert DEFAULT_TABLE.cos_at_f32(8192) == -1.0
    assert sin_cos_at(4096) == (1.0, 0.0)
    assert sin_cos_at_f32(-4096) == (-1.0, 0.0)


def test_sin_cos_at_is_a_unit_vector():
    for i in range(0, TABLE_SIZE, 97):
        s, c = sin_cos_at(i)
        assert s * s + c * c == pytest.approx(1.0, abs=1e-3)


@pytest.mark.parametrize("bits", [2, 4, 6, 10])
def test_smaller_tables_keep_the_cardinals(bits):
    table = SineTable.build(bits)
    q = table.size // 4
    assert table.size == 1 << bits
    assert table.sin_to_cos == q
    assert table.sin_at(0) == 0.0
    assert table.sin_at(q) == 1.0
    assert table.sin_at(2 * q) == 0.0
    assert table.sin_at(3 * q) == -1.0


@pytest.mark.parametrize("bits", [0, 1, 25])
def test_invalid_table_sizes(bits):
    with pytest.raises(ValueError):
        SineTable.build(bits)


def test_mismatched_values_rejected():
    with pytest.raises(ValueError):
        SineTable(bits=4, values_f=(0.0,) * 16, values_d=(0.0,) * 8)


def test_build_logs_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="digital.trig.sin_table")
    SineTable.build(5)
    assert "built 32-entry sine table" in caplog.text
