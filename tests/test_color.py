import struct

import pytest

from gameassets.binary import DataReader, DataWriter
from gameassets.color import Color


def test_default_is_opaque_white():
    assert Color().copy_data() == (1.0, 1.0, 1.0, 1.0)


def test_from_rgba_splits_channels_high_byte_first():
    assert Color.from_rgba(0xFF0000FF).copy_data() == (1.0, 0.0, 0.0, 1.0)


@pytest.mark.parametrize("rgba", [0x00000000, 0xFFFFFFFF, 0xFF0000FF, 0x00FF00FF, 0x0000FF00])
def test_uint32_round_trip(rgba):
    writer = DataWriter()
    Color.from_rgba(rgba).write_uint32(writer)
    assert writer.getvalue() == struct.pack("<I", rgba)


def test_from_reader_packed_matches_from_rgba():
    reader = DataReader(struct.pack("<I", 0xFF00FF00))
    assert Color.from_reader(reader) == Color.from_rgba(0xFF00FF00)
    assert reader.remaining_size() == 0


def test_float_round_trip():
    color = Color(0.25, 0.5, 0.75, 1.0)
    writer = DataWriter()
    color.write_floats(writer)
    assert writer.getvalue() == struct.pack("<4f", 0.25, 0.5, 0.75, 1.0)
    assert Color.from_reader(DataReader(writer.getvalue()), use_floats=True) == color


def test_from_reader_truncated_raises():
    with pytest.raises(EOFError):
        Color.from_reader(DataReader(b"\x00\x00"), use_floats=True)


def test_from_rgba_out_of_range_raises():
    with pytest.raises(ValueError):
        Color.from_rgba(1 << 32)


def test_write_uint32_negative_channel_raises():
    with pytest.raises(ValueError):
        Color(-1.0, 0.0, 0.0, 0.0).write_uint32(DataWriter())