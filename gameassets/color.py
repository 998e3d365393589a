"""RGBA colours stored as four single-precision channels."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

from gameassets.binary import DataReader, DataWriter

_F32 = struct.Struct("<f")
_SHIFTS = (24, 16, 8, 0)


def _f32(value: float) -> float:
    """Round *value* to the nearest single-precision float."""
    return _F32.unpack(_F32.pack(value))[0]


@dataclass(frozen=True)
class Color:
    """A colour with channels in the range 0.0 to 1.0."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    @classmethod
    def from_reader(cls, reader: DataReader, use_floats: bool = False) -> Color:
        """Read a colour, either as four floats or as one packed 32-bit value."""
        if use_floats:
            return cls(reader.read_float(), reader.read_float(), reader.read_float(), reader.read_float())
        return cls.from_rgba(reader.read_u32())

    @classmethod
    def from_rgba(cls, rgba: int) -> Color:
        """Build a colour from a value packed as 0xRRGGBBAA."""
        if not 0 <= rgba <= 0xFFFFFFFF:
            raise ValueError(f"Packed colour {rgba!r} does not fit in 32 bits")
        return cls(*(_f32(((rgba >> shift) & 0xFF) / 255.0) for shift in _SHIFTS))

    def write_floats(self, writer: DataWriter) -> None:
        """Write the four channels as floats."""
        writer.write_floats(self.copy_data())

    def write_uint32(self, writer: DataWriter) -> None:
        """Write the colour packed as 0xRRGGBBAA."""
        packed = 0
        for channel, shift in zip(self.copy_data(), _SHIFTS):
            try:
                scaled = _f32(channel * 255.0)
            except OverflowError as exc:
                raise ValueError(f"Channel {channel!r} cannot be packed") from exc
            if not math.isfinite(scaled) or scaled < 0:
                raise ValueError(f"Channel {channel!r} cannot be packed")
            packed |= int(scaled) << shift
        writer.write_u32(packed & 0xFFFFFFFF)

    def copy_data(self) -> tuple[float, float, float, float]:
        """Return the channels as an (r, g, b, a) tuple."""
        return (self.r, self.g, self.b, self.a)