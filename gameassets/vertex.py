"""Vertices of a model level of detail."""

from __future__ import annotations

from dataclasses import dataclass, field

from gameassets.binary import DataReader, DataWriter
from gameassets.color import Color

_SIZES = (("position", 3), ("uv", 2), ("normal", 3))


@dataclass(frozen=True)
class ModelVertex:
    """A vertex with position, texture coordinate, colour and normal."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    uv: tuple[float, float] = (0.0, 0.0)
    color: Color = field(default_factory=Color)
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        for name, size in _SIZES:
            values = tuple(float(value) for value in getattr(self, name))
            if len(values) != size:
                raise ValueError(f"{name} needs {size} components, got {len(values)}")
            object.__setattr__(self, name, values)

    @classmethod
    def read(cls, reader: DataReader) -> ModelVertex:
        """Read a vertex in its stored order: position, uv, colour, normal."""
        position = tuple(reader.read_float() for _ in range(3))
        uv = tuple(reader.read_float() for _ in range(2))
        color = Color.from_reader(reader, use_floats=True)
        normal = tuple(reader.read_float() for _ in range(3))
        return cls(position=position, uv=uv, color=color, normal=normal)

    def write(self, writer: DataWriter) -> None:
        """Write the vertex in its stored order."""
        writer.write_floats(self.position)
        writer.write_floats(self.uv)
        self.color.write_floats(writer)
        writer.write_floats(self.normal)