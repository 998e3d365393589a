"""Bounding boxes described by an origin and half-size extents."""

from __future__ import annotations

import itertools
import warnings
from collections.abc import Iterable
from dataclasses import dataclass

from gameassets.binary import DataReader, DataWriter
from gameassets.vertex import ModelVertex

Vector3 = tuple[float, float, float]


@dataclass
class BoundingBox:
    """A box around an origin; the engine may rotate it, so it is not strictly axis aligned."""

    origin: Vector3 = (0.0, 0.0, 0.0)
    extents: Vector3 = (0.5, 0.5, 0.5)

    @classmethod
    def read(cls, reader: DataReader) -> BoundingBox:
        """Read the origin followed by the extents."""
        origin = tuple(reader.read_float() for _ in range(3))
        extents = tuple(reader.read_float() for _ in range(3))
        return cls(origin=origin, extents=extents)

    @classmethod
    def from_vertices(cls, vertices: Iterable[ModelVertex]) -> BoundingBox:
        """Return the smallest box holding every vertex position."""
        positions = [vertex.position for vertex in vertices]
        if not positions:
            warnings.warn("Tried to create a bounding box with 0 points", stacklevel=2)
            return cls()
        axes = list(zip(*positions))
        lows = [min(axis) for axis in axes]
        highs = [max(axis) for axis in axes]
        origin = tuple((low + high) * 0.5 for low, high in zip(lows, highs))
        extents = tuple((high - low) * 0.5 for low, high in zip(lows, highs))
        return cls(origin=origin, extents=extents)

    def points(self) -> list[Vector3]:
        """Return the eight corners, z varying fastest and x slowest."""
        return [
            tuple(center + sign * extent for center, sign, extent in zip(self.origin, signs, self.extents))
            for signs in itertools.product((-1, 1), repeat=3)
        ]

    def points_flat(self) -> list[float]:
        """Return the eight corners as 24 consecutive coordinates."""
        return list(itertools.chain.from_iterable(self.points()))

    def write(self, writer: DataWriter) -> None:
        """Write the origin followed by the extents."""
        writer.write_floats(self.origin)
        writer.write_floats(self.extents)