"""One level of detail of a model: vertices and per-material index lists."""

from __future__ import annotations

import math
import os
import struct
from dataclasses import dataclass, field
from decimal import Decimal

from gameassets.binary import DataReader, DataWriter
from gameassets.vertex import ModelVertex

_F32 = struct.Struct("<f")


def _f32(value: float) -> float:
    return _F32.unpack(_F32.pack(value))[0]


def _format_float(value: float) -> str:
    """Shortest text that reads back as the same single-precision value."""
    value = _f32(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    for precision in range(9):
        scientific = f"{value:.{precision}e}"
        if _f32(float(scientific)) == value:
            break
    fixed = format(Decimal(scientific), "f")
    return fixed if len(fixed) <= len(scientific) else scientific


@dataclass
class ModelLod:
    """Vertices shared by every material, with one index list per material."""

    distance: float = 0.0
    vertices: list[ModelVertex] = field(default_factory=list)
    index_counts: list[int] = field(default_factory=list)
    material_indices: list[list[int]] = field(default_factory=list)

    @classmethod
    def read(cls, reader: DataReader, materials_per_skin: int) -> ModelLod:
        """Read a level of detail holding *materials_per_skin* index lists."""
        distance = reader.read_float()
        reader.skip(4)  # squared distance, derived on write
        vertex_count = reader.read_size()
        vertices = [ModelVertex.read(reader) for _ in range(vertex_count)]
        reader.skip(4)  # total index count, derived on write
        index_counts = reader.read_u32_array(materials_per_skin)
        material_indices = [reader.read_u32_array(count) for count in index_counts]
        return cls(
            distance=distance,
            vertices=vertices,
            index_counts=index_counts,
            material_indices=material_indices,
        )

    def write(self, writer: DataWriter) -> None:
        """Write the level of detail as stored in a model payload."""
        writer.write_float(self.distance)
        writer.write_float(self.distance * self.distance)
        writer.write_size(len(self.vertices))
        for vertex in self.vertices:
            vertex.write(writer)
        writer.write_u32(sum(self.index_counts) & 0xFFFFFFFF)
        writer.write_u32_array(self.index_counts)
        for indices in self.material_indices:
            writer.write_u32_array(indices)

    def export_obj(self, path: str | os.PathLike) -> None:
        """Write the level of detail as a Wavefront OBJ file."""
        lines = ["# Generated by GAME SDK\n\n"]
        for vertex in self.vertices:
            coords = " ".join(_format_float(v) for v in (*vertex.position, *vertex.color.copy_data()))
            lines.append(f"v {coords}\n")
            lines.append(f"vt {' '.join(_format_float(v) for v in vertex.uv)}\n")
            lines.append(f"vn {' '.join(_format_float(v) for v in vertex.normal)}\n")
        lines.append("\n\n")

        for material, indices in enumerate(self.material_indices):
            lines.append(f"usemtl mat_{material}\n")
            count = self.index_counts[material]
            for start in range(0, count, 3):
                triangle = indices[start:start + 3]
                if len(triangle) < 3:
                    raise IndexError(f"Material {material} has fewer indices than its count of {count}")
                a, b, c = (index + 1 for index in triangle)
                lines.append(f"f {a}/{a}/{a} {b}/{b}/{b} {c}/{c}/{c}\n")
            lines.append("\n")

        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.writelines(lines)