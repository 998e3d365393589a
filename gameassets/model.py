"""Model assets: materials, skins, levels of detail and a bounding box."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import IntEnum

from gameassets.bbox import BoundingBox
from gameassets.binary import DataReader, DataWriter
from gameassets.container import AssetType, load_from_file, save_to_file
from gameassets.errors import AssetError, ErrorCode
from gameassets.lod import ModelLod
from gameassets.material import Material

MODEL_ASSET_VERSION = 1


class CollisionModelType(IntEnum):
    """How the engine builds collision for a model."""

    NONE = 0
    STATIC_SINGLE_CONCAVE = 1  # not yet supported by the engine
    DYNAMIC_MULTIPLE_CONVEX = 2  # not yet supported by the engine


def _collision_type(value: int) -> CollisionModelType | int:
    try:
        return CollisionModelType(value)
    except ValueError:
        return value


def _check_index(items: list, index: int, what: str) -> None:
    if not 0 <= index < len(items):
        raise IndexError(f"{what} index {index} is out of range (have {len(items)})")


@dataclass
class ModelAsset:
    """A model made of shared materials, skins mapping slots to materials, and LODs."""

    materials: list[Material] = field(default_factory=list)
    skins: list[list[int]] = field(default_factory=list)
    lods: list[ModelLod] = field(default_factory=list)
    collision_model_type: CollisionModelType | int = CollisionModelType.NONE
    bounding_box: BoundingBox = field(default_factory=BoundingBox)

    @classmethod
    def load(cls, path: str | os.PathLike) -> ModelAsset:
        """Read a model from a container file."""
        asset = load_from_file(path)
        if asset.asset_type != AssetType.MODEL:
            raise AssetError(ErrorCode.INCORRECT_FORMAT, "not a model asset")
        if asset.type_version != MODEL_ASSET_VERSION:
            raise AssetError(ErrorCode.INCORRECT_VERSION, f"model version {asset.type_version}")
        return cls._read(asset.reader)

    @classmethod
    def from_bytes(cls, payload: bytes | bytearray | memoryview) -> ModelAsset:
        """Parse an uncompressed model payload."""
        return cls._read(DataReader(payload))

    @classmethod
    def _read(cls, reader: DataReader) -> ModelAsset:
        material_count = reader.read_u32()
        materials_per_skin = reader.read_u32()
        skin_count = reader.read_u32()
        lod_count = reader.read_u32()
        collision = _collision_type(reader.read_u8())
        materials = [Material.read(reader) for _ in range(material_count)]
        skins = [reader.read_u32_array(materials_per_skin) for _ in range(skin_count)]
        lods = [ModelLod.read(reader, materials_per_skin) for _ in range(lod_count)]
        bounding_box = BoundingBox.read(reader)
        return cls(
            materials=materials,
            skins=skins,
            lods=lods,
            collision_model_type=collision,
            bounding_box=bounding_box,
        )

    def to_bytes(self) -> bytes:
        """Build the uncompressed model payload."""
        if not self.skins:
            raise ValueError("A model needs at least one skin")
        if not self.skins[0]:
            raise ValueError("A model skin needs at least one material slot")
        if not self.lods:
            raise ValueError("A model needs at least one level of detail")
        if self.lods[0].distance != 0:
            raise ValueError("The first level of detail must have a distance of 0")
        if len(self.lods[0].vertices) < 3:
            raise ValueError("The first level of detail needs at least one triangle")

        writer = DataWriter()
        writer.write_u32(len(self.materials))
        writer.write_u32(len(self.skins[0]))
        writer.write_u32(len(self.skins))
        writer.write_u32(len(self.lods))
        writer.write_u8(int(self.collision_model_type))
        for material in self.materials:
            material.write(writer)
        for skin in self.skins:
            writer.write_u32_array(skin)
        for lod in self.lods:
            lod.write(writer)
        self.bounding_box.write(writer)
        return writer.getvalue()

    def save(self, path: str | os.PathLike) -> None:
        """Write the model to a container file."""
        save_to_file(path, self.to_bytes(), AssetType.MODEL, MODEL_ASSET_VERSION)

    def sort_lods(self) -> None:
        """Order the levels of detail by distance."""
        self.lods.sort(key=lambda lod: lod.distance)

    def remove_lod(self, index: int) -> None:
        _check_index(self.lods, index, "LOD")
        del self.lods[index]

    def lod_count(self) -> int:
        return len(self.lods)

    def validate_lod_distances(self) -> bool:
        """Sort the LODs and check that the first is at 0 and no distance repeats."""
        self.sort_lods()
        if self.lods[0].distance != 0.0:
            return False
        seen: list[float] = []
        for lod in self.lods:
            if any(lod.distance == distance for distance in seen):
                return False
            seen.append(lod.distance)
        return True

    def skin_count(self) -> int:
        return len(self.skins)

    def add_skin(self) -> None:
        """Append a skin that maps every slot to material 0."""
        self.skins.append([0] * self.materials_per_skin())

    def remove_skin(self, index: int) -> None:
        _check_index(self.skins, index, "Skin")
        del self.skins[index]

    def materials_per_skin(self) -> int:
        return len(self.skins[0])

    def material_count(self) -> int:
        return len(self.materials)

    def add_material(self, material: Material) -> None:
        self.materials.append(material)

    def remove_material(self, index: int) -> None:
        """Remove a material and clamp skin slots that now point past the end."""
        _check_index(self.materials, index, "Material")
        del self.materials[index]
        last = self.material_count() - 1
        if last < 0:
            return
        for skin in self.skins:
            skin[:] = [min(material, last) for material in skin]

    def vertex_buffer(self, lod_index: int) -> bytes:
        """Return the packed vertex data of one level of detail."""
        _check_index(self.lods, lod_index, "LOD")
        writer = DataWriter()
        for vertex in self.lods[lod_index].vertices:
            vertex.write(writer)
        return writer.getvalue()