"""Texture assets holding 32-bit pixels packed as 0xRRGGBBAA."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from enum import IntEnum

from PIL import Image

from gameassets.binary import DataReader, DataWriter
from gameassets.container import AssetType, load_from_file, save_to_file
from gameassets.errors import AssetError, ErrorCode

TEXTURE_ASSET_VERSION = 1

_BE32 = struct.Struct(">I")
_MISSING_SIZE = 64
_MISSING_BLACK = 0x000000FF
_MISSING_MAGENTA = 0xFF00FFFF


class ImageFormat(IntEnum):
    """Conventional image formats a texture can be exported to."""

    PNG = 0
    TGA = 1
    BMP = 2


_PIL_FORMATS = {
    ImageFormat.PNG: "PNG",
    ImageFormat.TGA: "TGA",
    ImageFormat.BMP: "BMP",
}


@dataclass
class TextureAsset:
    """A width by height grid of pixels with sampling flags."""

    pixels: list[int] = field(default_factory=list)
    width: int = 0
    height: int = 0
    filter: bool = False
    repeat: bool = True
    mipmaps: bool = True

    @classmethod
    def load(cls, path: str | os.PathLike) -> TextureAsset:
        """Read a texture container; a missing file gives the missing-texture pattern."""
        if not os.path.exists(path):
            return cls.missing()
        asset = load_from_file(path)
        if asset.asset_type != AssetType.TEXTURE:
            raise AssetError(ErrorCode.INCORRECT_FORMAT, "not a texture asset")
        if asset.type_version != TEXTURE_ASSET_VERSION:
            raise AssetError(ErrorCode.INCORRECT_VERSION, f"texture version {asset.type_version}")
        return cls._read(asset.reader)

    @classmethod
    def from_bytes(cls, payload: bytes | bytearray | memoryview) -> TextureAsset:
        """Parse an uncompressed texture payload."""
        return cls._read(DataReader(payload))

    @classmethod
    def _read(cls, reader: DataReader) -> TextureAsset:
        width = reader.read_size()
        height = reader.read_size()
        filter_ = reader.read_u8() != 0
        repeat = reader.read_u8() != 0
        mipmaps = reader.read_u8() != 0
        pixels = reader.read_u32_array(width * height)
        return cls(pixels=pixels, width=width, height=height, filter=filter_, repeat=repeat, mipmaps=mipmaps)

    @classmethod
    def from_pixels(cls, pixels, width: int, height: int) -> TextureAsset:
        """Build a texture from the first width * height packed pixels."""
        count = width * height
        taken = list(pixels)[:count]
        if len(taken) < count:
            raise ValueError(f"Expected {count} pixels, got {len(taken)}")
        return cls(pixels=taken, width=width, height=height)

    @classmethod
    def from_image(cls, path: str | os.PathLike) -> TextureAsset:
        """Import a conventional image; a missing file gives the missing-texture pattern."""
        if not os.path.exists(path):
            return cls.missing()
        try:
            with Image.open(path) as image:
                rgba = image.convert("RGBA")
        except (OSError, ValueError) as exc:
            raise AssetError(ErrorCode.INCORRECT_FORMAT, str(exc)) from exc
        width, height = rgba.size
        pixels = [value for (value,) in _BE32.iter_unpack(rgba.tobytes())]
        return cls(pixels=pixels, width=width, height=height)

    @classmethod
    def missing(cls) -> TextureAsset:
        """Return the 64x64 black and magenta checkerboard."""
        half = _MISSING_SIZE // 2
        pixels = [
            _MISSING_BLACK if (x < half) ^ (y < half) else _MISSING_MAGENTA
            for y in range(_MISSING_SIZE)
            for x in range(_MISSING_SIZE)
        ]
        return cls(pixels=pixels, width=_MISSING_SIZE, height=_MISSING_SIZE)

    def pixels_rgba(self) -> list[int]:
        """Return a copy of the pixels, packed as 0xRRGGBBAA."""
        return list(self.pixels)

    def to_bytes(self) -> bytes:
        """Build the uncompressed texture payload."""
        writer = DataWriter()
        writer.write_size(self.width)
        writer.write_size(self.height)
        writer.write_u8(1 if self.filter else 0)
        writer.write_u8(1 if self.repeat else 0)
        writer.write_u8(1 if self.mipmaps else 0)
        writer.write_u32_array(self.pixels_rgba())
        return writer.getvalue()

    def save(self, path: str | os.PathLike) -> None:
        """Write the texture to a container file."""
        save_to_file(path, self.to_bytes(), AssetType.TEXTURE, TEXTURE_ASSET_VERSION)

    def save_as_image(self, path: str | os.PathLike, image_format: ImageFormat | int) -> None:
        """Export the texture as a PNG, TGA or BMP image."""
        try:
            image_format = ImageFormat(image_format)
        except ValueError as exc:
            raise AssetError(ErrorCode.UNKNOWN, f"unsupported image format {image_format!r}") from exc
        try:
            raw = b"".join(_BE32.pack(pixel) for pixel in self.pixels_rgba())
            image = Image.frombytes("RGBA", (self.width, self.height), raw)
            image.save(path, format=_PIL_FORMATS[image_format])
        except (OSError, ValueError, SystemError, struct.error) as exc:
            raise AssetError(ErrorCode.UNKNOWN, str(exc)) from exc