"""Bitmap font assets: glyph metrics and the texture that holds the glyphs."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from gameassets.binary import DataReader, DataWriter
from gameassets.container import AssetType, load_from_file, save_to_file
from gameassets.errors import AssetError, ErrorCode

FONT_ASSET_VERSION = 1
FONT_VALID_CHARS = (
    "!\"#$%&'()*+,-./"
    "0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_`"
    "abcdefghijklmnopqrstuvwxyz{|}~"
)
FONT_MAX_SYMBOLS = len(FONT_VALID_CHARS)

_TEXT_ENCODING = "utf-8"
_TEXT_ERRORS = "surrogateescape"


def char_list_for_display() -> list[str]:
    """Return each valid symbol with its code, as shown in a picker."""
    return [f"{char} (0x{ord(char):02X})" for char in FONT_VALID_CHARS]


@dataclass
class FontAsset:
    """Font metrics, the glyph texture and the symbols in texture order."""

    texture_height: int = 1
    baseline: int = 1
    char_spacing: int = 1
    line_spacing: int = 1
    char_width: int = 1
    space_width: int = 1
    default_size: int = 1
    uppercase_only: bool = False
    texture: str = ""
    chars: list[str] = field(default_factory=list)
    char_widths: list[int] = field(default_factory=list)

    @classmethod
    def load(cls, path: str | os.PathLike) -> FontAsset:
        """Read a font from a container file."""
        asset = load_from_file(path)
        if asset.asset_type != AssetType.FONT:
            raise AssetError(ErrorCode.INCORRECT_FORMAT, "not a font asset")
        if asset.type_version != FONT_ASSET_VERSION:
            raise AssetError(ErrorCode.INCORRECT_VERSION, f"font version {asset.type_version}")
        return cls._read(asset.reader)

    @classmethod
    def from_bytes(cls, payload: bytes | bytearray | memoryview) -> FontAsset:
        """Parse an uncompressed font payload."""
        return cls._read(DataReader(payload))

    @classmethod
    def _read(cls, reader: DataReader) -> FontAsset:
        font = cls(
            char_width=reader.read_u8(),
            texture_height=reader.read_u8(),
            baseline=reader.read_u8(),
            char_spacing=reader.read_u8(),
            line_spacing=reader.read_u8(),
            space_width=reader.read_u8(),
            default_size=reader.read_u8(),
            uppercase_only=reader.read_bool(),
        )
        font.texture = reader.read_string(reader.read_size())
        char_count = reader.read_u8()
        if char_count > FONT_MAX_SYMBOLS:
            raise AssetError(ErrorCode.INVALID_BODY, f"font holds {char_count} symbols")
        for _ in range(char_count):
            font.chars.append(reader.read_char())
            font.char_widths.append(reader.read_u8())
        return font

    def to_bytes(self) -> bytes:
        """Build the uncompressed font payload."""
        if len(self.chars) != len(self.char_widths):
            raise ValueError("Every symbol needs exactly one width")
        writer = DataWriter()
        writer.write_u8(self.char_width)
        writer.write_u8(self.texture_height)
        writer.write_u8(self.baseline)
        writer.write_u8(self.char_spacing)
        writer.write_u8(self.line_spacing)
        writer.write_u8(self.space_width)
        writer.write_u8(self.default_size)
        writer.write_bool(self.uppercase_only)
        encoded = self.texture.encode(_TEXT_ENCODING, _TEXT_ERRORS)
        writer.write_size(len(encoded) + 1)
        writer.write_bytes(encoded + b"\x00")
        writer.write_u8(len(self.chars))
        for char, width in zip(self.chars, self.char_widths):
            writer.write_char(char)
            writer.write_u8(width)
        return writer.getvalue()

    def save(self, path: str | os.PathLike) -> None:
        """Write the font to a container file."""
        save_to_file(path, self.to_bytes(), AssetType.FONT, FONT_ASSET_VERSION)