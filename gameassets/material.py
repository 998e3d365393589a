"""Materials referenced by model skins."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from gameassets.binary import DataReader, DataWriter
from gameassets.color import Color

_TEXT_ENCODING = "utf-8"
_TEXT_ERRORS = "surrogateescape"


class MaterialShader(IntEnum):
    """Shader used to draw a material."""

    SKY = 0
    UNSHADED = 1
    SHADED = 2


def _shader(value: int) -> MaterialShader | int:
    try:
        return MaterialShader(value)
    except ValueError:
        return value


@dataclass
class Material:
    """A texture, a tint colour and a shader."""

    texture: str = ""
    color: Color = field(default_factory=Color)
    shader: MaterialShader | int = MaterialShader.SKY

    @classmethod
    def read(cls, reader: DataReader) -> Material:
        """Read a material from a model payload."""
        texture = reader.read_string(reader.read_size())
        color = Color.from_reader(reader, use_floats=True)
        shader = _shader(reader.read_u32())
        return cls(texture=texture, color=color, shader=shader)

    @classmethod
    def create(cls, texture: str, rgba: int, shader: MaterialShader | int) -> Material:
        """Build a material whose colour is packed as 0xRRGGBBAA."""
        return cls(texture=texture, color=Color.from_rgba(rgba), shader=_shader(int(shader)))

    def write(self, writer: DataWriter) -> None:
        """Write the material: terminated texture name, float colour, shader id."""
        encoded = self.texture.encode(_TEXT_ENCODING, _TEXT_ERRORS)
        writer.write_size(len(encoded) + 1)
        writer.write_bytes(encoded + b"\x00")
        self.color.write_floats(writer)
        writer.write_u32(int(self.shader))