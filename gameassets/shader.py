"""Shader assets: GLSL source with SPIR-V for the Vulkan platform."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import IntEnum

from gameassets.binary import DataReader, DataWriter
from gameassets.container import AssetType, load_from_file, save_to_file
from gameassets.errors import AssetError, ErrorCode

SHADER_ASSET_VERSION = 1

_TEXT_ENCODING = "utf-8"
_TEXT_ERRORS = "surrogateescape"


class ShaderPlatform(IntEnum):
    """Graphics API a shader is built for."""

    OPENGL = 0
    VULKAN = 1


class ShaderType(IntEnum):
    """Pipeline stage of a shader."""

    FRAG = 0
    VERT = 1


SpirvCompiler = Callable[[str, ShaderType], Iterable[int]]
"""Turns GLSL into SPIR-V words for Vulkan 1.2 / SPIR-V 1.0, raising AssetError on failure."""


def _enum_or_int(enum_type, value: int):
    try:
        return enum_type(value)
    except ValueError:
        return value


@dataclass
class ShaderAsset:
    """GLSL source together with the platform and stage it targets."""

    platform: ShaderPlatform | int = ShaderPlatform.VULKAN
    type: ShaderType | int = ShaderType.FRAG
    glsl: str = ""

    @classmethod
    def load(cls, path: str | os.PathLike) -> ShaderAsset:
        """Read a shader container; any stored SPIR-V is ignored."""
        asset = load_from_file(path)
        if asset.asset_type != AssetType.SHADER:
            raise AssetError(ErrorCode.INCORRECT_FORMAT, "not a shader asset")
        if asset.type_version != SHADER_ASSET_VERSION:
            raise AssetError(ErrorCode.INCORRECT_VERSION, f"shader version {asset.type_version}")
        reader: DataReader = asset.reader
        platform = _enum_or_int(ShaderPlatform, reader.read_u8())
        shader_type = _enum_or_int(ShaderType, reader.read_u8())
        glsl = reader.read_string(reader.read_size())
        return cls(platform=platform, type=shader_type, glsl=glsl)

    @classmethod
    def from_glsl(cls, path: str | os.PathLike) -> ShaderAsset:
        """Read GLSL source from a file, keeping the default platform and stage."""
        try:
            with open(path, "rb") as handle:
                raw = handle.read()
        except OSError as exc:
            raise AssetError(ErrorCode.CANT_OPEN_FILE, str(exc)) from exc
        return cls(glsl=raw.decode(_TEXT_ENCODING, _TEXT_ERRORS))

    def save_as_glsl(self, path: str | os.PathLike) -> None:
        """Write the GLSL source to a file."""
        try:
            handle = open(path, "wb")
        except OSError as exc:
            raise AssetError(ErrorCode.CANT_OPEN_FILE, str(exc)) from exc
        with handle:
            handle.write(self.glsl.encode(_TEXT_ENCODING, _TEXT_ERRORS))

    def to_bytes(self, compiler: SpirvCompiler | None = None) -> bytes:
        """Build the uncompressed payload; Vulkan shaders are compiled with *compiler*."""
        encoded = self.glsl.encode(_TEXT_ENCODING, _TEXT_ERRORS)
        writer = DataWriter()
        writer.write_u8(int(self.platform))
        writer.write_u8(int(self.type))
        writer.write_size(len(encoded) + 1)
        writer.write_bytes(encoded)
        writer.write_u8(0)
        if self.platform == ShaderPlatform.VULKAN:
            if compiler is None:
                raise AssetError(ErrorCode.INVALID_ARGUMENT, "a SPIR-V compiler is required for Vulkan shaders")
            stage = ShaderType.VERT if self.type == ShaderType.VERT else ShaderType.FRAG
            spirv = list(compiler(self.glsl, stage))
            writer.write_size(len(spirv))
            writer.write_u32_array(spirv)
        else:
            writer.write_size(0)
        return writer.getvalue()

    def save(self, path: str | os.PathLike, compiler: SpirvCompiler | None = None) -> None:
        """Write the shader to a container file."""
        payload = self.to_bytes(compiler)
        save_to_file(path, payload, AssetType.SHADER, SHADER_ASSET_VERSION)