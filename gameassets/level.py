"""Level assets: compiled maps that wrap raw level data produced by the map editor."""

from __future__ import annotations

import os
from dataclasses import dataclass

from gameassets.container import AssetType, load_from_file, save_to_file
from gameassets.errors import AssetError, ErrorCode

LEVEL_ASSET_VERSION = 1


@dataclass
class LevelAsset:
    """Opaque level data that can be compiled into or extracted from a container."""

    data: bytes = b""

    @classmethod
    def load(cls, path: str | os.PathLike) -> LevelAsset:
        """Read a level from a container file."""
        asset = load_from_file(path)
        if asset.asset_type != AssetType.LEVEL:
            raise AssetError(ErrorCode.INCORRECT_FORMAT, "not a level asset")
        if asset.type_version != LEVEL_ASSET_VERSION:
            raise AssetError(ErrorCode.INCORRECT_VERSION, f"level version {asset.type_version}")
        return cls(data=asset.reader.read_bytes(asset.reader.total_size()))

    @classmethod
    def from_bin(cls, path: str | os.PathLike) -> LevelAsset:
        """Read raw level data from a file."""
        try:
            with open(path, "rb") as handle:
                return cls(data=handle.read())
        except OSError as exc:
            raise AssetError(ErrorCode.FILE_NOT_FOUND, str(exc)) from exc

    def save_as_bin(self, path: str | os.PathLike) -> None:
        """Write the raw level data to a file."""
        try:
            handle = open(path, "wb")
        except OSError as exc:
            raise AssetError(ErrorCode.CANT_OPEN_FILE, str(exc)) from exc
        with handle:
            handle.write(self.data)

    def save(self, path: str | os.PathLike) -> None:
        """Write the level to a container file."""
        save_to_file(path, self.data, AssetType.LEVEL, LEVEL_ASSET_VERSION)

    def data_size(self) -> int:
        return len(self.data)