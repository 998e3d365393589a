"""Sound assets wrapping the bytes of a WAV file."""

from __future__ import annotations

import os
from dataclasses import dataclass

from gameassets.container import AssetType, load_from_file, save_to_file
from gameassets.errors import AssetError, ErrorCode

SOUND_ASSET_VERSION = 1


@dataclass
class SoundAsset:
    """The complete contents of a WAV file."""

    data: bytes = b""

    @classmethod
    def load(cls, path: str | os.PathLike) -> SoundAsset:
        """Read a sound from a container file."""
        asset = load_from_file(path)
        if asset.asset_type != AssetType.WAV:
            raise AssetError(ErrorCode.INCORRECT_FORMAT, "not a sound asset")
        if asset.type_version != SOUND_ASSET_VERSION:
            raise AssetError(ErrorCode.INCORRECT_VERSION, f"sound version {asset.type_version}")
        return cls(data=asset.reader.read_bytes(asset.reader.total_size()))

    @classmethod
    def from_wav(cls, path: str | os.PathLike) -> SoundAsset:
        """Read a WAV file as it is."""
        try:
            with open(path, "rb") as handle:
                return cls(data=handle.read())
        except OSError as exc:
            raise AssetError(ErrorCode.FILE_NOT_FOUND, str(exc)) from exc

    def save_as_wav(self, path: str | os.PathLike) -> None:
        """Write the WAV bytes to a file."""
        try:
            handle = open(path, "wb")
        except OSError as exc:
            raise AssetError(ErrorCode.CANT_OPEN_FILE, str(exc)) from exc
        with handle:
            handle.write(self.data)

    def save(self, path: str | os.PathLike) -> None:
        """Write the sound to a container file."""
        save_to_file(path, self.data, AssetType.WAV, SOUND_ASSET_VERSION)

    def data_size(self) -> int:
        return len(self.data)