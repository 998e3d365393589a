"""The compressed container that wraps every asset payload."""

from __future__ import annotations

import os
import sys
import zlib
from dataclasses import dataclass, field
from enum import IntEnum

from gameassets.binary import DataReader, DataWriter
from gameassets.errors import AssetError, ErrorCode

CONTAINER_VERSION = 2
CONTAINER_MAGIC = 0x454D4147  # "GAME" when stored little-endian
HEADER_SIZE = 4 + 1 * 3 + 8 * 2
_MIN_FILE_SIZE = 4 * 4
_GZIP_WBITS = zlib.MAX_WBITS | 16


class AssetType(IntEnum):
    """Kind of payload held by a container."""

    TEXTURE = 0
    WAV = 1
    LEVEL = 2
    SHADER = 3
    MODEL = 4
    FONT = 5


@dataclass
class Asset:
    """A decompressed container: its header fields and a reader over the payload."""

    asset_type: AssetType | int
    type_version: int
    reader: DataReader = field(default_factory=DataReader)
    container_version: int = CONTAINER_VERSION


def _asset_type(value: int) -> AssetType | int:
    try:
        return AssetType(value)
    except ValueError:
        return value


def decompress(data: bytes | bytearray | memoryview) -> Asset:
    """Parse a container and inflate its payload."""
    data = bytes(data)
    if len(data) < HEADER_SIZE:
        raise AssetError(ErrorCode.INVALID_HEADER, "container is shorter than its header")

    header = DataReader(data)
    if header.read_u32() != CONTAINER_MAGIC:
        raise AssetError(ErrorCode.INVALID_HEADER, "bad magic")
    version = header.read_u8()
    if version != CONTAINER_VERSION:
        raise AssetError(ErrorCode.INCORRECT_VERSION, f"container version {version}")
    asset_type = _asset_type(header.read_u8())
    type_version = header.read_u8()
    decompressed_size = header.read_size()
    compressed_size = header.read_size()

    body = data[HEADER_SIZE:HEADER_SIZE + compressed_size]
    inflater = zlib.decompressobj(_GZIP_WBITS)
    try:
        payload = inflater.decompress(body, min(decompressed_size + 1, sys.maxsize))
    except zlib.error as exc:
        raise AssetError(ErrorCode.COMPRESSION_ERROR, str(exc)) from exc
    if len(payload) > decompressed_size:
        raise AssetError(ErrorCode.COMPRESSION_ERROR, "payload is larger than declared")
    if not inflater.eof:
        raise AssetError(ErrorCode.COMPRESSION_ERROR, "compressed stream is incomplete")
    if len(payload) != decompressed_size:
        raise AssetError(ErrorCode.INVALID_BODY, "payload size does not match header")

    return Asset(
        asset_type=asset_type,
        type_version=type_version,
        reader=DataReader(payload),
        container_version=version,
    )


def compress(payload: bytes | bytearray | memoryview, asset_type: AssetType | int, type_version: int) -> bytes:
    """Wrap *payload* in a gzip-compressed container."""
    payload = bytes(payload)
    if not payload:
        raise AssetError(ErrorCode.INVALID_ARGUMENT, "payload is empty")

    deflater = zlib.compressobj(9, zlib.DEFLATED, _GZIP_WBITS, 8, zlib.Z_DEFAULT_STRATEGY)
    try:
        compressed = deflater.compress(payload) + deflater.flush(zlib.Z_FINISH)
    except zlib.error as exc:
        raise AssetError(ErrorCode.COMPRESSION_ERROR, str(exc)) from exc

    writer = DataWriter()
    writer.write_u32(CONTAINER_MAGIC)
    writer.write_u8(CONTAINER_VERSION)
    writer.write_u8(int(asset_type))
    writer.write_u8(type_version)
    writer.write_size(len(payload))
    writer.write_size(len(compressed))
    writer.write_bytes(compressed)
    return writer.getvalue()


def load_from_file(path: str | os.PathLike) -> Asset:
    """Read and decompress a container file."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise AssetError(ErrorCode.FILE_NOT_FOUND, str(exc)) from exc
    if len(data) < _MIN_FILE_SIZE:
        raise AssetError(ErrorCode.INVALID_HEADER, "file is too small")
    return decompress(data)


def save_to_file(
    path: str | os.PathLike,
    payload: bytes | bytearray | memoryview,
    asset_type: AssetType | int,
    type_version: int,
) -> None:
    """Compress *payload* and write the container to *path*."""
    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise AssetError(ErrorCode.CANT_OPEN_FILE, str(exc)) from exc
    with handle:
        handle.write(compress(payload, asset_type, type_version))