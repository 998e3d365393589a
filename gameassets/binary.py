"""Little-endian binary readers and writers for asset payloads."""

from __future__ import annotations

import struct
from collections.abc import Iterable

_U8 = struct.Struct("<B")
_U32 = struct.Struct("<I")
_SIZE = struct.Struct("<Q")
_FLOAT = struct.Struct("<f")

_STRING_ENCODING = "utf-8"
_STRING_ERRORS = "surrogateescape"


class DataReader:
    """Sequential reader over an immutable byte buffer."""

    def __init__(self, data: bytes | bytearray | memoryview = b"") -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        """Current cursor position."""
        return self._offset

    def _take(self, count: int) -> bytes:
        if count < 0:
            raise ValueError("Read size cannot be negative")
        if self._offset + count > len(self._data):
            raise EOFError(
                "Attempting to read past the end of a buffer "
                f"(buffer size {len(self._data)}, cursor position {self._offset}, read size {count})"
            )
        chunk = self._data[self._offset:self._offset + count]
        self._offset += count
        return chunk

    def _unpack(self, fmt: struct.Struct):
        return fmt.unpack(self._take(fmt.size))[0]

    def seek(self, relative_offset: int) -> None:
        """Move the cursor relative to its current position."""
        target = self._offset + relative_offset
        if not 0 <= target <= len(self._data):
            raise ValueError("Attempted to seek outside of a buffer")
        self._offset = target

    def seek_absolute(self, position: int) -> None:
        """Move the cursor to an absolute position."""
        if not 0 <= position <= len(self._data):
            raise ValueError("Attempted to seek outside of a buffer")
        self._offset = position

    def total_size(self) -> int:
        return len(self._data)

    def remaining_size(self) -> int:
        return len(self._data) - self._offset

    def read_string(self, character_count: int) -> str:
        """Read a stored string of *character_count* bytes, its terminator included.

        The last byte of the stored run is dropped, as it holds the terminator.
        """
        raw = self._take(character_count)
        return raw[:-1].decode(_STRING_ENCODING, _STRING_ERRORS)

    def read_u8(self) -> int:
        return self._unpack(_U8)

    def read_bool(self) -> bool:
        return self._unpack(_U8) != 0

    def read_char(self) -> str:
        return self._take(1).decode("latin-1")

    def read_u32(self) -> int:
        return self._unpack(_U32)

    def read_size(self) -> int:
        return self._unpack(_SIZE)

    def read_float(self) -> float:
        return self._unpack(_FLOAT)

    def skip(self, size: int) -> None:
        """Advance the cursor by *size* bytes."""
        self._take(size)

    def read_bytes(self, count: int) -> bytes:
        return self._take(count)

    def read_u32_array(self, count: int) -> list[int]:
        raw = self._take(_U32.size * count)
        return [value for (value,) in _U32.iter_unpack(raw)]


class DataWriter:
    """Growable little-endian byte buffer."""

    def __init__(self) -> None:
        self._data = bytearray()

    def _pack(self, fmt: struct.Struct, value) -> None:
        try:
            self._data += fmt.pack(value)
        except struct.error as exc:
            raise ValueError(f"Value {value!r} cannot be stored: {exc}") from exc

    def write_u8(self, value: int) -> None:
        self._pack(_U8, value)

    def write_bool(self, value: bool) -> None:
        self._pack(_U8, 1 if value else 0)

    def write_char(self, value: str) -> None:
        try:
            encoded = value.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise ValueError(f"Character {value!r} cannot be stored") from exc
        if len(encoded) != 1:
            raise ValueError(f"Expected a single character, got {value!r}")
        self._data += encoded

    def write_u32(self, value: int) -> None:
        self._pack(_U32, value)

    def write_size(self, value: int) -> None:
        self._pack(_SIZE, value)

    def write_float(self, value: float) -> None:
        self._pack(_FLOAT, value)

    def write_floats(self, values: Iterable[float]) -> None:
        for value in values:
            self.write_float(value)

    def write_u32_array(self, values: Iterable[int]) -> None:
        for value in values:
            self.write_u32(value)

    def write_bytes(self, data: bytes | bytearray | memoryview) -> None:
        self._data += data

    def getvalue(self) -> bytes:
        """Return a copy of everything written so far."""
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)