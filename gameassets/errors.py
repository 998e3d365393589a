"""Error codes shared by every asset operation."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Reasons an asset operation can fail."""

    OK = 0
    INVALID_HEADER = 1
    COMPRESSION_ERROR = 2
    INVALID_BODY = 3
    INVALID_ARGUMENT = 4
    FILE_NOT_FOUND = 5
    CANT_OPEN_FILE = 6
    UNKNOWN = 7
    INCORRECT_FORMAT = 8
    SHADER_PARSE_ERROR = 9
    SHADER_LINK_ERROR = 10
    INCORRECT_VERSION = 11
    INVALID_DIRECTORY = 12


_MESSAGES = {
    ErrorCode.OK: "OK",
    ErrorCode.INVALID_HEADER: "Invalid asset header",
    ErrorCode.COMPRESSION_ERROR: "Compression error",
    ErrorCode.INVALID_BODY: "Invalid asset body",
    ErrorCode.INVALID_ARGUMENT: "Invalid argument",
    ErrorCode.FILE_NOT_FOUND: "File not found",
    ErrorCode.CANT_OPEN_FILE: "Can't open file",
    ErrorCode.INCORRECT_FORMAT: "Incorrect File Format",
    ErrorCode.SHADER_PARSE_ERROR: "Shader Parse Error",
    ErrorCode.SHADER_LINK_ERROR: "Shader Link Error",
    ErrorCode.INCORRECT_VERSION: "Incorrect Version",
    ErrorCode.INVALID_DIRECTORY: "Invalid Directory Path",
}


def error_string(code: ErrorCode | int) -> str:
    """Return the human readable description of an error code."""
    try:
        code = ErrorCode(code)
    except ValueError:
        return "Unknown Error"
    return _MESSAGES.get(code, "Unknown Error")


class AssetError(Exception):
    """Raised when an asset cannot be read, written or converted."""

    def __init__(self, code: ErrorCode, detail: str | None = None) -> None:
        self.code = code
        self.detail = detail
        message = error_string(code)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)