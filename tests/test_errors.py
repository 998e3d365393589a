import pytest

from gameassets.errors import AssetError, ErrorCode, error_string


@pytest.mark.parametrize(
    ("code", "text"),
    [
        (ErrorCode.OK, "OK"),
        (ErrorCode.INVALID_HEADER, "Invalid asset header"),
        (ErrorCode.COMPRESSION_ERROR, "Compression error"),
        (ErrorCode.INVALID_BODY, "Invalid asset body"),
        (ErrorCode.FILE_NOT_FOUND, "File not found"),
        (ErrorCode.CANT_OPEN_FILE, "Can't open file"),
        (ErrorCode.INCORRECT_FORMAT, "Incorrect File Format"),
        (ErrorCode.INCORRECT_VERSION, "Incorrect Version"),
        (ErrorCode.INVALID_DIRECTORY, "Invalid Directory Path"),
        (ErrorCode.UNKNOWN, "Unknown Error"),
    ],
)
def test_error_string(code, text):
    assert error_string(code) == text


def test_error_string_accepts_plain_int():
    assert error_string(int(ErrorCode.SHADER_PARSE_ERROR)) == "Shader Parse Error"


def test_error_string_out_of_range_is_unknown():
    assert error_string(200) == "Unknown Error"


def test_asset_error_carries_code_and_message():
    err = AssetError(ErrorCode.INVALID_BODY)
    assert err.code is ErrorCode.INVALID_BODY
    assert err.detail is None
    assert str(err) == "Invalid asset body"


def test_asset_error_includes_detail():
    err = AssetError(ErrorCode.COMPRESSION_ERROR, "bad stream")
    assert str(err) == "Compression error: bad stream"
    assert err.detail == "bad stream"


def test_asset_error_is_an_exception_with_code():
    err = AssetError(ErrorCode.FILE_NOT_FOUND)
    assert isinstance(err, Exception)
    assert err.code == ErrorCode.FILE_NOT_FOUND
    assert str(err) == "File not found"