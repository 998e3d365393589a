import struct

import pytest
from PIL import Image

from gameassets.container import AssetType, save_to_file
from gameassets.errors import AssetError, ErrorCode
from gameassets.texture import TEXTURE_ASSET_VERSION, ImageFormat, TextureAsset

PIXELS = [0xFF0000FF, 0x00FF00C0, 0x0000FFFF, 0x12345680, 0xFFFFFFFF, 0x000000FF]


def _texture():
    return TextureAsset(pixels=list(PIXELS), width=3, height=2, filter=True, repeat=False, mipmaps=True)


def test_missing_pattern():
    texture = TextureAsset.missing()
    assert (texture.width, texture.height) == (64, 64)
    assert len(texture.pixels) == 64 * 64
    assert texture.pixels[0] == 0xFF00FFFF
    assert texture.pixels[32] == 0x000000FF
    assert texture.pixels[32 * 64] == 0x000000FF
    assert texture.pixels[32 * 64 + 32] == 0xFF00FFFF


def test_round_trip_bytes():
    texture = _texture()
    assert TextureAsset.from_bytes(texture.to_bytes()) == texture


def test_payload_header():
    data = _texture().to_bytes()
    assert struct.unpack_from("<QQBBB", data) == (3, 2, 1, 0, 1)
    assert len(data) == 19 + 4 * len(PIXELS)


def test_save_and_load(tmp_path):
    path = tmp_path / "t.gtex"
    texture = _texture()
    texture.save(path)
    assert TextureAsset.load(path) == texture


def test_load_missing_file(tmp_path):
    assert TextureAsset.load(tmp_path / "absent.gtex") == TextureAsset.missing()


def test_load_wrong_type(tmp_path):
    path = tmp_path / "s.gsnd"
    save_to_file(path, b"RIFF", AssetType.WAV, TEXTURE_ASSET_VERSION)
    with pytest.raises(AssetError) as info:
        TextureAsset.load(path)
    assert info.value.code == ErrorCode.INCORRECT_FORMAT


def test_load_wrong_version(tmp_path):
    path = tmp_path / "t.gtex"
    save_to_file(path, _texture().to_bytes(), AssetType.TEXTURE, TEXTURE_ASSET_VERSION + 1)
    with pytest.raises(AssetError) as info:
        TextureAsset.load(path)
    assert info.value.code == ErrorCode.INCORRECT_VERSION


def test_from_pixels_takes_grid():
    texture = TextureAsset.from_pixels(PIXELS, 2, 2)
    assert texture.pixels == PIXELS[:4]
    assert (texture.width, texture.height) == (2, 2)
    assert texture.repeat is True and texture.filter is False


def test_from_pixels_too_few():
    with pytest.raises(ValueError):
        TextureAsset.from_pixels(PIXELS, 4, 4)


def test_pixels_rgba_is_copy():
    texture = _texture()
    copy = texture.pixels_rgba()
    copy[0] = 0
    assert texture.pixels[0] == PIXELS[0]


def test_from_image_channel_order(tmp_path):
    path = tmp_path / "red.png"
    Image.new("RGBA", (2, 1), (255, 0, 0, 255)).save(path)
    texture = TextureAsset.from_image(path)
    assert (texture.width, texture.height) == (2, 1)
    assert texture.pixels == [0xFF0000FF, 0xFF0000FF]


def test_from_image_missing_file(tmp_path):
    assert TextureAsset.from_image(tmp_path / "none.png") == TextureAsset.missing()


def test_from_image_not_an_image(tmp_path):
    path = tmp_path / "junk.png"
    path.write_bytes(b"not an image at all")
    with pytest.raises(AssetError) as info:
        TextureAsset.from_image(path)
    assert info.value.code == ErrorCode.INCORRECT_FORMAT


@pytest.mark.parametrize("image_format, suffix", [(ImageFormat.PNG, "png"), (ImageFormat.TGA, "tga")])
def test_image_round_trip(tmp_path, image_format, suffix):
    path = tmp_path / f"out.{suffix}"
    texture = _texture()
    texture.save_as_image(path, image_format)
    loaded = TextureAsset.from_image(path)
    assert (loaded.width, loaded.height) == (3, 2)
    assert loaded.pixels == PIXELS


def test_bmp_export_colors(tmp_path):
    path = tmp_path / "out.bmp"
    _texture().save_as_image(path, ImageFormat.BMP)
    with Image.open(path) as image:
        rgb = image.convert("RGB")
        assert rgb.size == (3, 2)
        assert rgb.getpixel((0, 0)) == (255, 0, 0)
        assert rgb.getpixel((2, 0)) == (0, 0, 255)


def test_save_as_image_unknown_format(tmp_path):
    with pytest.raises(AssetError) as info:
        _texture().save_as_image(tmp_path / "x.img", 9)
    assert info.value.code == ErrorCode.UNKNOWN


def test_save_as_image_bad_pixel_count(tmp_path):
    texture = TextureAsset(pixels=[0xFFFFFFFF], width=4, height=4)
    with pytest.raises(AssetError) as info:
        texture.save_as_image(tmp_path / "x.png", ImageFormat.PNG)
    assert info.value.code == ErrorCode.UNKNOWN