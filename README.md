# gameassets

A library for the asset files used by the GAME engine. Every asset is a
gzip-compressed payload behind a small header that records the asset type
and the version of its payload format. `gameassets` reads and writes that
container and the payloads inside it:

| Module                 | Asset                                            |
|------------------------|--------------------------------------------------|
| `gameassets.texture`   | textures (`TextureAsset`, `ImageFormat`)         |
| `gameassets.model`     | models with materials, skins and LODs (`ModelAsset`) |
| `gameassets.font`      | bitmap fonts (`FontAsset`)                       |
| `gameassets.sound`     | WAV sounds (`SoundAsset`)                        |
| `gameassets.level`     | compiled levels (`LevelAsset`)                   |
| `gameassets.shader`    | GLSL shaders (`ShaderAsset`)                     |

Lower-level pieces are available as well:

- `gameassets.container`: `compress`, `decompress`, `load_from_file`,
  `save_to_file`, the `Asset` record and the `AssetType` enum.
- `gameassets.binary`: `DataReader` and `DataWriter` for the little-endian
  field layout (unsigned 8- and 32-bit integers, 64-bit sizes, 32-bit floats,
  terminated strings).
- `gameassets.color`, `gameassets.vertex`, `gameassets.material`,
  `gameassets.bbox` and `gameassets.lod` for the parts of a model.
- `gameassets.ordering`: `move_back` and `move_forward` swap a list item with
  its neighbour.

## Installing

```
pip install gameassets
```

Pillow is used for importing and exporting ordinary images.

## Examples

Convert an image to a texture asset and back:

```python
from gameassets.texture import ImageFormat, TextureAsset

texture = TextureAsset.from_image("brick.png")
texture.filter = True
texture.save("brick.gtex")

loaded = TextureAsset.load("brick.gtex")
loaded.save_as_image("brick_copy.png", ImageFormat.PNG)
```

For `TextureAsset.load` and `TextureAsset.from_image`, a path that does not
exist gives the 64x64 magenta and black checkerboard of
`TextureAsset.missing()` instead of an error. Pixels are kept as integers
packed as `0xRRGGBBAA`.

Edit a font:

```python
from gameassets.font import FontAsset, char_list_for_display

font = FontAsset.load("small.gfon")
font.chars.append("A")
font.char_widths.append(6)
font.save("small.gfon")

print(char_list_for_display()[:3])   # ['! (0x21)', '" (0x22)', '# (0x23)']
```

Wrap a WAV file or a raw level, and unwrap it again:

```python
from gameassets.level import LevelAsset
from gameassets.sound import SoundAsset

SoundAsset.from_wav("jump.wav").save("jump.gsnd")
LevelAsset.from_bin("level1.bin").save("level1.gmap")

LevelAsset.load("level1.gmap").save_as_bin("level1_copy.bin")
```

Inspect and edit a model:

```python
from gameassets.model import ModelAsset

model = ModelAsset.load("crate.gmdl")
print(model.lod_count(), model.skin_count(), model.material_count())
model.add_skin()
model.lods[0].export_obj("crate_lod0.obj")
model.save("crate.gmdl")
```

Shaders: an OpenGL shader is stored as its GLSL source alone. A Vulkan
shader also stores SPIR-V, so `ShaderAsset.to_bytes` and `ShaderAsset.save`
take a `compiler`: a callable given the GLSL text and a `ShaderType` that
returns the SPIR-V words.

```python
from gameassets.shader import ShaderAsset, ShaderPlatform

shader = ShaderAsset.from_glsl("sky.frag")
shader.platform = ShaderPlatform.OPENGL
shader.save("sky.gshd")
```

Work with the container directly:

```python
from gameassets.container import AssetType, load_from_file

asset = load_from_file("brick.gtex")
print(asset.asset_type is AssetType.TEXTURE, asset.type_version)
payload = asset.reader.read_bytes(asset.reader.total_size())
```

## Errors

Failures in reading, writing or converting assets raise
`gameassets.errors.AssetError`. Its `code` attribute is an `ErrorCode` such
as `ErrorCode.INCORRECT_FORMAT` or `ErrorCode.FILE_NOT_FOUND`, and
`error_string(code)` gives the human-readable message for a code. Reading
past the end of a payload raises `EOFError`; saving a model that lacks a
skin, a LOD or a first triangle raises `ValueError`.

## What this package does not do

- It has no graphical editors and no command-line tools; it is a library only.
- It does not compile GLSL to SPIR-V. Vulkan shaders need a compiler
  supplied by the caller.
- It does not import models from formats such as OBJ, FBX or glTF. Models
  are read from and written to model assets, and a LOD can be exported as OBJ.

## Running the tests

```
pip install -e ".[test]"
pytest
```