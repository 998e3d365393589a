[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameassets"
version = "0.0.1"
description = "Read, write and convert compressed GAME asset files: textures, models, fonts, sounds, levels and shaders"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["game", "assets", "texture", "model", "font", "shader", "level", "sound"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["gameassets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
