"""Read and write GAME engine asset files: the compressed container and texture, model, font, sound, level and shader payloads."""

__version__ = "0.0.1"