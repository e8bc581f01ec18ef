"""A small OpenGL scene of textured cubes with a first-person camera."""

__version__ = "0.1.0"