"""A small 3D game engine: scenes, layers, entities, a first-person player and a pygame software renderer."""

__version__ = "0.1.0"