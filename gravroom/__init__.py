"""A single-room platformer where gravity can be turned onto any face of the room."""

__version__ = "0.1.0"