"""Vectors, quaternions, a scene model with editing menus, colour helpers and XPM decoding."""

__version__ = "0.1.0"

__all__ = [
    "colornames",
    "menu",
    "pixel",
    "quaternion",
    "scene",
    "text",
    "vector",
    "xpm",
]