"""Raycasting maze explorer for .cub scene files."""

__version__ = "0.1.0"
__all__ = ["app", "minimap", "player", "raycast", "scene", "textio", "textures"]