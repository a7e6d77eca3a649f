"""Sprite stacking: layered paletted sprites drawn as rotating pseudo-3D objects on an in-memory canvas."""

__version__ = "1.0.0"
__all__ = ["sprite", "zx0", "palette", "canvas", "stack", "legacy", "assets", "demo"]