"""Raycasting first-person zombie shooter played on maps from .cub files."""

__version__ = "0.1.0"
__all__ = ["__version__"]