"""Pixelgrid: un mini-éditeur de pixel art en grille (PyQt5)."""

from .core import GridImage, GridImageStore, DEFAULT_FILL
from .render import render_grid, to_grid
from .session import PaintSession, PointerEvent, ColorSelect, PRESETS

__version__ = "0.1.0"

__all__ = [
    "GridImage",
    "GridImageStore",
    "DEFAULT_FILL",
    "render_grid",
    "to_grid",
    "PaintSession",
    "PointerEvent",
    "ColorSelect",
    "PRESETS",
]
