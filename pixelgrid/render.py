# pixelgrid/render.py
"""
Rendu complet de la grille sur une surface de dessin.

La surface est fournie par l'hôte (QImage dans l'application, enregistreur
dans les tests) ; ce module ne dépend d'aucun widget.
"""

import math
from typing import ContextManager, Protocol, Sequence, Tuple

from .core import GridImageStore

GRID_LINE_COLOR = (0, 0, 0)
GRID_LINE_WIDTH = 1


class Surface(Protocol):
    def fill_rect(self, x: float, y: float, w: float, h: float,
                  color: Sequence[int]) -> None: ...

    def set_stroke(self, color: Sequence[int], width: float) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def origin(self) -> Tuple[float, float]: ...

    def frame(self) -> ContextManager: ...


def render_grid(image: GridImageStore, surface: Surface, cell_size: int):
    """Redessine toutes les cellules puis les lignes de la grille."""
    width = image.width()
    height = image.height()
    cells = image.cells()

    with surface.frame():
        for x in range(width):
            for y in range(height):
                index = (y * width + x) * 3
                color = (cells[index], cells[index + 1], cells[index + 2])
                surface.fill_rect(
                    x * cell_size, y * cell_size, cell_size, cell_size, color
                )

        surface.set_stroke(GRID_LINE_COLOR, GRID_LINE_WIDTH)
        # verticales
        for x in range(width + 1):
            surface.draw_line(
                x * cell_size + 0.5, 0, x * cell_size + 0.5, height * cell_size
            )
        # horizontales
        for y in range(height + 1):
            surface.draw_line(
                0, y * cell_size + 0.5, width * cell_size, y * cell_size + 0.5
            )


def to_grid(client_x: float, client_y: float, origin: Tuple[float, float],
            cell_size: int) -> Tuple[int, int]:
    """Convertit une position écran en coordonnées de cellule."""
    ox, oy = origin
    return (
        int(math.floor((client_x - ox) / cell_size)),
        int(math.floor((client_y - oy) / cell_size)),
    )
