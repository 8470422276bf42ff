# pixelgrid/session.py

import logging
from dataclasses import dataclass
from typing import Sequence, Union

from .core import Color, GridImageStore
from .render import Surface, render_grid, to_grid

logger = logging.getLogger(__name__)

# Palette prédéfinie
PRESETS = {
    "red": (255, 200, 200),
    "green": (200, 255, 200),
    "blue": (200, 200, 255),
}
DEFAULT_COLOR: Color = PRESETS["green"]
DEFAULT_CELL_SIZE = 50

POINTER_KINDS = ("press", "release", "move", "click")


@dataclass(frozen=True)
class PointerEvent:
    """Pointer event in viewport (screen) coordinates."""

    kind: str
    client_x: float
    client_y: float


@dataclass(frozen=True)
class ColorSelect:
    color: Sequence[int]


def clamp_color(color: Sequence[int]) -> Color:
    r, g, b = (max(0, min(255, int(c))) for c in color[:3])
    return (r, g, b)


class PaintSession:
    """
    Etat d'une session de dessin :
    - l'image (possédée par la session)
    - la couleur courante
    - le drapeau de glisser (bouton enfoncé)

    Chaque point d'entrée va jusqu'au bout (mutation + rendu complet)
    avant de rendre la main à la boucle d'événements de l'hôte.
    """

    def __init__(
        self,
        image: GridImageStore,
        surface: Surface,
        cell_size: int = DEFAULT_CELL_SIZE,
        color: Sequence[int] = DEFAULT_COLOR,
    ):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size!r}")
        self.image = image
        self.surface = surface
        self.cell_size = cell_size
        self.current_color: Color = clamp_color(color)
        self.dragging = False
        logger.debug(
            "PaintSession initialized %sx%s cell_size=%s",
            image.width(), image.height(), cell_size,
        )

    # ─── Rendu ─────────────────────────────────────────────────────────
    def render(self):
        render_grid(self.image, self.surface, self.cell_size)

    # ─── Evénements ────────────────────────────────────────────────────
    def press(self, event: PointerEvent):
        logger.debug(f"Press at {event.client_x:.1f},{event.client_y:.1f}")
        self.dragging = True

    def release(self, event: PointerEvent):
        logger.debug(f"Release at {event.client_x:.1f},{event.client_y:.1f}")
        self.dragging = False

    def click(self, event: PointerEvent):
        self._paint_at(event)

    def move(self, event: PointerEvent):
        if not self.dragging:
            return
        self._paint_at(event)

    def select_color(self, event: ColorSelect):
        self.current_color = clamp_color(event.color)
        logger.info("Selected color %s", self.current_color)

    def dispatch(self, event: Union[PointerEvent, ColorSelect]):
        """Route un événement vers le point d'entrée correspondant."""
        if isinstance(event, ColorSelect):
            self.select_color(event)
            return
        if event.kind not in POINTER_KINDS:
            raise ValueError(f"unknown pointer event kind: {event.kind!r}")
        getattr(self, event.kind)(event)

    def _paint_at(self, event: PointerEvent):
        x, y = to_grid(
            event.client_x, event.client_y, self.surface.origin(), self.cell_size
        )
        logger.debug(f"Brush cell {x},{y} color={self.current_color}")
        self.image.brush(x, y, self.current_color)
        self.render()

    def get_debug_report(self) -> str:
        """Return a textual report about the current session state."""
        lines: list = []
        lines.append("== Image ==")
        lines.append(f"size: {self.image.width()}x{self.image.height()}")
        lines.append(f"cells: {len(self.image.cells())} channel values")
        lines.append("")
        lines.append(f"Cell size: {self.cell_size}")
        lines.append(f"Current color: {self.current_color}")
        lines.append(f"Dragging: {self.dragging}")
        lines.append(f"Surface origin: {self.surface.origin()}")
        return "\n".join(lines)
