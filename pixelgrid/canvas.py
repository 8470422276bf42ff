# pixelgrid/canvas.py
# -*- coding: utf-8 -*-

import logging
from contextlib import contextmanager

from PyQt5.QtWidgets import QApplication, QWidget
from PyQt5.QtCore import Qt, QPoint, QRectF, QLineF
from PyQt5.QtGui import QPainter, QColor, QPen, QImage

from .core import GridImageStore
from .session import PaintSession, PointerEvent, ColorSelect, DEFAULT_COLOR

logger = logging.getLogger(__name__)


class RasterSurface:
    """Surface de dessin adossée à un QImage.

    Le rendu se fait dans le QImage entre frame() et sa fin ; le widget
    n'a plus qu'à le recopier dans son paintEvent.
    """

    def __init__(self, width: int, height: int, origin=None, on_frame=None):
        self.image = QImage(width, height, QImage.Format_RGB32)
        self.image.fill(Qt.white)
        self._origin = origin
        self._on_frame = on_frame
        self._painter = None

    @contextmanager
    def frame(self):
        self._painter = QPainter(self.image)
        try:
            yield self
        finally:
            self._painter.end()
            self._painter = None
        if self._on_frame is not None:
            self._on_frame()

    def _active(self) -> QPainter:
        if self._painter is None:
            raise RuntimeError("RasterSurface painted outside of frame()")
        return self._painter

    def fill_rect(self, x, y, w, h, color):
        self._active().fillRect(QRectF(x, y, w, h), QColor(*color))

    def set_stroke(self, color, width):
        self._active().setPen(QPen(QColor(*color), width))

    def draw_line(self, x1, y1, x2, y2):
        self._active().drawLine(QLineF(x1, y1, x2, y2))

    def origin(self):
        if self._origin is None:
            return (0, 0)
        return self._origin()


class GridCanvas(QWidget):
    """Widget affichant la grille et traduisant la souris en coups de pinceau."""

    def __init__(
        self,
        image: GridImageStore,
        cell_size: int,
        color=DEFAULT_COLOR,
        parent=None,
    ):
        super().__init__(parent)
        px_w = image.width() * cell_size + 1
        px_h = image.height() * cell_size + 1
        self.setFixedSize(px_w, px_h)
        # les déplacements sans bouton arrivent aussi (ignorés par la session)
        self.setMouseTracking(True)

        self.surface = RasterSurface(
            px_w, px_h, origin=self._global_origin, on_frame=self.update
        )
        self.session = PaintSession(image, self.surface, cell_size, color)
        self._press_pos = None
        logger.debug("GridCanvas initialized %sx%s px", px_w, px_h)

        self.session.render()

    def _global_origin(self):
        top_left = self.mapToGlobal(QPoint(0, 0))
        return (top_left.x(), top_left.y())

    @staticmethod
    def _pointer(kind: str, event) -> PointerEvent:
        pos = event.globalPos()
        return PointerEvent(kind, pos.x(), pos.y())

    # ─── Couleur ───────────────────────────────────────────────────────
    def select_color(self, color):
        self.session.dispatch(ColorSelect(color))

    @property
    def current_color(self):
        return self.session.current_color

    # ─── Souris ────────────────────────────────────────────────────────
    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        self._press_pos = event.pos()
        self.session.dispatch(self._pointer("press", event))

    def mouseMoveEvent(self, event):
        self.session.dispatch(self._pointer("move", event))

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.LeftButton:
            super().mouseReleaseEvent(event)
            return
        self.session.dispatch(self._pointer("release", event))
        # un appui relâché sans réel déplacement compte comme un clic
        if self._press_pos is not None:
            moved = (event.pos() - self._press_pos).manhattanLength()
            if moved < QApplication.startDragDistance():
                self.session.dispatch(self._pointer("click", event))
        self._press_pos = None

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.drawImage(0, 0, self.surface.image)
        painter.end()

    def get_debug_report(self) -> str:
        return self.session.get_debug_report()
