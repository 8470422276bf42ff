import os
from contextlib import contextmanager

import pytest

# Qt widgets are exercised without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pixelgrid.core import GridImage
from pixelgrid.session import PaintSession


class RecordingSurface:
    """Surface that records every drawing call instead of painting."""

    def __init__(self, origin=(0, 0)):
        self._origin = origin
        self.ops = []
        self.frames = 0

    @contextmanager
    def frame(self):
        self.ops = []
        yield self
        self.frames += 1

    def fill_rect(self, x, y, w, h, color):
        self.ops.append(("fill", x, y, w, h, tuple(color)))

    def set_stroke(self, color, width):
        self.ops.append(("stroke", tuple(color), width))

    def draw_line(self, x1, y1, x2, y2):
        self.ops.append(("line", x1, y1, x2, y2))

    def origin(self):
        return self._origin

    def count(self, kind):
        return sum(1 for op in self.ops if op[0] == kind)


@pytest.fixture
def surface():
    return RecordingSurface(origin=(100, 40))


@pytest.fixture
def image():
    return GridImage(10, 10)


@pytest.fixture
def session(image, surface):
    s = PaintSession(image, surface, cell_size=50)
    s.render()
    return s


@pytest.fixture(scope="session")
def qapp():
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app
