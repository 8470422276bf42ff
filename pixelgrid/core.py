# pixelgrid/core.py

from typing import Callable, Protocol, Sequence, Tuple

Color = Tuple[int, int, int]

# Remplissage initial de la grille (bleu clair)
DEFAULT_FILL: Color = (200, 200, 255)


class GridImageStore(Protocol):
    """Ce dont la boucle de rendu a besoin : dimensions, lecture, pinceau."""

    def width(self) -> int: ...

    def height(self) -> int: ...

    def cells(self) -> Sequence[int]: ...

    def brush(self, x: int, y: int, color: Sequence[int]) -> None: ...


ImageFactory = Callable[[int, int], GridImageStore]


class GridImage:
    """
    Image en grille :
    - width x height cellules RGB, stockées à plat (3 octets par cellule)
    - la seule mutation passe par brush()
    """

    def __init__(self, width: int, height: int, fill: Color = DEFAULT_FILL):
        if not isinstance(width, int) or isinstance(width, bool) or width <= 0:
            raise ValueError(f"width must be a positive integer, got {width!r}")
        if not isinstance(height, int) or isinstance(height, bool) or height <= 0:
            raise ValueError(f"height must be a positive integer, got {height!r}")
        self._width = width
        self._height = height
        self._cells = bytearray(fill) * (width * height)

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def cells(self) -> memoryview:
        """Vue en lecture seule sur le tampon courant (pas une copie)."""
        return memoryview(self._cells).toreadonly()

    def cell(self, x: int, y: int) -> Color:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"cell ({x}, {y}) outside {self._width}x{self._height}")
        i = self._index(x, y)
        r, g, b = self._cells[i:i + 3]
        return (r, g, b)

    def brush(self, x: int, y: int, color: Sequence[int]) -> None:
        """Peint la cellule (x, y). Hors de la grille : ignoré."""
        if not (0 <= x < self._width and 0 <= y < self._height):
            return
        i = self._index(x, y)
        r, g, b = color[:3]
        self._cells[i:i + 3] = bytes((r, g, b))

    def _index(self, x: int, y: int) -> int:
        return (y * self._width + x) * 3

    def __repr__(self):
        return f"GridImage({self._width}x{self._height})"
