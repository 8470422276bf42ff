"""Tests for the full repaint routine and the coordinate transform."""
import pytest

from pixelgrid.core import GridImage
from pixelgrid.render import render_grid, to_grid, GRID_LINE_COLOR
from conftest import RecordingSurface


class TestRenderGrid:
    def test_initial_render_counts(self):
        surface = RecordingSurface()
        render_grid(GridImage(10, 10), surface, 50)
        assert surface.count("fill") == 100
        assert surface.count("line") == 22
        assert surface.frames == 1

    def test_non_square_line_counts(self):
        surface = RecordingSurface()
        render_grid(GridImage(4, 2), surface, 10)
        verticals = [op for op in surface.ops if op[0] == "line" and op[1] == op[3]]
        horizontals = [op for op in surface.ops if op[0] == "line" and op[2] == op[4]]
        assert len(verticals) == 5
        assert len(horizontals) == 3

    def test_fill_position_and_color(self):
        image = GridImage(3, 3)
        image.brush(2, 1, (10, 20, 30))
        surface = RecordingSurface()
        render_grid(image, surface, 50)
        assert ("fill", 100, 50, 50, 50, (10, 20, 30)) in surface.ops

    def test_lines_are_offset_half_pixel(self):
        surface = RecordingSurface()
        render_grid(GridImage(2, 3), surface, 50)
        assert ("line", 50.5, 0, 50.5, 150) in surface.ops
        assert ("line", 0, 100.5, 100, 100.5) in surface.ops

    def test_stroke_set_before_lines(self):
        surface = RecordingSurface()
        render_grid(GridImage(2, 2), surface, 50)
        kinds = [op[0] for op in surface.ops]
        stroke_at = kinds.index("stroke")
        assert "line" not in kinds[:stroke_at]
        assert "fill" not in kinds[stroke_at:]
        assert surface.ops[stroke_at] == ("stroke", GRID_LINE_COLOR, 1)

    def test_render_is_deterministic(self):
        image = GridImage(5, 5)
        image.brush(1, 3, (1, 2, 3))
        first, second = RecordingSurface(), RecordingSurface()
        render_grid(image, first, 20)
        render_grid(image, second, 20)
        assert first.ops == second.ops


class TestToGrid:
    @pytest.mark.parametrize("k", [0, 1, 25, 49])
    def test_round_trip(self, k):
        origin = (100, 40)
        for x, y in [(0, 0), (3, 4), (9, 9)]:
            assert to_grid(100 + x * 50 + k, 40 + y * 50 + k, origin, 50) == (x, y)

    def test_left_of_origin_is_negative(self):
        assert to_grid(99, 39, (100, 40), 50) == (-1, -1)

    def test_fractional_positions(self):
        assert to_grid(149.9, 40.0, (100, 40), 50) == (0, 0)
