"""Tests for ascii_graphics.raster — Bresenham lines and rectangle point sets."""

from ascii_graphics.raster import bresenham, centered_bounds, rect_area, rect_outline


class TestBresenham:
    def test_single_point(self):
        assert list(bresenham(3, 4, 3, 4)) == [(3, 4)]

    def test_horizontal_right(self):
        assert list(bresenham(0, 0, 3, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0)]

    def test_horizontal_left(self):
        assert list(bresenham(3, 1, 0, 1)) == [(3, 1), (2, 1), (1, 1), (0, 1)]

    def test_vertical_up(self):
        assert list(bresenham(2, 3, 2, 0)) == [(2, 3), (2, 2), (2, 1), (2, 0)]

    def test_reference_anti_diagonal(self):
        assert list(bresenham(2, 6, 6, 2)) == [(2, 6), (3, 5), (4, 4), (5, 3), (6, 2)]

    def test_shallow_slope(self):
        assert list(bresenham(0, 0, 4, 2)) == [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)]

    def test_steep_slope(self):
        assert list(bresenham(0, 0, 1, 3)) == [(0, 0), (0, 1), (1, 2), (1, 3)]

    def test_point_count_is_major_axis_plus_one(self):
        pts = list(bresenham(-3, 7, 12, -1))
        assert len(pts) == 16

    def test_negative_coordinates(self):
        assert list(bresenham(-2, -2, 0, 0)) == [(-2, -2), (-1, -1), (0, 0)]


class TestRectArea:
    def test_row_major_order(self):
        assert list(rect_area(1, 2, 2, 2)) == [(1, 2), (2, 2), (1, 3), (2, 3)]

    def test_empty(self):
        assert list(rect_area(0, 0, 0, 5)) == []
        assert list(rect_area(0, 0, 5, -1)) == []


class TestRectOutline:
    def test_cells_unique(self):
        pts = list(rect_outline(0, 0, 4, 3))
        assert len(pts) == len(set(pts)) == 10

    def test_outline_excludes_interior(self):
        pts = set(rect_outline(0, 0, 3, 3))
        assert (1, 1) not in pts
        assert len(pts) == 8

    def test_single_row(self):
        assert list(rect_outline(2, 5, 3, 1)) == [(2, 5), (3, 5), (4, 5)]

    def test_single_column(self):
        assert list(rect_outline(1, 0, 1, 3)) == [(1, 0), (1, 2), (1, 1)]

    def test_one_cell(self):
        assert list(rect_outline(4, 4, 1, 1)) == [(4, 4)]

    def test_empty(self):
        assert list(rect_outline(0, 0, 0, 0)) == []


class TestCenteredBounds:
    def test_even_size_covers_one_extra_cell(self):
        assert centered_bounds(2, 2, 2, 2) == (1, 1, 3, 3)

    def test_odd_size(self):
        assert centered_bounds(5, 4, 5, 3) == (3, 3, 5, 3)

    def test_zero_size_is_single_cell(self):
        assert centered_bounds(7, 1, 0, 0) == (7, 1, 1, 1)
