"""Integer rasterization of lines and rectangles into grid points.

Every function yields ``(x, y)`` points in character coordinates (column,
row). Nothing here knows about canvas bounds; callers clip.
"""

from __future__ import annotations

from collections.abc import Iterator


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Yield the cells of the line from (x0, y0) to (x1, y1), both endpoints included.

    Consecutive points differ by at most one in each axis, so the path is
    8-connected.
    """
    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = _sign(x1 - x0)
    sy = _sign(y1 - y0)
    err = dx - dy

    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            return
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def centered_bounds(x: int, y: int, width: int, height: int) -> tuple[int, int, int, int]:
    """Return ``(left, top, width, height)`` of the box centered on (x, y).

    The box reaches ``width // 2`` cells either side of ``x`` (and likewise
    for rows), so an even size comes out one cell larger.
    """
    half_w = width // 2
    half_h = height // 2
    return x - half_w, y - half_h, 2 * half_w + 1, 2 * half_h + 1


def rect_area(x: int, y: int, width: int, height: int) -> Iterator[tuple[int, int]]:
    """Yield every cell inside the rectangle, row by row."""
    for row in range(y, y + height):
        for col in range(x, x + width):
            yield col, row


def rect_outline(x: int, y: int, width: int, height: int) -> Iterator[tuple[int, int]]:
    """Yield the cells on the rectangle's edge, each exactly once."""
    if width < 1 or height < 1:
        return
    x1 = x + width - 1
    y1 = y + height - 1
    for col in range(x, x1 + 1):
        yield col, y
    if y1 != y:
        for col in range(x, x1 + 1):
            yield col, y1
    for row in range(y + 1, y1):
        yield x, row
        if x1 != x:
            yield x1, row
