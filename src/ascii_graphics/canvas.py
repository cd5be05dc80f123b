"""Canvas — fixed-size 2D character grid with chainable drawing operations.

Paint order is call order: every operation overwrites the cells it touches
(last write wins). Coordinates are integer ``(x, y)`` = (column, row) with the
origin in the top-left corner. Drawing outside the grid is clipped cell by
cell and is never an error.

``background`` overwrites the whole grid, so it only acts as a background
when it is called before any shape is drawn.
"""

from __future__ import annotations

import logging
from typing import IO

from ascii_graphics import raster
from ascii_graphics import render as _export
from ascii_graphics.border import BorderSettings, check_char
from ascii_graphics.errors import CanvasTooSmall, InvalidCharacter, InvalidCoordinate, InvalidDimension

_LOG = logging.getLogger(__name__)


def _check_dimension(width: object, height: object) -> None:
    for v in (width, height):
        if isinstance(v, bool) or not isinstance(v, int) or v < 1:
            raise InvalidDimension(width, height)


def _check_coords(**values: object) -> None:
    for name, v in values.items():
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidCoordinate(name, v)


class Canvas:
    """A grid of ``height`` rows by ``width`` columns of single characters."""

    def __init__(self, width: int, height: int, default: str = " ") -> None:
        _check_dimension(width, height)
        check_char("default character", default)
        self._width = width
        self._height = height
        self.cells: list[list[str]] = [[default] * width for _ in range(height)]
        self.background_char = default
        self.border_chars = BorderSettings.ascii()
        self.stroke_char: str | None = None
        self.fill_char: str | None = None
        _LOG.debug("created %dx%d canvas", width, height)

    @classmethod
    def from_size(cls, size: tuple[int, int]) -> Canvas:
        width, height = size
        return cls(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # ── Cell access ───────────────────────────────────────────────────────────

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self._width and 0 <= row < self._height

    def get(self, col: int, row: int) -> str:
        """Return the cell at (col, row), or the background character outside the grid."""
        if self.in_bounds(col, row):
            return self.cells[row][col]
        return self.background_char

    def set(self, col: int, row: int, c: str) -> None:
        """Write ``c`` at (col, row); silently ignored outside the grid."""
        if self.in_bounds(col, row):
            self.cells[row][col] = c

    def _check_index(self, index: tuple[int, int]) -> tuple[int, int]:
        col, row = index
        if not self.in_bounds(col, row):
            raise IndexError(
                f"index out of bounds: the size is ({self._width}, {self._height}) but got ({col}, {row})"
            )
        return col, row

    def __getitem__(self, index: tuple[int, int]) -> str:
        col, row = self._check_index(index)
        return self.cells[row][col]

    def __setitem__(self, index: tuple[int, int], c: str) -> None:
        col, row = self._check_index(index)
        self.cells[row][col] = check_char("cell value", c)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"

    def copy(self) -> Canvas:
        dup = Canvas(self._width, self._height, self.background_char)
        dup.cells = [list(row) for row in self.cells]
        dup.border_chars = self.border_chars
        dup.stroke_char = self.stroke_char
        dup.fill_char = self.fill_char
        return dup

    # ── Drawing state ─────────────────────────────────────────────────────────

    def stroke(self, c: str) -> Canvas:
        """Set the character used by ``line`` and rectangle outlines."""
        self.stroke_char = check_char("stroke character", c)
        return self

    def no_stroke(self) -> Canvas:
        self.stroke_char = None
        return self

    def fill(self, c: str) -> Canvas:
        """Set the character used to fill rectangle interiors."""
        self.fill_char = check_char("fill character", c)
        return self

    def no_fill(self) -> Canvas:
        self.fill_char = None
        return self

    # ── Drawing operations ────────────────────────────────────────────────────

    def background(self, c: str) -> Canvas:
        """Set every cell to ``c`` now, erasing anything drawn so far."""
        self.background_char = check_char("background character", c)
        for row in self.cells:
            row[:] = [c] * self._width
        return self

    def _require_border_room(self) -> None:
        if self._width < 2 or self._height < 2:
            raise CanvasTooSmall(self._width, self._height)

    def border(self, settings: BorderSettings | None = None) -> Canvas:
        """Outline the grid; ``settings`` becomes the canvas's border characters.

        Edges are drawn first and the four corners last, so corners always
        show ``settings.corners``.
        """
        self._require_border_room()
        if settings is not None:
            self.border_chars = settings
        bc = self.border_chars
        x1 = self._width - 1
        y1 = self._height - 1
        for col in range(self._width):
            self.cells[0][col] = bc.top
            self.cells[y1][col] = bc.bottom
        for row in range(self._height):
            self.cells[row][0] = bc.left
            self.cells[row][x1] = bc.right
        for col, row in ((0, 0), (x1, 0), (0, y1), (x1, y1)):
            self.cells[row][col] = bc.corners
        return self

    def solid_border(self, c: str) -> Canvas:
        """Outline the grid with a single character."""
        check_char("border character", c)
        self._require_border_room()
        for col, row in raster.rect_outline(0, 0, self._width, self._height):
            self.cells[row][col] = c
        return self

    def line(self, x0: int, y0: int, x1: int, y1: int) -> Canvas:
        """Draw a line with the stroke character; a no-op while no stroke is set."""
        _check_coords(x0=x0, y0=y0, x1=x1, y1=y1)
        c = self.stroke_char
        if c is None:
            return self
        for x, y in raster.bresenham(x0, y0, x1, y1):
            self.set(x, y, c)
        return self

    def rect(self, x: int, y: int, width: int, height: int) -> Canvas:
        """Draw a rectangle centered at (x, y).

        It spans ``x - width // 2`` to ``x + width // 2`` inclusive, and the
        same for rows, so an even size covers one extra cell. The interior is
        painted with the fill character and the outline with the stroke
        character, each only when set. A negative size draws nothing.
        """
        _check_coords(x=x, y=y, width=width, height=height)
        if width < 0 or height < 0:
            return self
        left, top, w, h = raster.centered_bounds(x, y, width, height)
        if self.fill_char is not None:
            for col, row in raster.rect_area(left, top, w, h):
                self.set(col, row, self.fill_char)
        if self.stroke_char is not None:
            for col, row in raster.rect_outline(left, top, w, h):
                self.set(col, row, self.stroke_char)
        return self

    def text(self, s: str, x: int, y: int) -> Canvas:
        """Write ``s`` left to right from (x, y). Characters off the grid are dropped.

        Raises:
            InvalidCharacter: If ``s`` holds a non-printable character such as
                a newline, which would break the one-row-per-line export.
        """
        _check_coords(x=x, y=y)
        if not isinstance(s, str) or not s.isprintable():
            raise InvalidCharacter("text", s)
        if not 0 <= y < self._height:
            return self
        row = self.cells[y]
        for i, ch in enumerate(s):
            col = x + i
            if col >= self._width:
                break
            if col >= 0:
                row[col] = ch
        return self

    def shift_left(self, n: int) -> Canvas:
        """Shift the content ``n`` columns left by swapping each cell with the one ``n`` to its right.

        Columns pushed off the left edge land on the right: ``n == 1`` rotates
        every row by one. ``n >= width`` leaves the grid unchanged.
        """
        if n < 0:
            raise ValueError(f"shift must be non-negative, got {n}")
        for row in self.cells:
            for col in range(self._width - n):
                row[col], row[col + n] = row[col + n], row[col]
        return self

    def __lshift__(self, n: int) -> Canvas:
        return self.shift_left(n)

    # ── Export ────────────────────────────────────────────────────────────────

    def render(self) -> list[str]:
        return _export.render(self)

    def to_string(self) -> str:
        return _export.to_string(self)

    def print(self, stream: IO[str] | None = None) -> Canvas:
        """Write the rows to ``stream`` (stdout by default); ends a chain."""
        _export.print_canvas(self, stream)
        return self


def create(width: int, height: int, default: str = " ") -> Canvas:
    """Create a ``width`` x ``height`` canvas with every cell set to ``default``.

    Raises:
        InvalidDimension: If width or height is below 1.
    """
    return Canvas(width, height, default)
