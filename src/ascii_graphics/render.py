"""Export a finished canvas as text rows.

``render`` is a pure read of the cell buffer. ``print_canvas`` is the only
place the library writes to a stream.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING

import click

if TYPE_CHECKING:
    from ascii_graphics.canvas import Canvas


def render(canvas: Canvas) -> list[str]:
    """Return one string per row, top to bottom, each exactly ``canvas.width`` long."""
    return ["".join(row) for row in canvas.cells]


def to_string(canvas: Canvas) -> str:
    """Join the rendered rows with newlines, ending with a trailing newline.

    Unlike box-diagram output, trailing spaces are kept so every row keeps
    the canvas width.
    """
    return "\n".join(render(canvas)) + "\n"


def print_canvas(canvas: Canvas, stream: IO[str] | None = None) -> None:
    """Write every row followed by a newline to ``stream`` (stdout by default)."""
    for line in render(canvas):
        click.echo(line, file=stream)
