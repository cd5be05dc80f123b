"""ascii-graphics: draw lines, borders, rectangles and text on a character grid.

Quick example::

    from ascii_graphics import create, settings

    (
        create(10, 10)
        .background(" ")
        .border(settings("+", "-", "|"))
        .stroke("0")
        .line(2, 6, 6, 2)
        .text("hello", 2, 8)
        .print()
    )
"""

from ascii_graphics.animate import Animation
from ascii_graphics.api import render_script
from ascii_graphics.border import BorderSettings, full_settings, settings
from ascii_graphics.canvas import Canvas, create
from ascii_graphics.errors import (
    CanvasError,
    CanvasTooSmall,
    InvalidCharacter,
    InvalidDimension,
    ScriptError,
)
from ascii_graphics.render import print_canvas, render, to_string

__all__ = [
    "Animation",
    "BorderSettings",
    "Canvas",
    "CanvasError",
    "CanvasTooSmall",
    "InvalidCharacter",
    "InvalidDimension",
    "ScriptError",
    "create",
    "full_settings",
    "print_canvas",
    "render",
    "render_script",
    "settings",
    "to_string",
]
