"""Frame loop for simple terminal animations.

An update callback mutates the canvas for each frame number and returns
``False`` to stop. After every frame the terminal is cleared and the canvas
printed.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import IO

import click

from ascii_graphics.canvas import Canvas

_LOG = logging.getLogger(__name__)

UpdateFn = Callable[[Canvas, int], bool]


def run(
    canvas: Canvas,
    update: UpdateFn,
    fps: float,
    *,
    clear: bool = True,
    max_frames: int | None = None,
    sleep: Callable[[float], object] = time.sleep,
    stream: IO[str] | None = None,
) -> int:
    """Drive ``update`` at ``fps`` frames per second; return the number of frames shown.

    The terminal is cleared before each frame only when printing to stdout.
    """
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    delay = 1.0 / fps
    frame = 0
    while max_frames is None or frame < max_frames:
        if not update(canvas, frame):
            break
        if clear and stream is None:
            click.clear()
        canvas.print(stream)
        frame += 1
        sleep(delay)
    _LOG.debug("animation stopped after %d frames", frame)
    return frame


class Animation:
    """A canvas paired with the update function that redraws it each frame."""

    def __init__(self, canvas: Canvas, update: UpdateFn | None = None) -> None:
        self.canvas = canvas
        self.update = update

    def set_update(self, update: UpdateFn) -> None:
        self.update = update

    def run(self, fps: float, **kwargs) -> int:
        # Without an update function there is nothing to draw.
        if self.update is None:
            return 0
        return run(self.canvas, self.update, fps, **kwargs)
