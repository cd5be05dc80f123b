"""Public convenience API for ascii-graphics."""

from __future__ import annotations

from ascii_graphics.config import CanvasConfig
from ascii_graphics.render import to_string
from ascii_graphics.script import run_script


def render_script(src: str, width: int | None = None, height: int | None = None) -> str:
    """Run a drawing script and return the rendered canvas as text.

    Args:
        src: Drawing-script source.
        width: Canvas width when the script has no ``canvas`` command.
        height: Canvas height when the script has no ``canvas`` command.

    Returns:
        The rendered rows joined by newlines, with a trailing newline.

    Raises:
        ScriptError: If the script is malformed.
        InvalidDimension: If the resulting canvas size is not positive.
    """
    cfg = CanvasConfig()
    if width is not None:
        cfg.width = width
    if height is not None:
        cfg.height = height
    return to_string(run_script(src, cfg))
