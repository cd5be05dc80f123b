"""Centralized configuration for ascii-graphics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CanvasConfig:
    """Defaults for canvases built by the script runner and the CLI."""

    width: int = 40
    height: int = 12
    background: str = " "
    stroke: str | None = None
