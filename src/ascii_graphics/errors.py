"""Exception types raised by ascii-graphics."""

from __future__ import annotations


class CanvasError(ValueError):
    """Base class for every error raised by the canvas and its helpers."""


class InvalidDimension(CanvasError):
    """A canvas was requested with a width or height below 1."""

    def __init__(self, width: object, height: object) -> None:
        super().__init__(f"canvas dimensions must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height


class CanvasTooSmall(CanvasError):
    """A border was requested on a canvas narrower or shorter than 2 cells."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"a border needs at least a 2x2 canvas, got {width}x{height}")
        self.width = width
        self.height = height


class InvalidCharacter(CanvasError):
    """A drawing character was not a one-character string."""

    def __init__(self, role: str, value: object) -> None:
        super().__init__(f"{role} must be a single character, got {value!r}")
        self.role = role
        self.value = value


class ScriptError(CanvasError):
    """A drawing script could not be parsed or applied."""

    def __init__(self, message: str, line: int | None = None) -> None:
        prefix = f"line {line}: " if line is not None else ""
        super().__init__(f"{prefix}{message}")
        self.line = line


class InvalidCoordinate(CanvasError):
    """A drawing coordinate or size was not an integer."""

    def __init__(self, name: str, value: object) -> None:
        super().__init__(f"{name} must be an integer, got {value!r}")
        self.name = name
        self.value = value
