"""Border settings: the characters used to outline a canvas."""

from __future__ import annotations

from dataclasses import dataclass

from ascii_graphics.errors import InvalidCharacter


def check_char(role: str, value: object) -> str:
    """Return ``value`` if it is a printable one-character string, else raise InvalidCharacter."""
    if not isinstance(value, str) or len(value) != 1 or not value.isprintable():
        raise InvalidCharacter(role, value)
    return value


@dataclass(frozen=True)
class BorderSettings:
    """Characters for the four corners and each of the four edges."""

    corners: str
    top: str
    bottom: str
    left: str
    right: str

    def __post_init__(self) -> None:
        for role in ("corners", "top", "bottom", "left", "right"):
            check_char(f"border {role}", getattr(self, role))

    @property
    def horizontal(self) -> str:
        return self.top

    @property
    def vertical(self) -> str:
        return self.left

    @classmethod
    def ascii(cls) -> BorderSettings:
        return settings("+", "-", "|")

    @classmethod
    def solid(cls, c: str) -> BorderSettings:
        return settings(c, c, c)


def settings(corner: str, horizontal: str, vertical: str) -> BorderSettings:
    """Build border settings where top/bottom and left/right share a character.

    >>> settings("+", "-", "|").top
    '-'
    """
    return BorderSettings(corners=corner, top=horizontal, bottom=horizontal, left=vertical, right=vertical)


def full_settings(corners: str, top: str, bottom: str, left: str, right: str) -> BorderSettings:
    """Build border settings with a distinct character for every edge."""
    return BorderSettings(corners=corners, top=top, bottom=bottom, left=left, right=right)
