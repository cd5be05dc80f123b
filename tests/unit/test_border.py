"""Tests for ascii_graphics.border — BorderSettings construction."""

import dataclasses

import pytest

from ascii_graphics.border import BorderSettings, full_settings, settings
from ascii_graphics.errors import InvalidCharacter


class TestSettings:
    def test_three_character_form(self):
        bs = settings("+", "-", "|")
        assert bs.corners == "+"
        assert bs.top == bs.bottom == "-"
        assert bs.left == bs.right == "|"

    def test_horizontal_vertical_aliases(self):
        bs = settings("+", "=", "!")
        assert bs.horizontal == "="
        assert bs.vertical == "!"

    def test_full_settings_order(self):
        bs = full_settings("+", "-", "_", "[", "]")
        assert (bs.corners, bs.top, bs.bottom, bs.left, bs.right) == ("+", "-", "_", "[", "]")

    def test_immutable(self):
        bs = settings("+", "-", "|")
        with pytest.raises(dataclasses.FrozenInstanceError):
            bs.corners = "#"  # type: ignore[misc]

    def test_equality(self):
        assert settings("+", "-", "|") == full_settings("+", "-", "-", "|", "|")

    def test_ascii_preset(self):
        assert BorderSettings.ascii() == settings("+", "-", "|")

    def test_solid_preset(self):
        assert BorderSettings.solid("*") == settings("*", "*", "*")

    @pytest.mark.parametrize("args", [("", "-", "|"), ("+", "--", "|"), ("+", "-", 1)])
    def test_rejects_non_characters(self, args):
        with pytest.raises(InvalidCharacter):
            settings(*args)
