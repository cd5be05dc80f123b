"""Tests for ascii_graphics.animate — the frame loop."""

import io

import pytest

from ascii_graphics.animate import Animation, run
from ascii_graphics.canvas import create


def _counter(limit):
    def update(canvas, frame):
        if frame >= limit:
            return False
        canvas.background(" ").text(str(frame), 0, 0)
        return True

    return update


class TestRun:
    def test_stops_when_update_returns_false(self):
        out = io.StringIO()
        sleeps = []
        frames = run(create(2, 1), _counter(3), fps=10, clear=False, sleep=sleeps.append, stream=out)
        assert frames == 3
        assert out.getvalue() == "0 \n1 \n2 \n"
        assert sleeps == pytest.approx([0.1, 0.1, 0.1])

    def test_max_frames(self):
        out = io.StringIO()
        frames = run(create(3, 1), _counter(100), fps=5, clear=False, max_frames=2, sleep=lambda s: None, stream=out)
        assert frames == 2
        assert out.getvalue().splitlines() == ["0  ", "1  "]

    def test_update_receives_canvas(self):
        canvas = create(2, 2)
        seen = []

        def update(c, frame):
            seen.append((c, frame))
            return frame < 1

        run(canvas, update, fps=1, clear=False, sleep=lambda s: None, stream=io.StringIO())
        assert seen == [(canvas, 0), (canvas, 1)]

    def test_custom_stream_gets_rows_only(self):
        out = io.StringIO()
        run(create(1, 1), _counter(1), fps=1, sleep=lambda s: None, stream=out)
        assert out.getvalue() == "0\n"

    def test_clear_skipped_for_custom_stream(self, monkeypatch):
        cleared = []
        monkeypatch.setattr("click.clear", lambda: cleared.append(True))
        run(create(1, 1), _counter(2), fps=1, sleep=lambda s: None, stream=io.StringIO())
        assert cleared == []

    def test_clear_before_each_stdout_frame(self, monkeypatch, capsys):
        cleared = []
        monkeypatch.setattr("click.clear", lambda: cleared.append(True))
        run(create(1, 1), _counter(2), fps=1, sleep=lambda s: None)
        assert cleared == [True, True]
        assert capsys.readouterr().out == "0\n1\n"

    @pytest.mark.parametrize("fps", [0, -5])
    def test_invalid_fps(self, fps):
        with pytest.raises(ValueError):
            run(create(1, 1), _counter(1), fps=fps)


class TestAnimation:
    def test_without_update_runs_no_frames(self):
        assert Animation(create(2, 2)).run(30) == 0

    def test_set_update(self):
        anim = Animation(create(2, 1))
        anim.set_update(_counter(2))
        out = io.StringIO()
        assert anim.run(60, clear=False, sleep=lambda s: None, stream=out) == 2
        assert anim.canvas.render() == ["1 "]
