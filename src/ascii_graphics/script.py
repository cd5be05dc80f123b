"""Drawing scripts — a line-oriented command language for building canvases.

One command per line. A line whose first token starts with ``#`` is a
comment. Later on the line, a bare token starting with ``#`` begins a
trailing comment unless the whole line reads as a valid command with it as
an argument, so ``border # = !`` draws with ``#`` corners while
``no_fill  # done`` ignores the note. Quote ``'#'`` to be explicit.
Arguments are separated by whitespace and may be quoted with ``'`` or ``"``
(a backslash escapes the next character inside quotes)::

    canvas 10 10
    background ' '
    border + - |
    stroke 0
    line 2 6 6 2
    text hello 2 8

``canvas <w> <h>`` is optional and, when present, must come first.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from ascii_graphics.border import full_settings, settings
from ascii_graphics.canvas import Canvas, create
from ascii_graphics.config import CanvasConfig
from ascii_graphics.errors import CanvasError, ScriptError

_LOG = logging.getLogger(__name__)

# ─── Command table ───────────────────────────────────────────────────────────

# Each command maps to the argument shapes it accepts, one tuple per arity.
_SIGNATURES: dict[str, tuple[tuple[str, ...], ...]] = {
    "canvas": (("int", "int"),),
    "background": (("char",),),
    "border": ((), ("char",) * 3, ("char",) * 5),
    "solid_border": (("char",),),
    "stroke": (("char",),),
    "no_stroke": ((),),
    "fill": (("char",),),
    "no_fill": ((),),
    "line": (("int",) * 4,),
    "rect": (("int",) * 4,),
    "text": (("str", "int", "int"),),
}

_INT_RE = re.compile(r"[+-]?\d+")
_WHITESPACE_RE = re.compile(r"[ \t]+")
_BARE_RE = re.compile(r"[^\s'\"]+")
_NEWLINE_RE = re.compile(r"\r\n|\n|\r")


@dataclass
class Command:
    """A single parsed script command with converted arguments."""

    name: str
    args: tuple[str | int, ...]
    line: int


@dataclass
class Script:
    """A parsed drawing script."""

    size: tuple[int, int] | None = None
    commands: list[Command] = field(default_factory=list)


# ─── Tokenizer ───────────────────────────────────────────────────────────────


@dataclass
class _LineParser:
    """Cursor over a single script line.

    ``comment_at`` is the index of the first bare token starting with ``#``;
    ``literal_ok`` is False when the text after it does not tokenize.
    """

    src: str
    line: int
    pos: int = 0
    comment_at: int | None = None
    literal_ok: bool = True

    def skip_ws(self) -> None:
        m = _WHITESPACE_RE.match(self.src, self.pos)
        if m:
            self.pos = m.end()

    def read_quoted(self) -> str:
        quote = self.src[self.pos]
        self.pos += 1
        out: list[str] = []
        while self.pos < len(self.src):
            ch = self.src[self.pos]
            if ch == "\\" and self.pos + 1 < len(self.src):
                out.append(self.src[self.pos + 1])
                self.pos += 2
                continue
            if ch == quote:
                self.pos += 1
                return "".join(out)
            out.append(ch)
            self.pos += 1
        raise ScriptError(f"unterminated {quote} quote", self.line)

    def read_token(self) -> str:
        if self.src[self.pos] in "'\"":
            return self.read_quoted()
        m = _BARE_RE.match(self.src, self.pos)
        if m is None:
            raise ScriptError(f"unexpected character {self.src[self.pos]!r}", self.line)
        self.pos = m.end()
        return m.group(0)

    def tokens(self) -> list[str]:
        out: list[str] = []
        while True:
            self.skip_ws()
            if self.pos >= len(self.src):
                return out
            if self.comment_at is None and self.src[self.pos] == "#":
                self.comment_at = len(out)
            try:
                out.append(self.read_token())
            except ScriptError:
                if self.comment_at is None:
                    raise
                self.literal_ok = False
                return out


# ─── Parsing ─────────────────────────────────────────────────────────────────


def _convert(kind: str, token: str, line: int) -> str | int:
    if kind == "int":
        if not _INT_RE.fullmatch(token):
            raise ScriptError(f"expected an integer, got {token!r}", line)
        return int(token)
    if kind == "char" and len(token) != 1:
        raise ScriptError(f"expected a single character, got {token!r}", line)
    return token


def _parse_command(tokens: list[str], line: int) -> Command:
    name, raw = tokens[0], tokens[1:]
    shapes = _SIGNATURES.get(name)
    if shapes is None:
        raise ScriptError(f"unknown command {name!r}", line)
    for shape in shapes:
        if len(shape) == len(raw):
            args = tuple(_convert(kind, tok, line) for kind, tok in zip(shape, raw))
            return Command(name=name, args=args, line=line)
    counts = " or ".join(str(len(s)) for s in shapes)
    raise ScriptError(f"{name} takes {counts} argument(s), got {len(raw)}", line)


def _parse_line(text: str, line: int) -> Command | None:
    lp = _LineParser(text, line)
    tokens = lp.tokens()
    if not tokens or lp.comment_at == 0:
        return None
    if lp.comment_at is None:
        return _parse_command(tokens, line)
    # A bare "#" is an argument when the whole line reads as a valid command.
    if lp.literal_ok:
        try:
            return _parse_command(tokens, line)
        except ScriptError:
            pass
    return _parse_command(tokens[: lp.comment_at], line)


def parse_script(src: str) -> Script:
    """Parse drawing-script source into a Script.

    Raises:
        ScriptError: On unknown commands, wrong argument counts, bad values,
            unterminated quotes or a misplaced ``canvas`` command.
    """
    script = Script()
    for lineno, text in enumerate(_NEWLINE_RE.split(src), start=1):
        cmd = _parse_line(text, lineno)
        if cmd is None:
            continue
        if cmd.name == "canvas":
            if script.size is not None or script.commands:
                raise ScriptError("canvas must be the first command", lineno)
            width, height = cmd.args
            script.size = (int(width), int(height))
            continue
        script.commands.append(cmd)
    return script


# ─── Execution ───────────────────────────────────────────────────────────────


def _dispatch(canvas: Canvas, cmd: Command) -> None:
    if cmd.name == "border":
        if len(cmd.args) == 3:
            canvas.border(settings(*cmd.args))
        elif len(cmd.args) == 5:
            canvas.border(full_settings(*cmd.args))
        else:
            canvas.border()
        return
    getattr(canvas, cmd.name)(*cmd.args)


def apply(script: Script, canvas: Canvas) -> Canvas:
    """Run the script's commands on ``canvas`` in order."""
    for cmd in script.commands:
        _LOG.debug("line %d: %s %r", cmd.line, cmd.name, cmd.args)
        try:
            _dispatch(canvas, cmd)
        except CanvasError as e:
            raise ScriptError(str(e), cmd.line) from e
    return canvas


def run_script(src: str, config: CanvasConfig | None = None) -> Canvas:
    """Parse ``src``, build a canvas and draw the script onto it.

    The canvas size comes from the script's ``canvas`` command, falling back
    to ``config``.
    """
    cfg = config if config is not None else CanvasConfig()
    script = parse_script(src)
    width, height = script.size if script.size is not None else (cfg.width, cfg.height)
    canvas = create(width, height, cfg.background)
    if cfg.stroke is not None:
        canvas.stroke(cfg.stroke)
    return apply(script, canvas)
