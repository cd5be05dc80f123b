"""CLI entry point for ascii-graphics."""

import logging
import sys

import click

from ascii_graphics.config import CanvasConfig
from ascii_graphics.errors import CanvasError
from ascii_graphics.render import to_string
from ascii_graphics.script import run_script


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--width", "-W", "width", type=int, default=40, help="Canvas width when the script has no 'canvas' line")
@click.option("--height", "-H", "height", type=int, default=12, help="Canvas height when the script has no 'canvas' line")
@click.option("--stroke", "-s", "stroke", type=str, default=None, help="Initial stroke character")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log each drawing command to stderr")
def main(input: str | None, width: int, height: int, stroke: str | None, output: str | None, verbose: bool) -> None:
    """Render an ASCII drawing script to text."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    cfg = CanvasConfig(width=width, height=height, stroke=stroke)
    try:
        canvas = run_script(text, cfg)
    except CanvasError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    rendered = to_string(canvas)

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
