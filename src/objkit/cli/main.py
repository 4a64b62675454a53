"""objkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import logging
import sys

import click

from objkit import __version__
from objkit.codec import DecodeError, from_json, get_json
from objkit.config import ObjkitConfig
from objkit.model import Rectangle
from objkit.selector import ExpressionError, OrderOrDuplicateError, parse_selector

log = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option(
    "--log-level",
    default=ObjkitConfig.log_level,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.option("--indent", type=int, default=None, help="Indent JSON output")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Sort JSON object keys")
@click.pass_context
def cli(ctx: click.Context, log_level: str, indent: int | None, sort_keys: bool) -> None:
    """objkit - rectangles, JSON rebinding and a CSS selector builder."""
    config = ObjkitConfig(
        log_level=log_level.upper(), json_indent=indent, json_sort_keys=sort_keys
    )
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = config


@cli.command()
@click.argument("expression")
def selector(expression: str) -> None:
    """Build a selector from a builder-call EXPRESSION and print it.

    Example: objkit selector "element('a').attr('href').pseudoClass('focus')"
    """
    try:
        built = parse_selector(expression)
    except ExpressionError as exc:
        click.echo(f"Expression error: {exc}", err=True)
        sys.exit(1)
    except OrderOrDuplicateError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    log.info("Built %s", type(built).__name__)
    click.echo(built.stringify())


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def rect(config: ObjkitConfig, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rectangle = Rectangle(width=_number(width), height=_number(height))
    if as_json:
        click.echo(
            get_json(rectangle, indent=config.json_indent, sort_keys=config.json_sort_keys)
        )
    else:
        click.echo(_number(rectangle.area))


@cli.command()
@click.argument("text")
def area(text: str) -> None:
    """Decode a rectangle from JSON TEXT and print its area."""
    try:
        rectangle = from_json(Rectangle, text)
    except DecodeError as exc:
        click.echo(f"Decode error: {exc}", err=True)
        sys.exit(1)

    for name in ("width", "height"):
        size = getattr(rectangle, name)
        if isinstance(size, bool) or not isinstance(size, (int, float)):
            click.echo(f"Decode error: {name} must be a number, got {size!r}", err=True)
            sys.exit(1)
    click.echo(_number(rectangle.area))


def _number(value: float) -> float | int:
    """Drop a zero fractional part so 200.0 prints as 200."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
