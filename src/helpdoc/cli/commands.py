"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from helpdoc.config import Settings, load_config
from helpdoc.core.help import locate_help
from helpdoc.core.models import BLOCK_LIST
from helpdoc.core.parse import parse
from helpdoc.render.factory import RENDERERS, make_renderer
from helpdoc.render.styled import StyledText


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging from it."""
    try:
        settings = load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _read(path: str) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        _fail(f"Cannot read {path}", e)


def _echo_styled(styled: StyledText, plain: bool) -> None:
    if plain:
        typer.echo(styled.plain)
    else:
        Console().print(styled.to_rich())


def _renderer(settings: Settings, name: str):
    try:
        return make_renderer(name, style=settings.style, preset=settings.parser_preset)
    except ValueError as e:
        _fail(str(e))


def parse_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to parse")],
    indent: Annotated[int, typer.Option("--indent", help="JSON indentation")] = 2,
    ):
    """Print the block nodes of a markdown file as JSON."""
    _settings()
    nodes = parse(_read(path))
    typer.echo(BLOCK_LIST.dump_json(nodes, indent=indent or None).decode("utf-8"))


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to render")],
    renderer: Annotated[Optional[str], typer.Option("--renderer", help=f"One of: {', '.join(RENDERERS)}")] = None,
    base_url: Annotated[Optional[str], typer.Option("--base-url", help="Base for relative links and images")] = None,
    plain: Annotated[bool, typer.Option("--plain", help="Print unstyled text")] = False,
    ):
    """Render a markdown file to the terminal."""
    settings = _settings(overrides={"renderer": renderer})
    source = _read(path)
    if base_url is None:
        base_url = Path(path).resolve().parent.as_uri() + "/"
    _echo_styled(_renderer(settings, settings.renderer).render(source, base_url), plain)


def help_cmd(
    name: Annotated[Optional[str], typer.Option("--file", help="Help file name")] = None,
    dirs: Annotated[Optional[list[str]], typer.Option("--dir", help="Directory to search; repeatable")] = None,
    plain: Annotated[bool, typer.Option("--plain", help="Print unstyled text")] = False,
    ):
    """Find the bundled help document and render it."""
    settings = _settings(overrides={"help_file": name, "help_dirs": dirs or None})
    try:
        markdown, found = locate_help(settings.help_file, settings.help_dirs)
    except OSError as e:
        _fail(f"Cannot read {settings.help_file}", e)
    base_url = found.resolve().parent.as_uri() + "/" if found else None
    _echo_styled(_renderer(settings, settings.renderer).render(markdown, base_url), plain)
