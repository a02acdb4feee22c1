"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from helpdoc.cli.commands import help_cmd, parse_cmd, render_cmd


app = typer.Typer(name="helpdoc", no_args_is_help=True, help="Parse and render markdown help documents")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")] = False,
    ):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


app.command(name="parse")(parse_cmd)
app.command(name="render")(render_cmd)
app.command(name="help")(help_cmd)
