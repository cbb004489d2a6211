"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from bodytree.cli.commands import build_cmd, parse_cmd, preview_cmd
from bodytree.core.utils.logs import configure_logging


app = typer.Typer(name="bodytree", no_args_is_help=True, help="Convert CMS article markup into render-ready document trees")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Configure logging before any command runs."""
    configure_logging(verbose=verbose)


app.command(name="parse")(parse_cmd)
app.command(name="build")(build_cmd)
app.command(name="preview")(preview_cmd)
