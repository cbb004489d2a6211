"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from bodytree.config import Settings, load_config
from bodytree.core.export import dump_payload, render_text
from bodytree.core.models import ArticleTree
from bodytree.core.pipeline import load_article, run_extract
from bodytree.core.utils.logs import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling; applies the configured log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)
    if logging.getLogger().level > logging.DEBUG:
        configure_logging(level=settings.log_level)
    return settings


def _load(path: str, settings: Settings) -> ArticleTree:
    """Convert a single file, failing cleanly on missing input or bad frontmatter."""
    source = Path(path)
    if not source.is_file():
        _fail(f"Input file not found: {source}")
    try:
        return load_article(source, settings.featured_image_url, settings.image_key)
    except (OSError, ValueError) as e:
        _fail(f"Could not convert {source}", e)


def parse_cmd(
    path: Annotated[str, typer.Argument(help="Article file to convert")],
    featured: Annotated[Optional[str], typer.Option("--featured", help="Featured image URL to suppress")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or yaml")] = None,
    ):
    """Convert one article and print its document tree."""
    settings = _settings(overrides={"featured_image_url": featured, "output_format": fmt})
    tree = _load(path, settings)
    typer.echo(dump_payload(tree, settings.output_format), nl=False)


def build_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or yaml")] = None,
    featured: Annotated[Optional[str], typer.Option("--featured", help="Featured image URL to suppress")] = None,
    ):
    """Convert every .html/.htm file under path and write one tree per article."""
    settings = _settings(overrides={"output_dir": out, "output_format": fmt, "featured_image_url": featured})
    if not Path(path).exists():
        _fail(f"Input path not found: {path}")
    output_dir = Path(settings.output_dir)
    try:
        results = run_extract(
            path, output_dir, settings.output_format,
            settings.featured_image_url, settings.image_key,
        )
    except RuntimeError as e:
        _fail(str(e))
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Converted {len(results)} article(s) to {output_dir}/")


def preview_cmd(
    path: Annotated[str, typer.Argument(help="Article file to preview")],
    featured: Annotated[Optional[str], typer.Option("--featured", help="Featured image URL to suppress")] = None,
    ):
    """Print a plain-text rendering of one article."""
    settings = _settings(overrides={"featured_image_url": featured})
    tree = _load(path, settings)
    typer.echo(render_text(tree.blocks))
