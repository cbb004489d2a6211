"""Pipeline step functions: discover, convert, and write article trees"""

import logging
from pathlib import Path
from typing import Optional

from bodytree.core.export import output_path, write_article
from bodytree.core.extract.extract import DEFAULT_IMAGE_KEY, extract_article
from bodytree.core.models import ArticleTree
from bodytree.core.parse import discover_files, parse_file


logger = logging.getLogger(__name__)


def load_article(
    path: Path,
    featured_image_url: Optional[str] = None,
    image_key: str = DEFAULT_IMAGE_KEY,
    ) -> ArticleTree:
    """Parse and convert a single file."""
    return extract_article(parse_file(path), featured_image_url, image_key)


def run_extract(
    path: str,
    output_dir: Path,
    fmt: str = 'json',
    featured_image_url: Optional[str] = None,
    image_key: str = DEFAULT_IMAGE_KEY,
    ) -> list[tuple[Path, Path]]:
    """Convert path (file or directory) and write one output per article.

    Outputs mirror each file's directory relative to path, so same-named
    files in different subdirectories never share a destination. Two
    articles resolving to the same output in one run raise RuntimeError.

    Returns (source_path, output_file) pairs.
    """
    root = Path(path)
    base = root if root.is_dir() else root.parent
    written: dict[Path, Path] = {}
    results = []
    for p in discover_files(root):
        try:
            tree = load_article(p, featured_image_url, image_key)
            rel_dir = p.relative_to(base).parent
            out_file = output_path(tree, output_dir, fmt, rel_dir)
            if out_file in written:
                raise RuntimeError(f"output {out_file} already written for {written[out_file]}")
            out_file = write_article(tree, output_dir, fmt, rel_dir)
        except Exception as e:
            raise RuntimeError(f"Failed to convert {p}: {e}") from e
        written[out_file] = p
        logger.info("Converted %s -> %s (%d blocks)", p, out_file, len(tree.blocks))
        results.append((p, out_file))
    return results
