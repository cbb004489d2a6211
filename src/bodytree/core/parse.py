"""File discovery and frontmatter extraction for CMS article bodies"""

import re
from pathlib import Path
from typing import Any

import yaml

from bodytree.core.models import ParsedArticle
from bodytree.core.utils.hashing import sha256
from bodytree.core.utils.slug import slugify


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
HTML_EXTENSIONS = {'.html', '.htm'}


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .html/.htm files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix.lower() in HTML_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in HTML_EXTENSIONS)


def parse_file(path: Path) -> ParsedArticle:
    """Read one article file and split off its frontmatter."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    slug = frontmatter.get('slug') or slugify(path.stem)
    return ParsedArticle(
        path=path,
        slug=str(slug),
        raw=raw,
        html=body,
        frontmatter=frontmatter,
        hash=sha256(raw),
    )
