"""Convert CMS markup, or a ParsedArticle, into a document tree"""

from typing import Optional

from bodytree.core.extract.blocks import scan_blocks
from bodytree.core.models import ArticleTree, BlockNode, ParsedArticle
from bodytree.core.utils.hashing import cache_key


DEFAULT_IMAGE_KEY = 'featured_image'


def parse_html(html: str, featured_image_url: Optional[str] = None) -> list[BlockNode]:
    """Pure entry point: same (html, featured_image_url) always yields an equal tree."""
    if not html:
        return []
    return scan_blocks(html, featured_image_url)


def _featured_from(parsed: ParsedArticle, override: Optional[str], image_key: str) -> Optional[str]:
    """Explicit override beats the frontmatter value."""
    if override:
        return override
    value = parsed.frontmatter.get(image_key)
    return value if isinstance(value, str) and value else None


def extract_article(
    parsed: ParsedArticle,
    featured_image_url: Optional[str] = None,
    image_key: str = DEFAULT_IMAGE_KEY,
    ) -> ArticleTree:
    """Build the ArticleTree for one parsed file."""
    featured = _featured_from(parsed, featured_image_url, image_key)
    return ArticleTree(
        slug=parsed.slug,
        path=str(parsed.path),
        hash=cache_key(parsed.html, featured),
        featured_image=featured,
        frontmatter=parsed.frontmatter,
        blocks=parse_html(parsed.html, featured),
    )
