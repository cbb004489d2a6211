"""Top-level block scanning and per-tag dispatch"""

import logging
import re
from typing import Callable, Optional

from bodytree.core.extract.inline import parse_inline
from bodytree.core.models import (
    BlockNode,
    Blockquote,
    CodeBlock,
    Heading,
    Image,
    ListBlock,
    Paragraph,
    PlainText,
    Rule,
    Spacer,
    TextRun,
)
from bodytree.core.utils.attributes import parse_attributes
from bodytree.core.utils.entities import decode_entities
from bodytree.core.utils.images import is_featured
from bodytree.core.utils.tags import plain_text


logger = logging.getLogger(__name__)

# Paired tags match lazily up to the close of the same name (no same-type nesting);
# img/hr/br are void. Groups: 1 tag, 2 attrs, 3 content | 4 void tag, 5 attrs.
BLOCK_RE = re.compile(
    r'<(p|h[1-6]|div|blockquote|ul|ol|li|pre|figure|figcaption)\b([^>]*)>(.*?)</\1\s*>'
    r'|<(img|hr|br)\b([^>]*)>',
    re.IGNORECASE | re.DOTALL,
)
IMG_RE = re.compile(r'<img\b([^>]*)>', re.IGNORECASE)
LI_RE = re.compile(r'<li\b[^>]*>(.*?)</li\s*>', re.IGNORECASE | re.DOTALL)
FIGCAPTION_RE = re.compile(r'<figcaption\b[^>]*>(.*?)</figcaption\s*>', re.IGNORECASE | re.DOTALL)

MAX_HEADING_LEVEL = 4

Handler = Callable[[str, str, str, Optional[str]], list[BlockNode]]


def _has_text(content: str) -> bool:
    return bool(plain_text(content).strip())


def _image(attrs: str, featured: Optional[str], caption: Optional[str] = None) -> Optional[Image]:
    """Image node for an <img> attribute string, or None if src is missing or featured."""
    parsed = parse_attributes(attrs)
    src = decode_entities(parsed.get('src', '')).strip()
    if not src:
        return None
    if is_featured(src, featured):
        logger.debug("Suppressed featured image %s", src)
        return None
    alt = caption or decode_entities(parsed.get('alt', '')).strip() or None
    return Image(src=src, alt=alt)


def _paragraph(tag: str, attrs: str, content: str, featured: Optional[str]) -> list[BlockNode]:
    """Images first (in source order), then the text with image tags removed."""
    blocks: list[BlockNode] = [img for m in IMG_RE.finditer(content) if (img := _image(m.group(1), featured)) is not None]
    clean = IMG_RE.sub('', content)
    if _has_text(clean):
        runs = parse_inline(clean)
        if runs:
            blocks.append(Paragraph(runs=tuple(runs)))
    return blocks


def _heading(tag: str, attrs: str, content: str, featured: Optional[str]) -> list[BlockNode]:
    """h1-h3 keep their level; h4-h6 collapse to level 4."""
    runs = parse_inline(content) if _has_text(content) else []
    if not runs:
        return []
    return [Heading(level=min(int(tag[1]), MAX_HEADING_LEVEL), runs=tuple(runs))]


def _blockquote(tag: str, attrs: str, content: str, featured: Optional[str]) -> list[BlockNode]:
    # inline formatting inside quotes is dropped
    text = plain_text(content)
    return [Blockquote(text=text)] if text.strip() else []


def _list(tag: str, attrs: str, content: str, featured: Optional[str]) -> list[BlockNode]:
    items = tuple(
        text for text in (plain_text(m.group(1)).strip() for m in LI_RE.finditer(content)) if text
    )
    return [ListBlock(ordered=tag == 'ol', items=items)] if items else []


def _list_item(tag: str, attrs: str, content: str, featured: Optional[str]) -> list[BlockNode]:
    """A stray <li> outside ul/ol becomes a one-item unordered list."""
    text = plain_text(content).strip()
    return [ListBlock(ordered=False, items=(text,))] if text else []


def _pre(tag: str, attrs: str, content: str, featured: Optional[str]) -> list[BlockNode]:
    text = plain_text(content)
    return [CodeBlock(text=text)] if text.strip() else []


def _figure(tag: str, attrs: str, content: str, featured: Optional[str]) -> list[BlockNode]:
    """First <img> with a src, captioned by <figcaption> or its own alt."""
    img_attrs = next((m.group(1) for m in IMG_RE.finditer(content) if 'src' in parse_attributes(m.group(1))), None)
    if img_attrs is None:
        return []
    cap = FIGCAPTION_RE.search(content)
    caption = plain_text(cap.group(1)).strip() if cap else None
    image = _image(img_attrs, featured, caption=caption or None)
    return [image] if image is not None else []


def _text_block(tag: str, attrs: str, content: str, featured: Optional[str]) -> list[BlockNode]:
    """div and stray figcaption: one plain Text run, inline formatting not parsed."""
    text = plain_text(content).strip()
    return [Paragraph(runs=(TextRun(value=text),))] if text else []


def _img(tag: str, attrs: str, content: str, featured: Optional[str]) -> list[BlockNode]:
    image = _image(attrs, featured)
    return [image] if image is not None else []


def _rule(tag: str, attrs: str, content: str, featured: Optional[str]) -> list[BlockNode]:
    return [Rule()]


def _spacer(tag: str, attrs: str, content: str, featured: Optional[str]) -> list[BlockNode]:
    return [Spacer()]


BLOCK_HANDLERS: dict[str, Handler] = {
    'p':          _paragraph,
    'h1':         _heading,
    'h2':         _heading,
    'h3':         _heading,
    'h4':         _heading,
    'h5':         _heading,
    'h6':         _heading,
    'blockquote': _blockquote,
    'ul':         _list,
    'ol':         _list,
    'li':         _list_item,
    'pre':        _pre,
    'figure':     _figure,
    'figcaption': _text_block,
    'div':        _text_block,
    'img':        _img,
    'hr':         _rule,
    'br':         _spacer,
}


def _loose_text(segment: str) -> list[BlockNode]:
    """Text between block matches; markup-only gaps yield nothing."""
    text = plain_text(segment).strip()
    return [PlainText(text=text)] if text else []


def scan_blocks(html: str, featured_image_url: Optional[str] = None) -> list[BlockNode]:
    """Convert top-level markup into an ordered list of block nodes.

    Every character lands either in a block match or in a gap between
    matches; gaps with text become PlainText. Unterminated tags fail the
    block match and fall through to the gap path. Never raises.
    """
    blocks: list[BlockNode] = []
    last = 0
    for m in BLOCK_RE.finditer(html):
        blocks.extend(_loose_text(html[last:m.start()]))
        if m.group(1):
            tag, attrs, content = m.group(1).lower(), m.group(2), m.group(3)
        else:
            tag, attrs, content = m.group(4).lower(), m.group(5), ''
        blocks.extend(BLOCK_HANDLERS[tag](tag, attrs, content, featured_image_url))
        last = m.end()
    blocks.extend(_loose_text(html[last:]))
    logger.debug("Scanned %d chars into %d blocks", len(html), len(blocks))
    return blocks
