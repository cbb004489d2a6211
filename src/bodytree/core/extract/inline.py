"""Inline run parsing for block content (strong/b, em/i, a, code)"""

import re

from bodytree.core.models import BoldRun, CodeRun, InlineRun, ItalicRun, LinkRun, TextRun
from bodytree.core.utils.attributes import parse_attributes
from bodytree.core.utils.entities import decode_entities
from bodytree.core.utils.tags import plain_text


# Lazy up to the close of the same tag name; inline tags are assumed not to nest.
INLINE_RE = re.compile(
    r'<(strong|b|em|i|a|code)\b([^>]*)>(.*?)</\1\s*>',
    re.IGNORECASE | re.DOTALL,
)

RUN_TYPES: dict[str, type] = {
    'strong': BoldRun,
    'b':      BoldRun,
    'em':     ItalicRun,
    'i':      ItalicRun,
    'code':   CodeRun,
}


def _text_run(segment: str) -> list[InlineRun]:
    """Plain segment around matches; empty text yields no run.

    Tags are stripped from every segment, including the one before a match,
    not only the trailing text after the last match.
    """
    value = plain_text(segment)
    return [TextRun(value=value)] if value else []


def _tagged_run(tag: str, attrs: str, inner: str) -> list[InlineRun]:
    """Build one formatted run; nested markup collapses into its plain text."""
    value = plain_text(inner)
    if not value:
        return []
    if tag == 'a':
        href = parse_attributes(attrs).get('href', '')
        return [LinkRun(value=value, href=decode_entities(href))]
    return [RUN_TYPES[tag](value=value)]


def parse_inline(content: str) -> list[InlineRun]:
    """Split raw block content into ordered inline runs.

    Text around matches keeps its internal whitespace. Any markup left in a
    text segment (unsupported tags, unmatched opens) is stripped before
    decoding, so no run ever carries raw tags.
    """
    runs: list[InlineRun] = []
    last = 0
    for m in INLINE_RE.finditer(content):
        runs.extend(_text_run(content[last:m.start()]))
        runs.extend(_tagged_run(m.group(1).lower(), m.group(2), m.group(3)))
        last = m.end()
    runs.extend(_text_run(content[last:]))
    return runs
