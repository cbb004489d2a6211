"""Markup stripping helpers"""

import re

from bodytree.core.utils.entities import decode_entities


TAG_RE = re.compile(r'<[^>]*>')


def strip_tags(text: str) -> str:
    """Remove every '<...>' span; entities are left encoded."""
    return TAG_RE.sub('', text)


def plain_text(text: str) -> str:
    """Strip tags, then decode entities. Whitespace is preserved."""
    return decode_entities(strip_tags(text))
