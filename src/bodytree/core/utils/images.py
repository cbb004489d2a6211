"""Featured image deduplication"""

import re
from typing import Optional


SCHEME_RE = re.compile(r'^https?://')


def normalize_url(url: str) -> str:
    """Drop the query string and a leading http(s) scheme for comparison only."""
    return SCHEME_RE.sub('', url.split('?', 1)[0])


def is_featured(url: str, featured_url: Optional[str]) -> bool:
    """True when url is the image the caller already displays.

    Applied to every image in a document, not just the first match.
    """
    if not featured_url or not url:
        return False
    return normalize_url(url) == normalize_url(featured_url)
