"""SHA-256 content hashing and parse memo keys"""

import hashlib
from typing import Optional


def sha256(content: str) -> str:
    """Return hex-encoded SHA-256 hash of content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def cache_key(html: str, featured_image_url: Optional[str] = None) -> str:
    """Stable key for memoizing a parse of (html, featured_image_url).

    The two inputs are length-prefixed so ('ab', 'c') and ('a', 'bc') differ.
    """
    featured = featured_image_url or ""
    return sha256(f"{len(html)}:{html}|{featured}")
