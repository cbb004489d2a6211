"""Slug generation for article output names"""

import re


def slugify(text: str, fallback: str = "article") -> str:
    """Convert text to a lowercase, hyphen-separated slug; fallback if nothing survives."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-') or fallback
