"""Unit tests for core/utils/tags.py"""

from bodytree.core.utils.tags import plain_text, strip_tags


def test_strip_tags_keeps_entities():
    """strip_tags removes markup but does not decode."""
    assert strip_tags("<b>a &amp; b</b>") == "a &amp; b"


def test_plain_text_strips_then_decodes():
    """Encoded markup survives as literal text because stripping runs first."""
    assert plain_text("<p>&lt;em&gt;</p>") == "<em>"


def test_whitespace_preserved():
    assert plain_text("  a <br> b  ") == "  a  b  "
