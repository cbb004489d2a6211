"""Unit tests for core/utils/hashing.py"""

from bodytree.core.utils.hashing import cache_key, sha256


def test_sha256_length():
    assert len(sha256("hello")) == 64


def test_cache_key_stable():
    """Identical inputs produce the same memo key."""
    assert cache_key("<p>x</p>", "a.png") == cache_key("<p>x</p>", "a.png")


def test_cache_key_depends_on_featured():
    """Changing only the featured image changes the key."""
    assert cache_key("<p>x</p>", "a.png") != cache_key("<p>x</p>", "b.png")


def test_cache_key_none_equals_empty():
    """An absent featured image and an empty one suppress nothing, so they share a key."""
    assert cache_key("<p>x</p>") == cache_key("<p>x</p>", "")


def test_cache_key_boundary_is_unambiguous():
    """Moving characters between html and featured URL changes the key."""
    assert cache_key("ab", "c") != cache_key("a", "bc")
