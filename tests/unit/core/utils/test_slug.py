"""Unit tests for core/utils/slug.py"""

import pytest

from bodytree.core.utils.slug import slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World",       "hello-world"),
    ("My_Post  (draft)",  "my-post-draft"),
    ("--already-slug--",  "already-slug"),
])
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_slugify_fallback():
    """Text with no slug characters falls back to the default name."""
    assert slugify("!!!") == "article"
    assert slugify("", fallback="doc") == "doc"
