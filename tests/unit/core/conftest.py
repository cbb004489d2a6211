"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_HTML = """\
<h2>Getting started</h2>
<p><img src="https://cdn.example.com/hero.jpg?w=1200" alt="Hero"></p>
<p>Welcome to the <strong>new</strong> guide &mdash; read <a href="https://example.com/docs">the docs</a>.</p>
<ul><li>Install</li><li> </li><li>Configure</li></ul>
<blockquote>Ship it&hellip;</blockquote>
<hr>
Thanks for reading!
"""

SAMPLE_FM_HTML = """\
---
title: Test Article
slug: test-article
featured_image: https://cdn.example.com/hero.jpg
---
<p><img src="http://cdn.example.com/hero.jpg?crop=1"></p>
<p>Body content.</p>
"""


@pytest.fixture(name="sample_html")
def sample_html_fixture():
    return SAMPLE_HTML


@pytest.fixture(name="article_file")
def article_file_fixture(tmp_path):
    path = tmp_path / "article.html"
    path.write_text(SAMPLE_FM_HTML, encoding="utf-8")
    return path
