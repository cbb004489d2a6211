"""Integration test for the discover -> parse -> convert -> write pipeline.

Runs the pipeline against the canonical article below and asserts the
stable output. Read top-to-bottom as a reference for what each stage
produces with default settings.

Canonical article (launch.html)
-------------------------------
    ---
    title: Launch
    featured_image: https://cdn.example.com/launch.png
    date: 2026-01-15
    ---
    Loose intro line
    <p><img src="http://cdn.example.com/launch.png?w=600" alt="Hero"></p>
    <h1>We&rsquo;re live</h1>
    <p>Read the <a href="/notes?v=1&amp;lang=en">release notes</a> <img src="/shot.png"> now.</p>
    <figure><img src="/diagram.png"><figcaption>How it <em>works</em></figcaption></figure>
    <h5>Details</h5>
    <ul><li>Fast</li><li></li><li>Small</li></ul>
    <pre>pip install thing</pre>
    <hr>

Block layout after conversion (hero suppressed by frontmatter):
    [plain_text]  "Loose intro line"
    [heading 1]   "We're live"
    [image]       /shot.png             (precedes its paragraph's text)
    [paragraph]   text + link + text
    [image]       /diagram.png  alt="How it works"
    [heading 4]   "Details"            (h5 collapses to 4)
    [list]        ["Fast", "Small"]
    [code_block]  "pip install thing"
    [rule]
"""

import json

import pytest

from bodytree.core.pipeline import run_extract


CANONICAL_HTML = """\
---
title: Launch
featured_image: https://cdn.example.com/launch.png
date: 2026-01-15
---
Loose intro line
<p><img src="http://cdn.example.com/launch.png?w=600" alt="Hero"></p>
<h1>We&rsquo;re live</h1>
<p>Read the <a href="/notes?v=1&amp;lang=en">release notes</a> <img src="/shot.png"> now.</p>
<figure><img src="/diagram.png"><figcaption>How it <em>works</em></figcaption></figure>
<h5>Details</h5>
<ul><li>Fast</li><li></li><li>Small</li></ul>
<pre>pip install thing</pre>
<hr>
"""


@pytest.fixture(name="payload")
def payload_fixture(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "launch.html").write_text(CANONICAL_HTML)
    _, out_file = run_extract("launch.html", tmp_path / "dist")[0]
    return json.loads(out_file.read_text())


def test_identity_fields(payload):
    assert payload["slug"] == "launch"
    assert payload["path"] == "launch.html"
    assert payload["featured_image"] == "https://cdn.example.com/launch.png"
    assert payload["frontmatter"] == {
        "title": "Launch",
        "featured_image": "https://cdn.example.com/launch.png",
        "date": "2026-01-15",
    }
    assert len(payload["hash"]) == 64


def test_block_kinds(payload):
    assert [b["kind"] for b in payload["blocks"]] == [
        "plain_text", "heading", "image", "paragraph", "image",
        "heading", "list", "code_block", "rule",
    ]


def test_block_contents(payload):
    blocks = payload["blocks"]
    assert blocks[0] == {"kind": "plain_text", "text": "Loose intro line"}
    assert blocks[1] == {"kind": "heading", "level": 1, "runs": [{"kind": "text", "value": "We're live"}]}
    assert blocks[2] == {"kind": "image", "src": "/shot.png", "alt": None}
    assert blocks[3]["runs"] == [
        {"kind": "text", "value": "Read the "},
        {"kind": "link", "value": "release notes", "href": "/notes?v=1&lang=en"},
        {"kind": "text", "value": "  now."},
    ]
    assert blocks[4] == {"kind": "image", "src": "/diagram.png", "alt": "How it works"}
    assert blocks[5]["level"] == 4
    assert blocks[6] == {"kind": "list", "ordered": False, "items": ["Fast", "Small"]}
    assert blocks[7] == {"kind": "code_block", "text": "pip install thing"}


def test_no_featured_image_anywhere(payload):
    srcs = [b["src"] for b in payload["blocks"] if b["kind"] == "image"]
    assert not any("launch.png" in s for s in srcs)
