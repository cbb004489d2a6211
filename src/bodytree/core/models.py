"""Document tree models: inline runs, block nodes, and article containers"""

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Node(BaseModel):
    """Immutable base for every node in the document tree."""
    model_config = ConfigDict(frozen=True)


# --- inline runs ---

class TextRun(_Node):
    kind: Literal["text"] = "text"
    value: str


class BoldRun(_Node):
    kind: Literal["bold"] = "bold"
    value: str


class ItalicRun(_Node):
    kind: Literal["italic"] = "italic"
    value: str


class LinkRun(_Node):
    kind: Literal["link"] = "link"
    value: str
    href: str = ""                  # empty when the anchor has no href


class CodeRun(_Node):
    kind: Literal["code"] = "code"
    value: str


InlineRun = Annotated[
    Union[TextRun, BoldRun, ItalicRun, LinkRun, CodeRun],
    Field(discriminator="kind"),
]


# --- block nodes ---

class Paragraph(_Node):
    kind: Literal["paragraph"] = "paragraph"
    runs: tuple[InlineRun, ...]


class Heading(_Node):
    kind: Literal["heading"] = "heading"
    level: Literal[1, 2, 3, 4]      # h4-h6 share the smallest tier
    runs: tuple[InlineRun, ...]


class Blockquote(_Node):
    kind: Literal["blockquote"] = "blockquote"
    text: str


class ListBlock(_Node):
    kind: Literal["list"] = "list"
    ordered: bool
    items: tuple[str, ...]


class CodeBlock(_Node):
    kind: Literal["code_block"] = "code_block"
    text: str


class Image(_Node):
    kind: Literal["image"] = "image"
    src: str
    alt: Optional[str] = None


class Rule(_Node):
    kind: Literal["rule"] = "rule"


class Spacer(_Node):
    kind: Literal["spacer"] = "spacer"


class PlainText(_Node):
    """Loose text found between recognized blocks."""
    kind: Literal["plain_text"] = "plain_text"
    text: str


BlockNode = Annotated[
    Union[Paragraph, Heading, Blockquote, ListBlock, CodeBlock, Image, Rule, Spacer, PlainText],
    Field(discriminator="kind"),
]


# --- article containers ---

@dataclass
class ParsedArticle:
    """Internal file-level parse result; not serialized."""
    path:        Path
    slug:        str
    raw:         str               # full file content (includes frontmatter)
    html:        str               # body only (frontmatter stripped)
    frontmatter: dict[str, Any]
    hash:        str               # sha256 of raw


class ArticleTree(BaseModel):
    """Public output contract: one converted article body plus its identity."""
    slug: str
    path: str
    hash: str                       # memo key of the (html, featured_image) pair
    featured_image: Optional[str] = None
    frontmatter: dict[str, Any] = {}
    blocks: list[BlockNode]
