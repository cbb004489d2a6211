"""Export: serialize article trees to JSON/YAML and render a plain-text preview"""

import json
from pathlib import Path
from typing import Optional

import yaml

from bodytree.core.models import (
    ArticleTree,
    BlockNode,
    Blockquote,
    CodeBlock,
    Heading,
    Image,
    InlineRun,
    ListBlock,
    Paragraph,
    PlainText,
    Rule,
    Spacer,
)


OUTPUT_FORMATS = ('json', 'yaml')


def build_payload(tree: ArticleTree) -> dict:
    """JSON-safe dict of the tree; frontmatter dates become ISO strings."""
    return tree.model_dump(mode='json')


def dump_payload(tree: ArticleTree, fmt: str = 'json') -> str:
    """Serialize a tree as json or yaml text."""
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {fmt!r} (expected one of {', '.join(OUTPUT_FORMATS)})")
    payload = build_payload(tree)
    if fmt == 'yaml':
        return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def output_path(
    tree: ArticleTree,
    output_dir: Path,
    fmt: str = 'json',
    rel_dir: Optional[Path] = None,
    ) -> Path:
    """Destination for one tree:

      output_dir / rel_dir / tree.slug.{fmt}

    Without rel_dir a relative source path mirrors its own parent directory;
    an absolute one is written directly into output_dir.
    """
    if rel_dir is None:
        src = Path(tree.path)
        rel_dir = src.parent if not src.is_absolute() else Path()
    return output_dir / rel_dir / f"{tree.slug}.{fmt}"


def write_article(
    tree: ArticleTree,
    output_dir: Path,
    fmt: str = 'json',
    rel_dir: Optional[Path] = None,
    ) -> Path:
    """Write one tree (see output_path) and return the written path."""
    out_path = output_path(tree, output_dir, fmt, rel_dir)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(dump_payload(tree, fmt), encoding='utf-8')
    return out_path


def _runs_text(runs: tuple[InlineRun, ...]) -> str:
    return "".join(r.value for r in runs)


def _render_block(block: BlockNode) -> list[str]:
    """Lines for one block node."""
    if isinstance(block, Heading):
        return [f"{'#' * block.level} {_runs_text(block.runs).strip()}"]
    if isinstance(block, Paragraph):
        return [_runs_text(block.runs).strip()]
    if isinstance(block, PlainText):
        return [block.text]
    if isinstance(block, Blockquote):
        return [f"> {line}".rstrip() for line in block.text.strip().splitlines()]
    if isinstance(block, ListBlock):
        if block.ordered:
            return [f"{i}. {item}" for i, item in enumerate(block.items, start=1)]
        return [f"• {item}" for item in block.items]
    if isinstance(block, CodeBlock):
        return block.text.strip("\n").splitlines()
    if isinstance(block, Image):
        lines = [f"[image: {block.src}]"]
        if block.alt:
            lines.append(block.alt)
        return lines
    if isinstance(block, Rule):
        return ["---"]
    if isinstance(block, Spacer):
        return [""]
    return []


def render_text(blocks: list[BlockNode]) -> str:
    """Plain-text preview: one paragraph of lines per block, blank-line separated."""
    return "\n\n".join("\n".join(_render_block(b)) for b in blocks)
