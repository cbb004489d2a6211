"""Character reference decoding for CMS markup text"""

import re


# Applied in order; '&amp;' runs early so '&amp;lt;' resolves all the way to '<'.
ENTITY_TABLE: tuple[tuple[str, str], ...] = (
    ('&nbsp;',   ' '),
    ('&amp;',    '&'),
    ('&lt;',     '<'),
    ('&gt;',     '>'),
    ('&quot;',   '"'),
    ('&#39;',    "'"),
    ('&rsquo;',  "'"),
    ('&lsquo;',  "'"),
    ('&rdquo;',  '"'),
    ('&ldquo;',  '"'),
    ('&mdash;',  '—'),
    ('&ndash;',  '–'),
    ('&hellip;', '…'),
)

NUMERIC_RE = re.compile(r'&#(\d+);')
MAX_CODE_POINT = 0x10FFFF
# UTF-16 halves produced by references like '&#55357;&#56832;'
SURROGATE_PAIR_RE = re.compile('[\ud800-\udbff][\udc00-\udfff]')
LONE_SURROGATE_RE = re.compile('[\ud800-\udfff]')


def _numeric(match: re.Match) -> str:
    """Resolve one '&#<decimal>;' reference; out-of-range values pass through."""
    code = int(match.group(1))
    if code > MAX_CODE_POINT:
        return match.group(0)
    return chr(code)


def _join_pair(match: re.Match) -> str:
    high, low = (ord(c) for c in match.group(0))
    return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))


def _restore_reference(match: re.Match) -> str:
    return f"&#{ord(match.group(0))};"


def decode_entities(text: str) -> str:
    """Replace supported named and decimal references with literal characters.

    Adjacent surrogate references are joined into one character; a lone
    surrogate stays as its reference so the result is always encodable.

    Only call this on text that is final for output. Decoding earlier would
    turn '&lt;p&gt;' into a real tag before the block scanner sees it.
    """
    for entity, literal in ENTITY_TABLE:
        text = text.replace(entity, literal)
    text = NUMERIC_RE.sub(_numeric, text)
    text = SURROGATE_PAIR_RE.sub(_join_pair, text)
    return LONE_SURROGATE_RE.sub(_restore_reference, text)
