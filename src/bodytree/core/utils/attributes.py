"""Tag attribute extraction"""

import re


ATTR_RE = re.compile(r'''([\w-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')''')


def parse_attributes(attr_string: str) -> dict[str, str]:
    """Return quoted name=value pairs as a dict; later duplicates win.

    Unquoted or otherwise malformed fragments are skipped. Names are
    lower-cased, values are returned raw (not entity-decoded).
    """
    attrs: dict[str, str] = {}
    for m in ATTR_RE.finditer(attr_string):
        value = m.group(2) if m.group(2) is not None else m.group(3)
        attrs[m.group(1).lower()] = value
    return attrs
