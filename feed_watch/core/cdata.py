"""
CDATA unwrapping for feed text fields.

The XML layer already unwraps real CDATA sections, but many feeds escape
the wrapper itself (`&lt;![CDATA[...]]&gt;`), which leaves the literal
markers in the element text. This module strips them.
"""

from __future__ import annotations

CDATA_OPEN = "<![CDATA["
CDATA_CLOSE = "]]>"


def extract_cdata(raw: str) -> str:
    """Return the payload of the first CDATA section in `raw`.

    The payload ends at the first literal `]]>` after the opener, so
    stray `]` or `]]` characters inside it are kept.

    Args:
        raw: Text content of an element

    Returns:
        The unwrapped payload, or `raw` unchanged when it holds no complete
        CDATA section

    Examples:
        >>> extract_cdata("<![CDATA[hello]]>")
        'hello'
        >>> extract_cdata("plain text")
        'plain text'
    """
    start = raw.find(CDATA_OPEN)
    if start < 0:
        return raw
    start += len(CDATA_OPEN)
    end = raw.find(CDATA_CLOSE, start)
    if end < 0:
        return raw
    return raw[start:end]
