"""
RSS XML parser.

This module turns a raw RSS document into Feed and Item values. The
structure it walks:
- <rss> root (any root element is accepted)
- <channel> first direct child named channel
- <title>, <link>, <description> channel metadata
- <item> one entry per article, with its own metadata children

Dispatch is by element name. Children in the same namespace as their parent
(none for plain RSS 2.0, the default namespace otherwise) are dispatched;
foreign-namespace elements are ignored, except the Dublin Core
<dc:creator> which is an alias for <author>.

Documents must be namespace-well-formed: a prefix used without an xmlns
declaration (<dc:creator> with no xmlns:dc) is rejected by the XML layer
and reported as ParseError.
"""

from __future__ import annotations

import logging
from xml.etree import ElementTree as ET

from .core.cdata import extract_cdata
from .core.types import Feed, Item
from .errors import ParseError

logger = logging.getLogger(__name__)


# Item child tag -> Item attribute (singular fields, last value wins)
ITEM_FIELDS = {
    "title": "title",
    "link": "link",
    "guid": "guid",
    "description": "description",
    "pubDate": "pub_date",
    "author": "author",
}
# Foreign-namespace item children keyed by local name
NAMESPACED_ITEM_FIELDS = {
    "creator": "author",  # WordPress and others put the author in dc:creator
}
CHANNEL_FIELDS = ("title", "link", "description")


def parse_feed(xml_bytes: bytes | str) -> Feed:
    """Parse an RSS document into a Feed.

    Args:
        xml_bytes: The full response body; encoding is detected by the XML
            layer from the document's declaration (UTF-8 by default)

    Returns:
        A Feed with channel metadata and items in document order

    Raises:
        ParseError: If the document is not well-formed (including undeclared
            namespace prefixes), is empty, or has no <channel> element
            under its root
    """
    try:
        root = ET.fromstring(xml_bytes)
    except ET.ParseError as exc:
        raise ParseError(f"Malformed XML: {exc}") from exc

    channel = _find_channel(root)
    if channel is None:
        raise ParseError(f"No <channel> element under root <{_local_name(root.tag)}>")

    feed = Feed()
    home = _namespace(channel)
    for child in channel:
        namespace, name = _split_tag(child.tag)
        if name is None or namespace != home:
            continue
        if name == "item":
            feed.items.append(parse_item(child))
        elif name in CHANNEL_FIELDS:
            setattr(feed, name, _element_text(child))

    logger.debug("Parsed feed %r with %d items", feed.title, feed.item_count)
    return feed


def parse_item(element: ET.Element) -> Item:
    """Build an Item from an <item> element.

    Only direct children are inspected. Repeated singular tags keep the last
    value; every <category> is appended. Unknown tags are skipped, so an
    item with no recognised children is a valid, empty Item.

    Args:
        element: An element already known to be an <item>

    Returns:
        The parsed Item
    """
    item = Item()
    home = _namespace(element)
    for child in element:
        namespace, name = _split_tag(child.tag)
        if name is None:
            continue
        if namespace != home:
            attr = NAMESPACED_ITEM_FIELDS.get(name)
        elif name == "category":
            item.categories.append(_element_text(child))
            continue
        else:
            attr = ITEM_FIELDS.get(name)
        if attr is not None:
            setattr(item, attr, _element_text(child))
    return item


def _find_channel(root: ET.Element) -> ET.Element | None:
    home = _namespace(root)
    for child in root:
        namespace, name = _split_tag(child.tag)
        if name == "channel" and namespace == home:
            return child
    return None


def _element_text(element: ET.Element) -> str:
    """Return all text inside an element, CDATA markers removed."""
    return extract_cdata("".join(element.itertext()))


def _split_tag(tag: object) -> tuple[str, str | None]:
    """Split an ElementTree tag into (namespace, local name).

    Comments and processing instructions have non-string tags; they map to
    a None name so callers skip them.
    """
    if not isinstance(tag, str):
        return "", None
    if tag.startswith("{"):
        namespace, _, name = tag[1:].partition("}")
        return namespace, name
    return "", tag


def _local_name(tag: object) -> str:
    return _split_tag(tag)[1] or ""


def _namespace(element: ET.Element) -> str:
    return _split_tag(element.tag)[0]
