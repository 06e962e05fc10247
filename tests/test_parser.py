"""Tests for RSS item and feed parsing."""

from xml.etree import ElementTree as ET

import pytest

from feed_watch.core.types import Feed, Item
from feed_watch.errors import ParseError
from feed_watch.parser import parse_feed, parse_item


SAMPLE_FEED = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0"
     xmlns:dc="http://purl.org/dc/elements/1.1/"
     xmlns:atom="http://www.w3.org/2005/Atom">
  <channel>
    <title><![CDATA[Example Blog]]></title>
    <link>https://example.com</link>
    <atom:link href="https://example.com/feed.xml" rel="self" type="application/rss+xml"/>
    <description>All the news</description>
    <lastBuildDate>Mon, 05 Feb 2026 09:00:00 +0000</lastBuildDate>
    <image><title>ignored image title</title></image>
    <!-- a comment between items -->
    <item>
      <title>Second post</title>
      <link>https://example.com/2</link>
      <guid isPermaLink="false">post-2</guid>
      <description><![CDATA[<p>Body two</p>]]></description>
      <pubDate>Mon, 05 Feb 2026 08:00:00 +0000</pubDate>
      <dc:creator><![CDATA[Jane Doe]]></dc:creator>
      <category>news</category>
      <category><![CDATA[tech]]></category>
    </item>
    <item>
      <title>First post</title>
      <guid>post-1</guid>
      <author>john@example.com (John)</author>
    </item>
  </channel>
</rss>
"""


def _item(xml: str) -> Item:
    return parse_item(ET.fromstring(xml))


def test_parse_item_repeated_tag_keeps_last_value():
    assert _item("<item><title>A</title><title>B</title></item>").title == "B"


def test_parse_item_accumulates_categories_in_order():
    item = _item(
        "<item><category>x</category><category>y</category><category>x</category></item>"
    )
    assert item.categories == ["x", "y", "x"]


def test_parse_item_all_fields():
    item = _item(
        "<item>"
        "<title>T</title><link>L</link><guid>G</guid><description>D</description>"
        "<pubDate>P</pubDate><author>A</author>"
        "</item>"
    )
    assert item == Item(title="T", link="L", guid="G", description="D", pub_date="P", author="A")


def test_parse_item_creator_and_author_share_field_later_wins():
    ns = 'xmlns:dc="http://purl.org/dc/elements/1.1/"'
    assert _item(f"<item {ns}><author>a</author><dc:creator>c</dc:creator></item>").author == "c"
    assert _item(f"<item {ns}><dc:creator>c</dc:creator><author>a</author></item>").author == "a"


def test_parse_item_ignores_unknown_and_namespaced_collisions():
    """An atom:link or media:title must not overwrite the RSS fields."""
    item = _item(
        '<item xmlns:atom="http://www.w3.org/2005/Atom" xmlns:media="http://search.yahoo.com/mrss/">'
        "<title>Real</title><media:title>Other</media:title>"
        "<link>https://example.com/a</link><atom:link href='x'/>"
        "<comments>ignored</comments>"
        "</item>"
    )
    assert item.title == "Real"
    assert item.link == "https://example.com/a"


def test_parse_item_empty_item_is_valid():
    assert _item("<item/>") == Item()


def test_parse_item_unwraps_escaped_cdata():
    item = _item(
        "<item><description>&lt;![CDATA[&lt;b&gt;hi&lt;/b&gt;]]&gt;</description></item>"
    )
    assert item.description == "<b>hi</b>"


def test_parse_item_unwraps_escaped_cdata_around_markup():
    """Real markup inside an escaped wrapper contributes only its text."""
    item = _item("<item><description>&lt;![CDATA[<b>hi</b>]]&gt;</description></item>")
    assert item.description == "hi"


def test_parse_item_concatenates_nested_text():
    item = _item("<item><description>Hello <b>world</b>!</description></item>")
    assert item.description == "Hello world!"


def test_parse_feed_end_to_end_minimal():
    xml = (
        b"<rss><channel><title>Example</title>"
        b"<item><title><![CDATA[Hello]]></title><guid>g1</guid></item>"
        b"</channel></rss>"
    )
    assert parse_feed(xml) == Feed(title="Example", items=[Item(title="Hello", guid="g1")])


def test_parse_feed_sample_document():
    feed = parse_feed(SAMPLE_FEED)

    assert feed.title == "Example Blog"
    assert feed.link == "https://example.com"
    assert feed.description == "All the news"
    assert feed.item_count == 2
    assert [item.guid for item in feed.items] == ["post-2", "post-1"]

    second = feed.items[0]
    assert second.description == "<p>Body two</p>"
    assert second.author == "Jane Doe"
    assert second.categories == ["news", "tech"]
    assert second.pub_date == "Mon, 05 Feb 2026 08:00:00 +0000"

    first = feed.items[1]
    assert first.link == ""
    assert first.author == "john@example.com (John)"
    assert first.categories == []


def test_parse_feed_accepts_text_input():
    feed = parse_feed("<rss><channel><title>Über</title></channel></rss>")
    assert feed.title == "Über"


def test_parse_feed_detects_declared_encoding():
    xml = '<?xml version="1.0" encoding="ISO-8859-1"?><rss><channel><title>café</title></channel></rss>'
    assert parse_feed(xml.encode("iso-8859-1")).title == "café"


def test_parse_feed_channel_metadata_last_value_wins():
    feed = parse_feed(b"<rss><channel><title>one</title><title>two</title></channel></rss>")
    assert feed.title == "two"


def test_parse_feed_malformed_xml_raises():
    with pytest.raises(ParseError):
        parse_feed(b"<channel><unclosed>")


def test_parse_feed_empty_document_raises():
    with pytest.raises(ParseError):
        parse_feed(b"")


def test_parse_feed_without_channel_raises():
    with pytest.raises(ParseError, match="channel"):
        parse_feed(b"<rss><item><guid>g</guid></item></rss>")


def test_parse_feed_items_outside_channel_are_not_collected():
    feed = parse_feed(b"<rss><channel><title>t</title></channel><item><guid>g</guid></item></rss>")
    assert feed.items == []


def test_parse_feed_default_namespace_document():
    """Elements in the root's default namespace count as plain RSS elements."""
    xml = (
        b'<rss xmlns="http://backend.userland.com/rss2"'
        b' xmlns:atom="http://www.w3.org/2005/Atom"'
        b' xmlns:dc="http://purl.org/dc/elements/1.1/">'
        b"<channel><title>T</title><link>https://example.com</link>"
        b'<atom:link href="https://example.com/feed.xml" rel="self"/>'
        b"<item><guid>g1</guid><category>c</category><dc:creator>Jane</dc:creator></item>"
        b"</channel></rss>"
    )

    feed = parse_feed(xml)

    assert feed.title == "T"
    assert feed.link == "https://example.com"
    assert feed.items == [Item(guid="g1", author="Jane", categories=["c"])]


def test_parse_feed_undeclared_prefix_is_rejected():
    xml = b"<rss><channel><title>T</title><item><guid>g1</guid><dc:creator>Jane</dc:creator></item></channel></rss>"

    with pytest.raises(ParseError, match="unbound prefix"):
        parse_feed(xml)
