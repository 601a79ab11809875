"""Unit tests for the minimal-edit tag processor."""

from __future__ import annotations

import re

from menu_designer.markup import TagProcessor


def test_untouched_markup_is_returned_verbatim() -> None:
    """Locating tags without editing them never rewrites the fragment."""
    markup = "<NAV Class='x'><svg viewBox=\"0 0 1 1\"><br></svg></NAV>  <!-- c -->"
    processor = TagProcessor(markup)
    assert processor.next_tag("nav"), "expected <NAV> to be found case-insensitively"
    assert processor.add_class("x"), "adding an existing class succeeds"
    assert processor.get_updated_html() == markup, "expected identity serialization"


def test_only_edited_opening_tag_is_rewritten() -> None:
    """Edits touch the opening tag while SVG casing elsewhere survives."""
    markup = '<nav class="menu"><svg viewBox="0 0 24 24"></svg></nav>'
    processor = TagProcessor(markup)
    assert processor.next_tag("nav")
    processor.add_class("has-mobile-menu")
    processor.set_attribute("data-responsive-navigation", "true")
    assert processor.get_updated_html() == (
        '<nav class="menu has-mobile-menu" data-responsive-navigation="true">'
        '<svg viewBox="0 0 24 24"></svg></nav>'
    )


def test_tags_on_later_lines_are_located() -> None:
    """Source offsets are computed correctly for multi-line fragments."""
    markup = "<div>\n  <p>x</p>\n  <nav id='a'>y</nav>\n</div>"
    processor = TagProcessor(markup)
    assert processor.next_tag("nav")
    processor.set_attribute("data-x", "1")
    assert processor.get_updated_html() == (
        '<div>\n  <p>x</p>\n  <nav id="a" data-x="1">y</nav>\n</div>'
    )


def test_missing_tag_leaves_cursor_empty() -> None:
    """Edits after a failed search are refused."""
    processor = TagProcessor("<div><!-- <nav> --></div>")
    assert not processor.next_tag("nav"), "commented-out tags must not match"
    assert not processor.set_attribute("id", "nav-1")
    assert not processor.add_class("x")
    assert not processor.insert_after_opening_tag("<b></b>")
    assert processor.get_attribute("id") is None
    assert processor.get_updated_html() == "<div><!-- <nav> --></div>"


def test_escaped_values_are_not_escaped_twice() -> None:
    """Attribute-escaped input is serialized with a single level of escaping."""
    processor = TagProcessor("<nav></nav>")
    assert processor.next_tag("nav")
    processor.set_attribute("data-bg", "a &amp; b &quot;c&quot;")
    assert processor.get_updated_html() == (
        '<nav data-bg="a &amp; b &quot;c&quot;"></nav>'
    )
    assert processor.get_attribute("data-bg") == 'a & b "c"'


def test_class_and_attribute_filters_ignore_attribute_order() -> None:
    """Class tokens and id patterns match regardless of attribute order."""
    markup = (
        '<div class="wrapper-content"></div>'
        '<div id="m-content" class="x wp-block-navigation__responsive-container-content">'
        "</div>"
    )
    processor = TagProcessor(markup)
    assert processor.next_tag(
        "div",
        class_name="wp-block-navigation__responsive-container-content",
        attrs={"id": re.compile(r".-content$")},
    )
    assert processor.get_attribute("id") == "m-content"
    assert processor.has_class("x")


def test_next_tag_advances_past_current_match() -> None:
    """Subsequent searches continue after the current tag."""
    markup = '<nav id="one"></nav><nav id="two"></nav>'
    processor = TagProcessor(markup)
    assert processor.next_tag("nav")
    assert processor.next_tag("nav")
    processor.add_class("second")
    assert not processor.next_tag("nav")
    assert processor.get_updated_html() == (
        '<nav id="one"></nav><nav id="two" class="second"></nav>'
    )


def test_insert_after_opening_tag_combines_with_attribute_edits() -> None:
    """Insertions land after the (possibly rewritten) opening tag."""
    processor = TagProcessor('<div class="a"><span>1</span></div>')
    assert processor.next_tag("div")
    processor.insert_after_opening_tag("<b>first</b>")
    processor.insert_after_opening_tag("<i>second</i>")
    processor.set_attribute("id", "box")
    assert processor.get_updated_html() == (
        '<div class="a" id="box"><b>first</b><i>second</i><span>1</span></div>'
    )
