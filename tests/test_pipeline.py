"""Unit tests for the navigation render pipeline."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from menu_designer.host import UniqueIdGenerator
from menu_designer.pipeline import RenderContext, add_mobile_menu_to_navigation

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def _block(attrs: cabc.Mapping[str, typ.Any] | None = None) -> dict[str, typ.Any]:
    return {"blockName": "core/navigation", "attrs": dict(attrs or {})}


@pytest.fixture
def context() -> RenderContext:
    """Return a context whose template parts render a fixed menu."""
    return RenderContext(
        template_parts=lambda slug: f'<ul class="mobile">{slug}</ul>' if slug else ""
    )


def test_non_navigation_blocks_pass_through(context: RenderContext) -> None:
    """Other block types are never inspected."""
    content = "<p>paragraph</p>"
    block = {"blockName": "core/paragraph", "attrs": {"mobileMenuSlug": "x"}}
    assert add_mobile_menu_to_navigation(content, block, context) is content


@pytest.mark.parametrize(
    "attrs",
    [
        {},
        {"mobileMenuBackgroundColor": "primary"},
        {"mobileMenuBreakpointEnabled": False, "mobileMenuBreakpoint": 900},
        {"mobileMenuSlug": "", "customMobileIconColor": ""},
    ],
)
def test_unconfigured_navigation_is_identical(
    navigation_html: str, context: RenderContext, attrs: dict[str, typ.Any]
) -> None:
    """Without a slug, colors, or breakpoint the markup is returned untouched."""
    html = add_mobile_menu_to_navigation(navigation_html, _block(attrs), context)
    assert html == navigation_html, f"expected identity pass-through for {attrs!r}"


def test_block_without_attrs_passes_through(
    navigation_html: str, context: RenderContext
) -> None:
    """A parsed block lacking an attrs key is treated as unconfigured."""
    block = {"blockName": "core/navigation"}
    assert add_mobile_menu_to_navigation(navigation_html, block, context) == navigation_html


def test_mobile_menu_with_preset_background(
    navigation_html: str, context: RenderContext
) -> None:
    """The full pipeline annotates, injects, and styles the navigation."""
    html = add_mobile_menu_to_navigation(
        navigation_html,
        _block({"mobileMenuSlug": "mobile-menu", "mobileMenuBackgroundColor": "primary"}),
        context,
    )

    assert html.startswith(
        "<style>#nav-1 .wp-block-navigation__responsive-container.is-menu-open "
        "{ background-color: var(--wp--preset--color--primary) !important; }</style>"
    ), f"unexpected style prefix: {html[:200]!r}"

    soup = BeautifulSoup(html, "html.parser")
    nav = soup.nav
    assert nav is not None
    assert nav["id"] == "nav-1"
    assert nav["data-mobile-menu-slug"] == "mobile-menu"
    assert nav["data-mobile-menu-bg"] == "var(--wp--preset--color--primary)"
    assert "has-mobile-menu" in nav["class"]

    container = soup.find(id="modal-1-content")
    assert container is not None
    wrapper = container.find(True, recursive=False)
    assert wrapper is not None
    assert wrapper.get("data-mobile-menu") == "true", "menu must be the first child"
    assert wrapper.get_text() == "mobile-menu"
    assert 'viewBox="0 0 24 24"' in html, "SVG attribute casing must be preserved"


def test_empty_template_part_is_not_injected(
    navigation_html: str, context: RenderContext
) -> None:
    """An empty render leaves no wrapper or marker behind."""
    context.template_parts = lambda slug: ""
    html = add_mobile_menu_to_navigation(
        navigation_html, _block({"mobileMenuSlug": "empty-menu"}), context
    )
    soup = BeautifulSoup(html, "html.parser")
    assert soup.find(attrs={"data-mobile-menu": "true"}) is None
    assert soup.find(class_="wp-block-navigation__mobile-menu-content") is None
    assert "<style>" not in html, "no colors or breakpoint were configured"


def test_breakpoint_only_styles_stock_navigation(
    navigation_html: str, context: RenderContext
) -> None:
    """A breakpoint alone adds scoped CSS without a mobile menu."""
    html = add_mobile_menu_to_navigation(
        navigation_html,
        _block({"mobileMenuBreakpointEnabled": True, "mobileMenuBreakpoint": 600}),
        context,
    )
    assert html.startswith("<style>@media (max-width: 599px) { #nav-1 ")
    nav = BeautifulSoup(html, "html.parser").nav
    assert nav is not None
    assert "has-mobile-menu" not in nav["class"]
    assert 'data-mobile-menu="true"' not in html


def test_ids_are_unique_across_navigation_blocks(
    navigation_html: str, context: RenderContext
) -> None:
    """Each styled navigation block on a page gets its own ID."""
    block = _block({"customMobileIconColor": "#fff"})
    first = add_mobile_menu_to_navigation(navigation_html, block, context)
    second = add_mobile_menu_to_navigation(navigation_html, block, context)

    first_nav = BeautifulSoup(first, "html.parser").nav
    second_nav = BeautifulSoup(second, "html.parser").nav
    assert first_nav is not None
    assert second_nav is not None
    assert (first_nav["id"], second_nav["id"]) == ("nav-1", "nav-2")
    assert "#nav-2 " in second


def test_ids_are_only_consumed_when_styling(
    navigation_html: str, context: RenderContext
) -> None:
    """Blocks that need no CSS do not advance the ID counter."""
    add_mobile_menu_to_navigation(
        navigation_html, _block({"mobileMenuSlug": "mobile-menu"}), context
    )
    html = add_mobile_menu_to_navigation(
        navigation_html, _block({"customMobileIconColor": "#fff"}), context
    )
    assert html.startswith("<style>#nav-1 ")


def test_context_overrides_prefix_and_block_name(navigation_html: str) -> None:
    """Custom block names and ID prefixes are honoured."""
    context = RenderContext(
        template_parts=lambda slug: "",
        unique_id=UniqueIdGenerator(start=40),
        block_name="acme/menu",
        id_prefix="menu-",
    )
    block = {"blockName": "acme/menu", "attrs": {"customMobileIconColor": "#fff"}}
    html = add_mobile_menu_to_navigation(navigation_html, block, context)
    assert html.startswith("<style>#menu-40 ")
    core_block = _block({"customMobileIconColor": "#fff"})
    assert add_mobile_menu_to_navigation(navigation_html, core_block, context) == (
        navigation_html
    )


def test_fragment_without_nav_is_unchanged(context: RenderContext) -> None:
    """Missing <nav> elements turn every dependent stage into a no-op."""
    markup = '<div class="wp-block-navigation">stub</div>'
    html = add_mobile_menu_to_navigation(
        markup, _block({"customMobileIconColor": "#fff"}), context
    )
    assert html == markup


def test_reprocessing_output_keeps_single_menu(
    navigation_html: str, context: RenderContext
) -> None:
    """Feeding processed markup back in does not inject a second menu."""
    block = _block({"mobileMenuSlug": "mobile-menu"})
    once = add_mobile_menu_to_navigation(navigation_html, block, context)
    twice = add_mobile_menu_to_navigation(once, block, context)
    soup = BeautifulSoup(twice, "html.parser")
    assert len(soup.find_all(attrs={"data-mobile-menu": "true"})) == 1
    nav = soup.nav
    assert nav is not None
    assert nav["class"].count("has-mobile-menu") == 1
