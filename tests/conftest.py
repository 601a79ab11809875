"""Shared fixtures for the menu_designer test suite.

``navigation_html`` mirrors the markup the navigation block renders for a
responsive menu: an open toggle, the overlay container, a close toggle, and
the ``*-content`` wrapper holding the stock menu items. It spans several lines
so the tag processor's source offsets are exercised.
"""

from __future__ import annotations

import pytest

NAVIGATION_HTML = (
    '<nav class="is-responsive wp-block-navigation is-layout-flex" aria-label="Primary">'
    '<button aria-haspopup="dialog" aria-label="Open menu" '
    'class="wp-block-navigation__responsive-container-open">'
    '<svg width="24" height="24" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<rect x="4" y="7.5" width="16" height="1.5"></rect></svg></button>\n'
    '<div class="wp-block-navigation__responsive-container" id="modal-1">'
    '<div class="wp-block-navigation__responsive-close" tabindex="-1">'
    '<div class="wp-block-navigation__responsive-dialog" aria-label="Menu">'
    '<button aria-label="Close menu" '
    'class="wp-block-navigation__responsive-container-close">'
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="24" height="24">'
    '<path d="M13 11.8l6.1-6.3-1-1z"></path></svg></button>\n'
    '<div class="wp-block-navigation__responsive-container-content" id="modal-1-content">'
    '<ul class="wp-block-navigation__container">'
    '<li class="wp-block-navigation-item">'
    '<a class="wp-block-navigation-item__content" href="/about">About</a></li>'
    "</ul></div></div></div></div></nav>"
)


@pytest.fixture
def navigation_html() -> str:
    """Return a rendered responsive navigation block."""
    return NAVIGATION_HTML
