"""Annotate the navigation root with mobile-menu data attributes."""

from __future__ import annotations

import typing as typ

from .._constants import (
    DATA_MOBILE_MENU_BG,
    DATA_MOBILE_MENU_SLUG,
    DATA_RESPONSIVE_NAVIGATION,
    HAS_MOBILE_MENU_CLASS,
    NAVIGATION_TAG,
)

if typ.TYPE_CHECKING:
    from ..attributes import MenuConfiguration
    from .processor import TagProcessor


def add_nav_attributes(
    processor: TagProcessor, config: MenuConfiguration, has_mobile_menu: bool
) -> bool:
    """Mark the first ``<nav>`` as carrying a mobile menu.

    The background color is exposed as ``data-mobile-menu-bg`` for scripts and
    themes; the actual styling comes from the inline stylesheet.

    Returns
    -------
    bool
        ``True`` when a ``<nav>`` element was found, whether or not it was
        modified.
    """
    if not processor.next_tag(NAVIGATION_TAG):
        return False

    if has_mobile_menu:
        processor.set_attribute(DATA_MOBILE_MENU_SLUG, config.slug)
        processor.add_class(HAS_MOBILE_MENU_CLASS)
        processor.set_attribute(DATA_RESPONSIVE_NAVIGATION, "true")

        if config.background_color:
            processor.set_attribute(DATA_MOBILE_MENU_BG, config.background_color)
    return True


__all__ = ["add_nav_attributes"]
