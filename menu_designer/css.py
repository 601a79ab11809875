"""Scoped CSS for the mobile menu.

:func:`generate_css_rules` builds the per-instance rules that get inlined next
to one navigation block, each selector scoped by the block's generated ID.
:data:`BASE_STYLESHEET` holds the page-wide rules that hide the stock menu
items while the injected template part is shown.
"""

from __future__ import annotations

import typing as typ

from ._constants import (
    MOBILE_MENU_CONTENT,
    RESPONSIVE_CONTAINER,
    RESPONSIVE_CONTAINER_CLOSE,
    RESPONSIVE_CONTAINER_OPEN,
)
from .sanitize import absint, esc_attr

if typ.TYPE_CHECKING:
    from .attributes import MenuConfiguration

BREAKPOINT_RULE = (
    "@media (max-width: {max_width}px) {{ "
    "#{id} .{open}:not(.always-shown) {{ display: flex !important; }} "
    "#{id} .{container}:not(.is-menu-open) {{ display: none !important; }}  }}"
)
BACKGROUND_RULE = (
    "#{id} .{container}.is-menu-open {{ background-color: {color} !important; }}"
)
ICON_BACKGROUND_RULE = (
    "#{id} .{open}, #{id} .{close} {{ background-color: {color} !important; }}"
)
ICON_FILL_RULE = "#{id} .{open} svg, #{id} .{close} svg {{ fill: {color} !important; }}"

BASE_STYLESHEET = f"""
.{MOBILE_MENU_CONTENT} {{
    display: none;
    width: 100%;
}}
.{RESPONSIVE_CONTAINER}:not(.is-menu-open) .{MOBILE_MENU_CONTENT} {{
    display: none !important;
}}
.{RESPONSIVE_CONTAINER}.is-menu-open .{MOBILE_MENU_CONTENT} {{
    display: block;
}}
.{RESPONSIVE_CONTAINER}.is-menu-open .{MOBILE_MENU_CONTENT} ~ * {{
    display: none !important;
}}
""".strip()

_SELECTORS = {
    "container": RESPONSIVE_CONTAINER,
    "open": RESPONSIVE_CONTAINER_OPEN,
    "close": RESPONSIVE_CONTAINER_CLOSE,
}


def generate_css_rules(
    nav_id: str, config: MenuConfiguration, has_mobile_menu: bool
) -> list[str]:
    """Return the inline CSS rules required for one navigation block.

    Parameters
    ----------
    nav_id : str
        ID assigned to the ``<nav>`` element; every selector is scoped by it.
    config : MenuConfiguration
        Sanitized mobile-menu settings.
    has_mobile_menu : bool
        Whether a template part is injected. The open-menu background only
        applies when it is.

    Returns
    -------
    list[str]
        Breakpoint, background, icon background, and icon fill rules, in that
        order, each present only when configured.
    """
    rules: list[str] = []
    escaped_id = esc_attr(nav_id)

    if config.breakpoint_enabled and config.breakpoint:
        rules.append(
            BREAKPOINT_RULE.format(
                max_width=absint(config.breakpoint) - 1, id=escaped_id, **_SELECTORS
            )
        )

    if config.background_color and has_mobile_menu:
        rules.append(
            BACKGROUND_RULE.format(
                id=escaped_id, color=esc_attr(config.background_color), **_SELECTORS
            )
        )

    if config.icon_background_color:
        rules.append(
            ICON_BACKGROUND_RULE.format(
                id=escaped_id,
                color=esc_attr(config.icon_background_color),
                **_SELECTORS,
            )
        )

    if config.icon_color:
        rules.append(
            ICON_FILL_RULE.format(
                id=escaped_id, color=esc_attr(config.icon_color), **_SELECTORS
            )
        )

    return rules


__all__ = ["BASE_STYLESHEET", "generate_css_rules"]
