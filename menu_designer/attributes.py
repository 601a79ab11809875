"""Declare and normalize the mobile-menu attributes of the navigation block.

The block editor stores mobile-menu settings as loose attributes on each
navigation block instance: a template-part slug, three color slots that can
each hold either a palette preset name or a custom color, and an optional
breakpoint. This module owns both sides of that contract:

- :data:`MOBILE_MENU_ATTRIBUTES` is the schema merged into the registered
  navigation block type during initialization.
- :func:`extract_menu_configuration` turns one block's raw attributes into a
  sanitized :class:`MenuConfiguration` used by the render pipeline.

Examples
--------
>>> config = extract_menu_configuration(
...     {"mobileMenuSlug": "mobile-menu", "mobileMenuBackgroundColor": "primary"}
... )
>>> config.background_color
'var(--wp--preset--color--primary)'
>>> config.has_mobile_menu, config.has_breakpoint
(True, False)
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from loguru import logger

from ._constants import DEFAULT_BREAKPOINT, NAVIGATION_BLOCK, PRESET_COLOR_TEMPLATE
from .sanitize import absint, esc_attr, is_empty

if typ.TYPE_CHECKING:
    from .host.blocks import BlockTypeRegistry

MOBILE_MENU_ATTRIBUTES: dict[str, dict[str, typ.Any]] = {
    "mobileMenuSlug": {"type": "string", "default": ""},
    "mobileMenuBackgroundColor": {"type": "string", "default": ""},
    "customMobileMenuBackgroundColor": {"type": "string", "default": ""},
    "mobileIconBackgroundColor": {"type": "string", "default": ""},
    "customMobileIconBackgroundColor": {"type": "string", "default": ""},
    "mobileIconColor": {"type": "string", "default": ""},
    "customMobileIconColor": {"type": "string", "default": ""},
    "mobileMenuBreakpointEnabled": {"type": "boolean", "default": False},
    "mobileMenuBreakpoint": {"type": "number", "default": DEFAULT_BREAKPOINT},
}


@dc.dataclass(frozen=True, slots=True)
class MenuConfiguration:
    """Sanitized mobile-menu settings for one navigation block render.

    Attributes
    ----------
    slug : str
        Attribute-escaped template-part slug, or ``""`` when no mobile menu
        is configured.
    background_color : str
        Open-menu background: a preset ``var(...)`` reference, a custom
        color literal, or ``""``.
    icon_background_color : str
        Background applied to the open and close toggle buttons.
    icon_color : str
        Fill applied to the toggle buttons' SVG glyphs.
    breakpoint_enabled : bool
        Whether the custom breakpoint should override the theme's default.
    breakpoint : int
        Viewport width in pixels below which the mobile menu activates.
    """

    slug: str = ""
    background_color: str = ""
    icon_background_color: str = ""
    icon_color: str = ""
    breakpoint_enabled: bool = False
    breakpoint: int = DEFAULT_BREAKPOINT

    @property
    def has_mobile_menu(self) -> bool:
        """Return True when a template part should replace the menu content."""
        return bool(self.slug)

    @property
    def has_breakpoint(self) -> bool:
        """Return True when a breakpoint media query should be emitted."""
        return self.breakpoint_enabled and self.breakpoint > 0

    @property
    def has_colors(self) -> bool:
        """Return True when at least one color rule would be emitted."""
        return bool(
            self.icon_background_color
            or self.icon_color
            or (self.background_color and self.has_mobile_menu)
        )

    @property
    def needs_processing(self) -> bool:
        """Return True when the navigation markup has to be transformed at all."""
        return self.has_mobile_menu or self.has_colors or self.has_breakpoint


def _resolve_color(
    attributes: cabc.Mapping[str, typ.Any], preset_key: str, custom_key: str
) -> str:
    """Return the CSS value for a color slot, preferring the palette preset."""
    preset = attributes.get(preset_key)
    if not is_empty(preset):
        return PRESET_COLOR_TEMPLATE.format(name=esc_attr(preset))
    custom = attributes.get(custom_key)
    if not is_empty(custom):
        return esc_attr(custom)
    return ""


def extract_menu_configuration(
    attributes: cabc.Mapping[str, typ.Any] | None,
    *,
    default_breakpoint: int = DEFAULT_BREAKPOINT,
) -> MenuConfiguration:
    """Normalize raw block attributes into a :class:`MenuConfiguration`.

    Parameters
    ----------
    attributes : Mapping[str, Any] or None
        Attributes parsed from the block comment delimiter. Values are
        untrusted and may be missing, mistyped, or empty.
    default_breakpoint : int, optional
        Breakpoint used when ``mobileMenuBreakpoint`` is unset. Defaults to
        ``600``.

    Returns
    -------
    MenuConfiguration
        Sanitized settings. Malformed input degrades to the documented
        defaults; this function never raises.
    """
    if not isinstance(attributes, cabc.Mapping):
        attributes = {}

    slug = attributes.get("mobileMenuSlug")
    raw_breakpoint = attributes.get("mobileMenuBreakpoint")
    return MenuConfiguration(
        slug="" if is_empty(slug) else esc_attr(slug),
        background_color=_resolve_color(
            attributes, "mobileMenuBackgroundColor", "customMobileMenuBackgroundColor"
        ),
        icon_background_color=_resolve_color(
            attributes, "mobileIconBackgroundColor", "customMobileIconBackgroundColor"
        ),
        icon_color=_resolve_color(
            attributes, "mobileIconColor", "customMobileIconColor"
        ),
        breakpoint_enabled=not is_empty(attributes.get("mobileMenuBreakpointEnabled")),
        breakpoint=(
            default_breakpoint if is_empty(raw_breakpoint) else absint(raw_breakpoint)
        ),
    )


def register_navigation_block_attributes(
    registry: BlockTypeRegistry,
    *,
    block_name: str = NAVIGATION_BLOCK,
    default_breakpoint: int = DEFAULT_BREAKPOINT,
) -> bool:
    """Merge the mobile-menu attribute schema into the navigation block type.

    Returns ``False`` without touching the registry when ``block_name`` is not
    registered.
    """
    block_type = registry.get_registered(block_name)
    if block_type is None:
        logger.debug("Block type {} is not registered; skipping attributes", block_name)
        return False

    for name, schema in MOBILE_MENU_ATTRIBUTES.items():
        block_type.attributes[name] = dict(schema)
    block_type.attributes["mobileMenuBreakpoint"]["default"] = default_breakpoint
    return True


__all__ = [
    "MOBILE_MENU_ATTRIBUTES",
    "MenuConfiguration",
    "extract_menu_configuration",
    "register_navigation_block_attributes",
]
