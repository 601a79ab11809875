"""Transform one rendered navigation block into its mobile-menu aware markup.

The pipeline runs once per navigation block render:

1. Normalize the block attributes into a :class:`MenuConfiguration`.
2. Return the markup untouched when nothing is configured.
3. Annotate the ``<nav>`` element when a mobile menu slug is set.
4. Inject the rendered template part into the responsive container.
5. Inline scoped CSS for colors and the custom breakpoint.

Each stage receives the previous stage's text and degrades to a pass-through
when the markup it needs is missing, so an unexpected fragment never breaks the
base navigation.

Examples
--------
>>> context = RenderContext(template_parts=lambda slug: "")
>>> block = {"blockName": "core/navigation", "attrs": {}}
>>> add_mobile_menu_to_navigation("<nav></nav>", block, context)
'<nav></nav>'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from loguru import logger

from ._constants import DEFAULT_BREAKPOINT, ID_PREFIX, NAVIGATION_BLOCK
from .attributes import extract_menu_configuration
from .css import generate_css_rules
from .host.ids import UniqueIdGenerator
from .markup import (
    TagProcessor,
    add_inline_styles,
    add_nav_attributes,
    inject_mobile_menu_content,
)

if typ.TYPE_CHECKING:
    from .host.template_parts import TemplatePartRenderer


@dc.dataclass(slots=True)
class RenderContext:
    """Collaborators and options shared by every render within one request.

    Attributes
    ----------
    template_parts : TemplatePartRenderer
        Renders a template part by slug.
    unique_id : UniqueIdGenerator
        Source of page-unique IDs for styled ``<nav>`` elements.
    block_name : str
        Name of the navigation block type.
    id_prefix : str
        Prefix prepended to generated IDs.
    default_breakpoint : int
        Breakpoint used when a block does not configure one.
    """

    template_parts: TemplatePartRenderer
    unique_id: UniqueIdGenerator = dc.field(default_factory=UniqueIdGenerator)
    block_name: str = NAVIGATION_BLOCK
    id_prefix: str = ID_PREFIX
    default_breakpoint: int = DEFAULT_BREAKPOINT


def add_mobile_menu_to_navigation(
    block_content: str,
    block: cabc.Mapping[str, typ.Any],
    context: RenderContext,
) -> str:
    """Return ``block_content`` with the configured mobile-menu enhancements.

    Parameters
    ----------
    block_content : str
        Markup rendered for the block.
    block : Mapping[str, Any]
        Parsed block carrying ``blockName`` and optional ``attrs``.
    context : RenderContext
        Request-scoped collaborators.

    Returns
    -------
    str
        The transformed markup, or ``block_content`` itself when the block is
        not a navigation block or has no mobile-menu settings.
    """
    if block.get("blockName") != context.block_name:
        return block_content

    config = extract_menu_configuration(
        block.get("attrs") or {}, default_breakpoint=context.default_breakpoint
    )
    has_mobile_menu = config.has_mobile_menu
    if not config.needs_processing:
        return block_content

    processor = TagProcessor(block_content)
    add_nav_attributes(processor, config, has_mobile_menu)
    modified_content = processor.get_updated_html()

    if has_mobile_menu:
        modified_content = inject_mobile_menu_content(
            modified_content, config.slug, context.template_parts
        )

    if config.has_colors or config.has_breakpoint:
        nav_id = context.unique_id(context.id_prefix)
        css_rules = generate_css_rules(nav_id, config, has_mobile_menu)
        modified_content = add_inline_styles(modified_content, css_rules, nav_id)

    logger.debug(
        "Processed {} (mobile menu={}, colors={}, breakpoint={})",
        context.block_name,
        has_mobile_menu,
        config.has_colors,
        config.has_breakpoint,
    )
    return modified_content


__all__ = ["RenderContext", "add_mobile_menu_to_navigation"]
