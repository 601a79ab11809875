"""Splice a rendered template part into the navigation's responsive container.

The navigation block renders its overlay menu inside
``<div class="wp-block-navigation__responsive-container-content" id="…-content">``.
:func:`inject_mobile_menu_content` finds that container by class token and id
suffix, in any attribute order, and places the mobile menu as its first
child::

    <div class="wp-block-navigation__responsive-container-content" id="m1-content">
      <div class="wp-block-navigation__mobile-menu-content" data-mobile-menu="true">
        …template part…
      </div>
      …stock menu items…

Only the first matching container is touched. A container that already holds
an injected wrapper is left alone, so feeding cached, already-processed markup
back through the pipeline never duplicates the menu.
"""

from __future__ import annotations

import re
import typing as typ

from loguru import logger

from .._constants import (
    CONTENT_ID_SUFFIX,
    DATA_MOBILE_MENU,
    MOBILE_MENU_CONTENT,
    RESPONSIVE_CONTAINER_CONTENT,
)
from .processor import TagProcessor

if typ.TYPE_CHECKING:
    from ..host.template_parts import TemplatePartRenderer

CONTENT_ID_PATTERN = re.compile(rf"{re.escape(CONTENT_ID_SUFFIX)}$")
MOBILE_MENU_WRAPPER = (
    f'<div class="{MOBILE_MENU_CONTENT}" {DATA_MOBILE_MENU}="true">{{content}}</div>'
)


def inject_mobile_menu_content(
    content: str, mobile_menu_slug: str, render_template_part: TemplatePartRenderer
) -> str:
    """Insert the rendered ``mobile_menu_slug`` template part into ``content``.

    Parameters
    ----------
    content : str
        Navigation block markup.
    mobile_menu_slug : str
        Attribute-escaped slug of the template part to render.
    render_template_part : TemplatePartRenderer
        Callable returning the rendered part, or ``""`` when the slug does
        not resolve.

    Returns
    -------
    str
        ``content`` with the wrapped template part spliced in, or ``content``
        unchanged when no container matches, the part renders empty, or the
        container already holds a mobile menu.
    """
    processor = TagProcessor(content)
    found = processor.next_tag(
        "div",
        class_name=RESPONSIVE_CONTAINER_CONTENT,
        attrs={"id": CONTENT_ID_PATTERN},
    )
    if not found:
        logger.debug("No responsive container found; skipping mobile menu injection")
        return content

    if _already_injected(processor):
        logger.debug("Responsive container already holds a mobile menu")
        return content

    rendered = render_template_part(mobile_menu_slug)
    if not rendered:
        logger.debug("Template part {!r} rendered empty; nothing to inject", mobile_menu_slug)
        return content

    processor.insert_after_opening_tag(MOBILE_MENU_WRAPPER.format(content=rendered))
    return processor.get_updated_html()


def _already_injected(processor: TagProcessor) -> bool:
    """Report whether the current container's first element is an injected menu."""
    container = processor.current_element
    if container is None:
        return False
    first_child = container.find(True, recursive=False)
    return first_child is not None and first_child.get(DATA_MOBILE_MENU) == "true"


__all__ = ["CONTENT_ID_PATTERN", "MOBILE_MENU_WRAPPER", "inject_mobile_menu_content"]
