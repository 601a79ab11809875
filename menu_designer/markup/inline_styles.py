"""Scope generated CSS to one navigation block and inline it."""

from __future__ import annotations

from loguru import logger

from .._constants import NAVIGATION_TAG
from .processor import TagProcessor


def add_inline_styles(content: str, css_rules: list[str], nav_id: str) -> str:
    """Give the first ``<nav>`` the ``nav_id`` and prepend a ``<style>`` element.

    Nothing changes when ``css_rules`` is empty or the fragment has no
    ``<nav>``: rules scoped to a missing ID would never apply.
    """
    if not css_rules:
        return content

    processor = TagProcessor(content)
    if not processor.next_tag(NAVIGATION_TAG):
        logger.debug("No <nav> element found; dropping {} inline rules", len(css_rules))
        return content
    processor.set_attribute("id", nav_id)

    return f"<style>{' '.join(css_rules)}</style>{processor.get_updated_html()}"


__all__ = ["add_inline_styles"]
