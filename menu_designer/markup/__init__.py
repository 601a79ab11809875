"""Markup stages of the mobile-menu pipeline and the tag processor they share."""

from .annotate import add_nav_attributes
from .inject import inject_mobile_menu_content
from .inline_styles import add_inline_styles
from .processor import TagProcessor

__all__ = [
    "TagProcessor",
    "add_inline_styles",
    "add_nav_attributes",
    "inject_mobile_menu_content",
]
