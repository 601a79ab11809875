"""Mobile-menu enhancements for server-rendered navigation blocks.

The package rewrites the markup of a rendered navigation block so it can show
a template part as its mobile menu, restyle the toggle buttons, and switch to
the mobile layout at a custom breakpoint.

Exports
-------
- ``add_mobile_menu_to_navigation``: the render pipeline for one block.
- ``RenderContext``: request-scoped collaborators used by the pipeline.
- ``MobileMenuPlugin``: registers the pipeline on a hook table.
- ``MenuConfiguration`` / ``extract_menu_configuration``: attribute parsing.

Examples
--------
>>> from menu_designer import RenderContext, add_mobile_menu_to_navigation
>>> context = RenderContext(template_parts=lambda slug: "")
>>> block = {"blockName": "core/navigation", "attrs": {"customMobileIconColor": "#fff"}}
>>> html = add_mobile_menu_to_navigation("<nav></nav>", block, context)
>>> html.startswith("<style>#nav-1 ")
True
"""

from __future__ import annotations

from .attributes import MenuConfiguration, extract_menu_configuration
from .pipeline import RenderContext, add_mobile_menu_to_navigation
from .plugin import MobileMenuPlugin

__all__ = [
    "MenuConfiguration",
    "MobileMenuPlugin",
    "RenderContext",
    "add_mobile_menu_to_navigation",
    "extract_menu_configuration",
]
