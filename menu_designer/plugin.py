"""Wire the mobile menu into a host's hook table.

:class:`MobileMenuPlugin` bundles the three callbacks the feature needs and
registers them on a :class:`~menu_designer.host.HookRegistry`:

=====================================  ==========================================
Hook                                   Callback
=====================================  ==========================================
``init`` (priority 100)                :meth:`MobileMenuPlugin.register_block_attributes`
``render_block_core/navigation`` (10)  :meth:`MobileMenuPlugin.filter_navigation`
``enqueue_scripts``                    :meth:`MobileMenuPlugin.enqueue_assets`
=====================================  ==========================================

Examples
--------
>>> from menu_designer.config import MenuDesignerSettings
>>> from menu_designer.host import BlockTypeRegistry, HookRegistry, StyleRegistry
>>> hooks = HookRegistry()
>>> plugin = MobileMenuPlugin(
...     MenuDesignerSettings(),
...     block_types=BlockTypeRegistry(),
...     styles=StyleRegistry(),
...     template_parts=lambda slug: "",
... )
>>> plugin.install(hooks)
>>> hooks.has_filter("render_block_core/navigation")
True
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .attributes import register_navigation_block_attributes
from .css import BASE_STYLESHEET
from .host.ids import UniqueIdGenerator
from .pipeline import RenderContext, add_mobile_menu_to_navigation

if typ.TYPE_CHECKING:
    from .config import MenuDesignerSettings
    from .host.blocks import BlockTypeRegistry
    from .host.hooks import HookRegistry
    from .host.styles import StyleRegistry
    from .host.template_parts import TemplatePartRenderer

INIT_HOOK = "init"
ENQUEUE_HOOK = "enqueue_scripts"


def enqueue_mobile_menu_assets(styles: StyleRegistry, handle: str) -> bool:
    """Attach the base mobile-menu stylesheet to ``handle``."""
    return styles.add_inline_style(handle, BASE_STYLESHEET)


class MobileMenuPlugin:
    """Register the mobile-menu callbacks for one host instance."""

    def __init__(
        self,
        settings: MenuDesignerSettings,
        *,
        block_types: BlockTypeRegistry,
        styles: StyleRegistry,
        template_parts: TemplatePartRenderer,
        unique_id: UniqueIdGenerator | None = None,
    ) -> None:
        """Initialize the plugin with the host services it consumes.

        Parameters
        ----------
        settings : MenuDesignerSettings
            Block name, hook priorities, and rendering defaults.
        block_types : BlockTypeRegistry
            Registry extended with the mobile-menu attributes on ``init``.
        styles : StyleRegistry
            Sink for the base stylesheet.
        template_parts : TemplatePartRenderer
            Renders the template part named by ``mobileMenuSlug``.
        unique_id : UniqueIdGenerator, optional
            ID source shared with other components of the page; a private
            generator is created when omitted.
        """
        self.settings = settings
        self.block_types = block_types
        self.styles = styles
        self.context = RenderContext(
            template_parts=template_parts,
            unique_id=unique_id or UniqueIdGenerator(),
            block_name=settings.block_name,
            id_prefix=settings.id_prefix,
            default_breakpoint=settings.default_breakpoint,
        )

    @property
    def render_hook(self) -> str:
        """Return the name of the block-specific render filter."""
        return f"render_block_{self.settings.block_name}"

    def install(self, hooks: HookRegistry) -> None:
        """Register every callback on ``hooks``."""
        hooks.add_action(
            INIT_HOOK, self.register_block_attributes, self.settings.init_priority
        )
        hooks.add_filter(
            self.render_hook, self.filter_navigation, self.settings.render_priority
        )
        hooks.add_action(ENQUEUE_HOOK, self.enqueue_assets)

    def register_block_attributes(self) -> None:
        """Extend the navigation block type with the mobile-menu attributes."""
        register_navigation_block_attributes(
            self.block_types,
            block_name=self.settings.block_name,
            default_breakpoint=self.settings.default_breakpoint,
        )

    def filter_navigation(
        self, block_content: str, block: cabc.Mapping[str, typ.Any]
    ) -> str:
        """Render filter: return the navigation markup with the mobile menu applied."""
        return add_mobile_menu_to_navigation(block_content, block, self.context)

    def enqueue_assets(self) -> None:
        """Attach the base stylesheet, registering the handle when needed."""
        handle = self.settings.style_handle
        if not self.styles.is_registered(handle):
            self.styles.register(handle)
        enqueue_mobile_menu_assets(self.styles, handle)


__all__ = ["ENQUEUE_HOOK", "INIT_HOOK", "MobileMenuPlugin", "enqueue_mobile_menu_assets"]
