"""In-process implementations of the host services the mobile menu relies on.

The render pipeline consumes block registration, hook dispatch, style
registration, template-part rendering, and unique IDs only through these
small interfaces, so tests and the CLI can assemble a host without a CMS.
"""

from .blocks import BlockType, BlockTypeRegistry
from .hooks import HookRegistry, render_block
from .ids import UniqueIdGenerator
from .styles import StyleRegistry
from .template_parts import JinjaTemplatePartRenderer, TemplatePartRenderer

__all__ = [
    "BlockType",
    "BlockTypeRegistry",
    "HookRegistry",
    "JinjaTemplatePartRenderer",
    "StyleRegistry",
    "TemplatePartRenderer",
    "UniqueIdGenerator",
    "render_block",
]
