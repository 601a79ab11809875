"""Typed settings for the mobile-menu renderer."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_BREAKPOINT, ID_PREFIX, NAVIGATION_BLOCK, STYLE_HANDLE


class SettingsError(ValueError):
    """Raised when the mobile-menu settings are invalid."""


@dc.dataclass(slots=True)
class MenuDesignerSettings:
    """Settings shared by the plugin, the CLI, and the render pipeline.

    Attributes
    ----------
    block_name : str
        Block type whose rendered markup receives the mobile menu.
    style_handle : str
        Stylesheet handle the base mobile-menu CSS is attached to.
    id_prefix : str
        Prefix of the unique ID assigned to styled ``<nav>`` elements.
    template_parts_dir : Path
        Directory searched for ``<slug>.html`` template parts.
    default_breakpoint : int
        Breakpoint in pixels used when a block does not set one.
    init_priority : int
        Priority of the attribute registration callback on ``init``.
    render_priority : int
        Priority of the navigation render filter.
    log_level : str
        Minimum level for the CLI's log sink.
    """

    block_name: str = NAVIGATION_BLOCK
    style_handle: str = STYLE_HANDLE
    id_prefix: str = ID_PREFIX
    template_parts_dir: Path = dc.field(default_factory=lambda: Path("parts"))
    default_breakpoint: int = DEFAULT_BREAKPOINT
    init_priority: int = 100
    render_priority: int = 10
    log_level: str = "WARNING"


__all__ = ["MenuDesignerSettings", "SettingsError"]
