"""Action and filter callback tables.

Callbacks run synchronously in ascending priority; callbacks sharing a
priority run in the order they were added. Filters thread a value through each
callback and return the final result, while actions discard return values.

Examples
--------
>>> hooks = HookRegistry()
>>> hooks.add_filter("title", str.upper)
>>> hooks.add_filter("title", lambda value: f"[{value}]", priority=20)
>>> hooks.apply_filters("title", "menu")
'[MENU]'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import itertools
import typing as typ

Callback = cabc.Callable[..., typ.Any]
DEFAULT_PRIORITY = 10


@dc.dataclass(order=True, slots=True)
class _Registration:
    priority: int
    sequence: int
    callback: Callback = dc.field(compare=False)


class HookRegistry:
    """Registered callbacks keyed by hook name."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[_Registration]] = {}
        self._sequence = itertools.count()

    def add_filter(
        self, hook: str, callback: Callback, priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Register ``callback`` to transform values passed through ``hook``."""
        registrations = self._hooks.setdefault(hook, [])
        registrations.append(_Registration(priority, next(self._sequence), callback))
        registrations.sort()

    def add_action(
        self, hook: str, callback: Callback, priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Register ``callback`` to run when ``hook`` fires."""
        self.add_filter(hook, callback, priority)

    def remove_filter(
        self, hook: str, callback: Callback, priority: int = DEFAULT_PRIORITY
    ) -> bool:
        """Unregister ``callback`` from ``hook`` at ``priority``.

        Returns ``True`` when a registration was removed.
        """
        registrations = self._hooks.get(hook, [])
        for index, registration in enumerate(registrations):
            if registration.priority == priority and registration.callback == callback:
                del registrations[index]
                return True
        return False

    def has_filter(self, hook: str) -> bool:
        """Report whether any callback is registered for ``hook``."""
        return bool(self._hooks.get(hook))

    def apply_filters(self, hook: str, value: typ.Any, *args: typ.Any) -> typ.Any:
        """Pass ``value`` through every callback registered for ``hook``."""
        for registration in list(self._hooks.get(hook, [])):
            value = registration.callback(value, *args)
        return value

    def do_action(self, hook: str, *args: typ.Any) -> None:
        """Invoke every callback registered for ``hook``."""
        for registration in list(self._hooks.get(hook, [])):
            registration.callback(*args)


def render_block(
    hooks: HookRegistry, block_content: str, block: cabc.Mapping[str, typ.Any]
) -> str:
    """Apply the generic and block-specific render filters to ``block_content``.

    Parameters
    ----------
    hooks : HookRegistry
        Callback table holding the render filters.
    block_content : str
        Markup already rendered for the block.
    block : Mapping[str, Any]
        Parsed block with at least ``blockName`` and, optionally, ``attrs``.

    Returns
    -------
    str
        The markup after ``render_block`` and ``render_block_<blockName>``
        filters have run, in that order.
    """
    content = hooks.apply_filters("render_block", block_content, block)
    block_name = block.get("blockName")
    if block_name:
        content = hooks.apply_filters(f"render_block_{block_name}", content, block)
    return content


__all__ = ["DEFAULT_PRIORITY", "HookRegistry", "render_block"]
