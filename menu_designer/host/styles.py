"""Collect inline CSS attached to named stylesheets for one page render."""

from __future__ import annotations

from html import escape


class StyleRegistry:
    """Inline style blocks grouped by stylesheet handle.

    Examples
    --------
    >>> styles = StyleRegistry()
    >>> styles.register("wp-block-navigation")
    >>> styles.add_inline_style("wp-block-navigation", "nav { color: red; }")
    True
    >>> styles.render("wp-block-navigation")
    '<style id="wp-block-navigation-inline-css">nav { color: red; }</style>'
    """

    def __init__(self) -> None:
        self._inline: dict[str, list[str]] = {}

    def register(self, handle: str) -> None:
        """Declare ``handle`` so inline styles may be attached to it."""
        self._inline.setdefault(handle, [])

    def is_registered(self, handle: str) -> bool:
        """Report whether ``handle`` has been declared."""
        return handle in self._inline

    def add_inline_style(self, handle: str, css: str) -> bool:
        """Attach ``css`` to ``handle``.

        Returns ``False`` when the handle is unknown; blank CSS is ignored.
        """
        if handle not in self._inline:
            return False
        text = css.strip()
        if text:
            self._inline[handle].append(text)
        return True

    def inline_styles(self, handle: str) -> list[str]:
        """Return the CSS blocks attached to ``handle`` in insertion order."""
        return list(self._inline.get(handle, []))

    def render(self, handle: str) -> str:
        """Return a ``<style>`` element for ``handle``, or ``""`` when it has none."""
        blocks = self._inline.get(handle)
        if not blocks:
            return ""
        element_id = escape(f"{handle}-inline-css", quote=True)
        body = "\n".join(blocks)
        return f'<style id="{element_id}">{body}</style>'


__all__ = ["StyleRegistry"]
