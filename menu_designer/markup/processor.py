"""A tag-oriented HTML mutator that leaves untouched markup byte-for-byte intact.

``TagProcessor`` walks a BeautifulSoup tree to *find* tags, but never
re-serializes the tree. Instead it records the source offset of every opening
tag it visits and, on :meth:`TagProcessor.get_updated_html`, rewrites only the
opening tags whose attributes changed and splices in any queued markup. Text,
comments, SVG attribute casing, and whitespace elsewhere in the fragment are
returned exactly as they were received.

Examples
--------
>>> processor = TagProcessor('<nav class="menu"><svg viewBox="0 0 1 1"></svg></nav>')
>>> processor.next_tag("nav")
True
>>> processor.add_class("has-mobile-menu")
True
>>> processor.set_attribute("data-responsive-navigation", "true")
True
>>> processor.get_updated_html()
'<nav class="menu has-mobile-menu" data-responsive-navigation="true"><svg viewBox="0 0 1 1"></svg></nav>'
"""

from __future__ import annotations

import dataclasses as dc
import html
import re
import typing as typ

from bs4 import BeautifulSoup, Tag

if typ.TYPE_CHECKING:
    import collections.abc as cabc

START_TAG_PATTERN = re.compile(
    r"<[A-Za-z][^\s/>]*(?:[^>\"']|\"[^\"]*\"|'[^']*')*>", re.DOTALL
)
# html.parser reports source columns relative to the last "\n" only.
_NEWLINE = re.compile("\n")

AttrFilter = str | bool | re.Pattern[str] | typ.Callable[[str | None], bool]


@dc.dataclass(slots=True)
class _OpeningTag:
    """Source span of a located opening tag and the parsed element behind it."""

    start: int
    end: int
    element: Tag
    dirty: bool = False


class TagProcessor:
    """Locate tags in an HTML fragment and apply minimal in-place edits."""

    def __init__(self, markup: str) -> None:
        """Parse ``markup`` and position the cursor before the first tag.

        Parameters
        ----------
        markup : str
            HTML fragment to inspect. A fresh processor is expected per
            fragment; edits are tracked against this exact text.
        """
        self._markup = markup
        self._soup = BeautifulSoup(markup, "html.parser")
        self._line_offsets = _line_offsets(markup)
        self._spans: dict[int, _OpeningTag] = {}
        self._insertions: list[tuple[int, str]] = []
        self._current: _OpeningTag | None = None

    def next_tag(
        self,
        name: str | None = None,
        *,
        class_name: str | None = None,
        attrs: cabc.Mapping[str, AttrFilter] | None = None,
    ) -> bool:
        """Advance to the next opening tag matching the given filters.

        Parameters
        ----------
        name : str, optional
            Lowercase tag name to match; any tag when omitted.
        class_name : str, optional
            A single class token the tag's ``class`` attribute must contain.
        attrs : Mapping[str, AttrFilter], optional
            Extra attribute filters in BeautifulSoup ``find`` syntax (literal
            strings, compiled patterns, or predicates).

        Returns
        -------
        bool
            ``True`` when a tag was found; ``False`` leaves the cursor at the
            end of the document.
        """
        filters: dict[str, typ.Any] = dict(attrs or {})
        if class_name is not None:
            filters["class_"] = class_name
        cursor = self._current.element if self._current else None
        while True:
            if cursor is None:
                found = self._soup.find(name, **filters)
            else:
                found = cursor.find_next(name, **filters)
            if not isinstance(found, Tag):
                self._current = None
                return False
            span = self._locate(found)
            if span is not None:
                self._current = span
                return True
            cursor = found

    @property
    def current_element(self) -> Tag | None:
        """Return the parsed element under the cursor, if any."""
        return self._current.element if self._current else None

    def get_attribute(self, name: str) -> str | None:
        """Return the current tag's attribute value as source text would decode it."""
        if self._current is None:
            return None
        value = self._current.element.get(name)
        if isinstance(value, list):
            return " ".join(value)
        return value

    def has_class(self, class_name: str) -> bool:
        """Report whether the current tag carries ``class_name``."""
        if self._current is None:
            return False
        return class_name in self._current.element.get("class", [])

    def set_attribute(self, name: str, value: str) -> bool:
        """Set an attribute on the current tag.

        ``value`` is expected to be attribute-escaped already; it is stored
        decoded so that serialization escapes it exactly once.
        """
        if self._current is None:
            return False
        decoded = html.unescape(value)
        element = self._current.element
        if name.lower() == "class":
            element["class"] = decoded.split()
        else:
            element[name] = decoded
        self._current.dirty = True
        return True

    def add_class(self, class_name: str) -> bool:
        """Append ``class_name`` to the current tag unless it is already present."""
        if self._current is None:
            return False
        classes = list(self._current.element.get("class", []))
        if class_name not in classes:
            classes.append(class_name)
            self._current.element["class"] = classes
            self._current.dirty = True
        return True

    def insert_after_opening_tag(self, markup: str) -> bool:
        """Queue ``markup`` to be spliced in right after the current opening tag."""
        if self._current is None:
            return False
        self._insertions.append((self._current.end, markup))
        return True

    def get_updated_html(self) -> str:
        """Return the original markup with all queued edits applied."""
        # (start, kind, sequence, end, text); at one offset a tag rewrite is
        # applied before insertions, and insertions keep their queue order.
        edits: list[tuple[int, int, int, int, str]] = [
            (span.start, 1, 0, span.end, _render_opening_tag(span.element))
            for span in self._spans.values()
            if span.dirty
        ]
        edits.extend(
            (offset, 0, seq, offset, text)
            for seq, (offset, text) in enumerate(self._insertions)
        )
        if not edits:
            return self._markup

        updated = self._markup
        for start, _kind, _seq, end, text in sorted(edits, reverse=True):
            updated = updated[:start] + text + updated[end:]
        return updated

    def _locate(self, element: Tag) -> _OpeningTag | None:
        """Map a parsed element back to its opening tag's span in the source."""
        if element.sourceline is None or element.sourcepos is None:
            return None
        start = self._line_offsets[element.sourceline - 1] + element.sourcepos
        cached = self._spans.get(start)
        if cached is not None:
            return cached
        match = START_TAG_PATTERN.match(self._markup, start)
        if match is None:
            return None
        span = _OpeningTag(start=start, end=match.end(), element=element)
        self._spans[start] = span
        return span


def _line_offsets(markup: str) -> list[int]:
    """Return the character offset at which each source line begins."""
    return [0, *(match.end() for match in _NEWLINE.finditer(markup))]


def _render_opening_tag(element: Tag) -> str:
    """Serialize the opening tag of ``element`` from its current attributes."""
    parts = [element.name]
    for key, value in element.attrs.items():
        text = " ".join(value) if isinstance(value, list) else str(value)
        parts.append(f'{key}="{html.escape(text, quote=True)}"')
    return f"<{' '.join(parts)}>"


__all__ = ["START_TAG_PATTERN", "TagProcessor"]
