"""Request-scoped unique identifiers."""

from __future__ import annotations

import itertools


class UniqueIdGenerator:
    """Hand out identifiers that never repeat for the lifetime of the generator.

    Examples
    --------
    >>> unique_id = UniqueIdGenerator()
    >>> unique_id("nav-"), unique_id("nav-")
    ('nav-1', 'nav-2')
    """

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def __call__(self, prefix: str = "") -> str:
        """Return ``prefix`` followed by the next counter value."""
        return f"{prefix}{next(self._counter)}"


__all__ = ["UniqueIdGenerator"]
