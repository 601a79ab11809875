"""In-memory registry of block types and their attribute schemas."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(slots=True)
class BlockType:
    """A registered block type.

    Attributes
    ----------
    name : str
        Namespaced block name, for example ``"core/navigation"``.
    attributes : dict[str, dict[str, Any]]
        Attribute schemas keyed by attribute name; each schema holds a
        ``type`` tag and a ``default`` value.
    """

    name: str
    attributes: dict[str, dict[str, typ.Any]] = dc.field(default_factory=dict)


class BlockTypeRegistry:
    """Keep track of the block types known to the renderer."""

    def __init__(self) -> None:
        self._block_types: dict[str, BlockType] = {}

    def register(
        self, name: str, attributes: dict[str, dict[str, typ.Any]] | None = None
    ) -> BlockType:
        """Register ``name`` and return its block type.

        Raises
        ------
        ValueError
            If a block type with the same name is already registered.
        """
        if name in self._block_types:
            msg = f"Block type '{name}' is already registered."
            raise ValueError(msg)
        block_type = BlockType(name=name, attributes=dict(attributes or {}))
        self._block_types[name] = block_type
        return block_type

    def get_registered(self, name: str) -> BlockType | None:
        """Return the block type registered under ``name``, if any."""
        return self._block_types.get(name)

    def is_registered(self, name: str) -> bool:
        """Report whether ``name`` has been registered."""
        return name in self._block_types


__all__ = ["BlockType", "BlockTypeRegistry"]
