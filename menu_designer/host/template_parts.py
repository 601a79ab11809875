"""Render template parts by slug.

The pipeline only needs a callable ``slug -> html``. :class:`JinjaTemplatePartRenderer`
provides one backed by a directory of ``<slug>.html`` Jinja templates, so a
mobile menu can be authored as a plain HTML partial with optional context
variables.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound
from loguru import logger


class TemplatePartRenderer(typ.Protocol):
    """Render the template part named ``slug``; return ``""`` when it is unknown."""

    def __call__(self, slug: str) -> str: ...


class JinjaTemplatePartRenderer:
    """Render template parts from ``<parts_dir>/<slug>.html`` files."""

    suffix = ".html"

    def __init__(
        self,
        parts_dir: Path,
        *,
        context: cabc.Mapping[str, typ.Any] | None = None,
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        parts_dir : Path
            Directory holding one template file per part.
        context : Mapping[str, Any], optional
            Variables made available to every template part.
        """
        self.parts_dir = parts_dir
        self.context = dict(context or {})
        self.env = Environment(
            loader=FileSystemLoader(str(parts_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def __call__(self, slug: str) -> str:
        """Return the rendered part, or ``""`` when it is missing or broken."""
        if not slug:
            return ""
        try:
            template = self.env.get_template(f"{slug}{self.suffix}")
            return template.render(slug=slug, **self.context)
        except TemplateNotFound:
            logger.debug("Template part {!r} not found in {}", slug, self.parts_dir)
            return ""
        except (TemplateError, OSError) as exc:
            logger.warning("Failed to render template part {!r}: {}", slug, exc)
            return ""


__all__ = ["JinjaTemplatePartRenderer", "TemplatePartRenderer"]
