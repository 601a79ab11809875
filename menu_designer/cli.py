"""Cyclopts CLI entrypoint for previewing mobile-menu navigation markup.

The ``menu-designer`` console script assembles an in-process host (block
registry, hook table, style registry, and a Jinja template-part renderer),
installs :class:`~menu_designer.plugin.MobileMenuPlugin`, and pushes a saved
navigation fragment through the render filters. It is handy for checking what
a given set of block attributes does to real theme markup.

Examples
--------
Render a navigation fragment with attributes read from YAML:

>>> from menu_designer.cli import app
>>> app(
...     ["render", "--fragment", "nav.html", "--attrs", "attrs.yaml"]
... )  # doctest: +SKIP

Print the base stylesheet:

>>> from menu_designer.cli import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from loguru import logger
from ruamel.yaml import YAML

from .config import MenuDesignerSettings, load_settings
from .host import (
    BlockTypeRegistry,
    HookRegistry,
    JinjaTemplatePartRenderer,
    StyleRegistry,
    render_block,
)
from .plugin import ENQUEUE_HOOK, INIT_HOOK, MobileMenuPlugin

DEFAULT_CONFIG = Path("config/menu.yaml")

app = App(name="menu-designer", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_settings_or_default(config: Path) -> MenuDesignerSettings:
    """Load ``config`` when it exists; otherwise fall back to defaults."""
    if config.exists():
        return load_settings(config)
    return MenuDesignerSettings()


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan> | {message}",
    )


def _load_attributes(path: Path) -> dict[str, typ.Any]:
    """Read block attributes from a YAML (or JSON) mapping."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = f"Attributes file '{path}' must contain a mapping."
        raise TypeError(msg)
    return dict(loaded)


@app.command(help="Render a navigation fragment through the mobile-menu filter.")
def render(
    *,
    fragment: typ.Annotated[
        Path, Parameter(help="HTML file holding the rendered navigation block")
    ],
    attrs: typ.Annotated[
        Path | None, Parameter(help="YAML or JSON file with block attributes")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to settings", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    parts_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the template parts directory", env_var="INPUT_PARTS_DIR"),
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Write the result here instead of stdout")
    ] = None,
    block_name: typ.Annotated[
        str | None, Parameter(help="Override the block name passed to the filter")
    ] = None,
    verbose: bool = False,
) -> None:
    """Render ``fragment`` as a navigation block with the given attributes.

    Parameters
    ----------
    fragment : Path
        File containing the markup the host rendered for the block.
    attrs : Path or None, optional
        Mapping of block attributes such as ``mobileMenuSlug``; the block is
        rendered without attributes when omitted.
    config : Path, optional
        Settings file; defaults are used when it does not exist.
    parts_dir : Path or None, optional
        Directory of template parts overriding the configured one.
    output : Path or None, optional
        Destination file. The markup is printed to stdout when ``None``.
    block_name : str or None, optional
        Block name placed on the parsed block; defaults to the configured
        navigation block.
    verbose : bool, optional
        Log pipeline decisions at debug level.

    Raises
    ------
    FileNotFoundError
        If ``fragment`` or ``attrs`` does not exist.
    """
    settings = _load_settings_or_default(config)
    _configure_logging("DEBUG" if verbose else settings.log_level)

    hooks = HookRegistry()
    block_types = BlockTypeRegistry()
    block_types.register(settings.block_name)
    plugin = MobileMenuPlugin(
        settings,
        block_types=block_types,
        styles=StyleRegistry(),
        template_parts=JinjaTemplatePartRenderer(parts_dir or settings.template_parts_dir),
    )
    plugin.install(hooks)
    hooks.do_action(INIT_HOOK)

    block = {
        "blockName": block_name or settings.block_name,
        "attrs": _load_attributes(attrs) if attrs else {},
    }
    html = render_block(hooks, fragment.read_text(encoding="utf-8"), block)

    if output is None:
        print(html)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html if html.endswith("\n") else f"{html}\n", encoding="utf-8")
    print(f"wrote {_format_path(output)}")


@app.command(help="Print the base mobile-menu stylesheet.")
def styles(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to settings", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print the ``<style>`` element enqueued for the configured handle."""
    settings = _load_settings_or_default(config)
    registry = StyleRegistry()
    hooks = HookRegistry()
    MobileMenuPlugin(
        settings,
        block_types=BlockTypeRegistry(),
        styles=registry,
        template_parts=lambda slug: "",
    ).install(hooks)
    hooks.do_action(ENQUEUE_HOOK)
    print(registry.render(settings.style_handle))


def main() -> None:
    """Invoke the Cyclopts application behind the ``menu-designer`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
