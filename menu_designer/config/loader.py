"""Load mobile-menu settings from YAML."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .models import MenuDesignerSettings, SettingsError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_settings(path: Path) -> MenuDesignerSettings:
    """Load the YAML file describing how navigation blocks are enhanced.

    Parameters
    ----------
    path : Path
        Filesystem path to the settings file (for example,
        ``config/menu.yaml``).

    Returns
    -------
    MenuDesignerSettings
        Parsed settings; keys missing from the ``mobile_menu`` and ``logging``
        sections fall back to their defaults.

    Raises
    ------
    FileNotFoundError
        If the settings file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SettingsError
        If a value is invalid (an empty block name or ID prefix, a negative
        breakpoint, or a non-integer priority).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> settings = load_settings(Path("config/menu.yaml"))  # doctest: +SKIP
    >>> settings.block_name  # doctest: +SKIP
    'core/navigation'
    """
    if not path.exists():
        msg = f"Settings file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)

    menu = loaded.get("mobile_menu") or {}
    logging_raw = loaded.get("logging") or {}
    if not isinstance(menu, dict) or not isinstance(logging_raw, dict):
        msg = "'mobile_menu' and 'logging' must be mappings."
        raise SettingsError(msg)

    defaults = MenuDesignerSettings()
    parts_dir = path.parent / str(
        menu.get("template_parts_dir", defaults.template_parts_dir)
    )
    return MenuDesignerSettings(
        block_name=_required_text(menu, "block_name", defaults.block_name),
        style_handle=_required_text(menu, "style_handle", defaults.style_handle),
        id_prefix=_required_text(menu, "id_prefix", defaults.id_prefix),
        template_parts_dir=parts_dir,
        default_breakpoint=_integer(
            menu, "default_breakpoint", defaults.default_breakpoint, minimum=0
        ),
        init_priority=_integer(menu, "init_priority", defaults.init_priority),
        render_priority=_integer(menu, "render_priority", defaults.render_priority),
        log_level=str(logging_raw.get("level", defaults.log_level)).upper(),
    )


def _required_text(payload: dict[str, typ.Any], key: str, default: str) -> str:
    """Return a non-empty stripped string for ``key``."""
    text = str(payload.get(key, default) or "").strip()
    if not text:
        msg = f"'mobile_menu.{key}' must not be empty."
        raise SettingsError(msg)
    return text


def _integer(
    payload: dict[str, typ.Any], key: str, default: int, *, minimum: int | None = None
) -> int:
    """Return ``key`` as an integer, enforcing ``minimum`` when given."""
    value = payload.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"'mobile_menu.{key}' must be an integer, got {value!r}."
        raise SettingsError(msg)
    if minimum is not None and value < minimum:
        msg = f"'mobile_menu.{key}' must be at least {minimum}, got {value}."
        raise SettingsError(msg)
    return value


__all__ = ["load_settings"]
