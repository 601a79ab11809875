"""Load and validate settings for the mobile-menu renderer.

:func:`load_settings` reads a YAML file with a ``mobile_menu`` section and an
optional ``logging`` section and returns a :class:`MenuDesignerSettings`.
Callers that do not use a file can instantiate :class:`MenuDesignerSettings`
directly; every field has a default.

Examples
--------
>>> from menu_designer.config import MenuDesignerSettings
>>> MenuDesignerSettings().block_name
'core/navigation'
"""

from .loader import load_settings
from .models import MenuDesignerSettings, SettingsError

__all__ = ["MenuDesignerSettings", "SettingsError", "load_settings"]
