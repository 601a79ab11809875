"""Common literal values shared across menu_designer.

Class names, selectors, and attribute names are centralized here so the
pipeline stages, the stylesheet generator, and the tests agree on the exact
markup the navigation block emits.

Examples
--------
>>> from menu_designer import _constants
>>> _constants.PRESET_COLOR_TEMPLATE.format(name="primary")
'var(--wp--preset--color--primary)'
>>> _constants.RESPONSIVE_CONTAINER_CONTENT
'wp-block-navigation__responsive-container-content'
"""

NAVIGATION_BLOCK = "core/navigation"
NAVIGATION_TAG = "nav"
STYLE_HANDLE = "wp-block-navigation"
ID_PREFIX = "nav-"
DEFAULT_BREAKPOINT = 600

PRESET_COLOR_TEMPLATE = "var(--wp--preset--color--{name})"

RESPONSIVE_CONTAINER = "wp-block-navigation__responsive-container"
RESPONSIVE_CONTAINER_CONTENT = f"{RESPONSIVE_CONTAINER}-content"
RESPONSIVE_CONTAINER_OPEN = f"{RESPONSIVE_CONTAINER}-open"
RESPONSIVE_CONTAINER_CLOSE = f"{RESPONSIVE_CONTAINER}-close"
MOBILE_MENU_CONTENT = "wp-block-navigation__mobile-menu-content"
CONTENT_ID_SUFFIX = "-content"

HAS_MOBILE_MENU_CLASS = "has-mobile-menu"
DATA_MOBILE_MENU = "data-mobile-menu"
DATA_MOBILE_MENU_SLUG = "data-mobile-menu-slug"
DATA_MOBILE_MENU_BG = "data-mobile-menu-bg"
DATA_RESPONSIVE_NAVIGATION = "data-responsive-navigation"
