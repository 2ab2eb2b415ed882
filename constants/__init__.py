"""
Constants Package

Static theme data: the option schema, asset URLs and feature declarations.
"""

from .options import (
    OptionField,
    OptionSection,
    OPTION_GROUP,
    OPTION_SECTIONS,
    OPTION_KEYS,
    SOCIAL_KEYS,
    ADMIN_MENU,
    TRUE_VALUE,
)
from .theme import (
    CONTENT_WIDTH,
    FULL_CONTENT_WIDTH,
    POST_FORMATS,
    DEFAULT_BACKGROUND_COLOR,
    WHITE_BACKGROUNDS,
    POST_THUMBNAIL_SIZE,
    NAV_MENUS,
    SIDEBARS,
    WIDGET_WRAPPERS,
)
from . import assets
