"""
Services Package

Theme logic: option store, asset queue, shortcodes, HTTPS redirect and
theme feature setup.
"""

from .options import (
    OptionError,
    get_option,
    get_options,
    is_enabled,
    update_option,
    save_option_group,
)

from .assets import (
    AssetError,
    AssetQueue,
    get_font_url,
    build_front_queue,
    build_admin_queue,
)

from .shortcodes import (
    ShortcodeRegistry,
    parse_atts,
    shortcode_atts,
    social_media_shortcode,
    present_year_shortcode,
    build_registry,
)

from .https import (
    https_target,
    request_uri,
    register_https_redirect,
)

from .theme import (
    ThemeSetup,
    setup_theme,
    page_menu_args,
    format_page_title,
    body_classes,
)

__all__ = [
    # Options
    'OptionError',
    'get_option',
    'get_options',
    'is_enabled',
    'update_option',
    'save_option_group',
    # Assets
    'AssetError',
    'AssetQueue',
    'get_font_url',
    'build_front_queue',
    'build_admin_queue',
    # Shortcodes
    'ShortcodeRegistry',
    'parse_atts',
    'shortcode_atts',
    'social_media_shortcode',
    'present_year_shortcode',
    'build_registry',
    # HTTPS
    'https_target',
    'request_uri',
    'register_https_redirect',
    # Theme
    'ThemeSetup',
    'setup_theme',
    'page_menu_args',
    'format_page_title',
    'body_classes',
]
