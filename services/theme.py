"""
Theme Setup Service

One-time theme feature registration (supports, menus, widget areas) plus
the small presentation helpers the page templates use: page title, body
classes and content width.
"""

from constants import (
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
from utils.logging import get_logger

LOG = get_logger('theme.setup')


class Sidebar:
    """A registered widget area."""

    def __init__(self, id, name, description='', **wrappers):
        self.id = id
        self.name = name
        self.description = description
        self.before_widget = wrappers.get('before_widget', WIDGET_WRAPPERS['before_widget'])
        self.after_widget = wrappers.get('after_widget', WIDGET_WRAPPERS['after_widget'])
        self.before_title = wrappers.get('before_title', WIDGET_WRAPPERS['before_title'])
        self.after_title = wrappers.get('after_title', WIDGET_WRAPPERS['after_title'])
        self.widgets = []

    @property
    def is_active(self):
        return bool(self.widgets)

    def add_widget(self, widget_id, title, body, css_class='widget_text'):
        self.widgets.append({'id': widget_id, 'title': title, 'body': body, 'class': css_class})

    def render(self):
        """Widget HTML wrapped in the area's before/after markup."""
        parts = []
        for widget in self.widgets:
            parts.append(self.before_widget % {'id': widget['id'], 'class': widget['class']})
            if widget['title']:
                parts.append(self.before_title + widget['title'] + self.after_title)
            parts.append(widget['body'])
            parts.append(self.after_widget)
        return ''.join(parts)


class ThemeSetup:
    """Theme features, declared once at startup."""

    def __init__(self):
        self.supports = {}
        self.nav_menus = {}
        self.sidebars = {}
        self.thumbnail_size = None
        self.content_width = CONTENT_WIDTH

    def add_theme_support(self, feature, args=True):
        self.supports[feature] = args

    def current_theme_supports(self, feature):
        return feature in self.supports

    def register_nav_menu(self, location, description):
        self.nav_menus[location] = description

    def register_sidebar(self, **args):
        sidebar = Sidebar(**args)
        self.sidebars[sidebar.id] = sidebar
        return sidebar

    def is_active_sidebar(self, sidebar_id):
        sidebar = self.sidebars.get(sidebar_id)
        return sidebar is not None and sidebar.is_active

    def get_content_width(self, full_width_template=False):
        """625 normally, 960 for full-width pages or when the main sidebar is empty."""
        if full_width_template or not self.is_active_sidebar('sidebar-1'):
            return FULL_CONTENT_WIDTH
        return self.content_width


def setup_theme(background_color=DEFAULT_BACKGROUND_COLOR):
    """Build the ThemeSetup with everything Twenty Twelve registers."""
    theme = ThemeSetup()
    theme.add_theme_support('automatic-feed-links')
    theme.add_theme_support('post-formats', list(POST_FORMATS))
    for location, description in NAV_MENUS.items():
        theme.register_nav_menu(location, description)
    theme.add_theme_support('custom-background', {'default-color': background_color})
    theme.add_theme_support('post-thumbnails')
    theme.thumbnail_size = POST_THUMBNAIL_SIZE
    for sidebar in SIDEBARS:
        theme.register_sidebar(**sidebar)
    LOG.debug('theme registered: %d sidebars, %d menus', len(theme.sidebars), len(theme.nav_menus))
    return theme


def page_menu_args(args=None):
    """Fallback page menu arguments; shows a Home link unless told otherwise."""
    args = dict(args or {})
    args.setdefault('show_home', True)
    return args


def format_page_title(title, sep, site_name, description='', is_front_page=False, page=1, is_404=False):
    """
    Build the <title> text: the view title followed by the site name, the
    tagline on the front page, and "Page N" on paginated views.
    """
    title = f'{title}{site_name}'
    if description and is_front_page:
        title = f'{title} {sep} {description}'
    if page >= 2 and not is_404:
        title = f'{title} {sep} Page {page}'
    return title


def body_classes(theme, classes=None, background_color='', background_image='',
                 font_queued=False, multi_author=False, full_width_template=False):
    """Extra <body> classes describing layout, background and font state."""
    classes = list(classes or [])
    if not theme.is_active_sidebar('sidebar-1') or full_width_template:
        classes.append('full-width')
    if not background_image:
        if not background_color:
            classes.append('custom-background-empty')
        elif background_color.lower() in WHITE_BACKGROUNDS:
            classes.append('custom-background-white')
    if font_queued:
        classes.append('custom-font-enabled')
    if not multi_author:
        classes.append('single-author')
    return classes
