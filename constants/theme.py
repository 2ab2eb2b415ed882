"""
Theme Feature Constants

Static declarations for theme supports, menus and widget areas.
"""

CONTENT_WIDTH = 625
FULL_CONTENT_WIDTH = 960

POST_FORMATS = ['aside', 'image', 'link', 'quote', 'status']

DEFAULT_BACKGROUND_COLOR = 'e6e6e6'
WHITE_BACKGROUNDS = {'fff', 'ffffff'}

POST_THUMBNAIL_SIZE = (624, 9999)  # Unlimited height, soft crop

NAV_MENUS = {
    'primary': 'Primary Menu',
}

_FRONT_PAGE_DESCRIPTION = 'Appears when using the optional Front Page template with a page set as Static Front Page'

SIDEBARS = [
    {
        'id': 'sidebar-1',
        'name': 'Main Sidebar',
        'description': 'Appears on posts and pages except the optional Front Page template, which has its own widgets',
    },
    {
        'id': 'sidebar-2',
        'name': 'First Front Page Widget Area',
        'description': _FRONT_PAGE_DESCRIPTION,
    },
    {
        'id': 'sidebar-3',
        'name': 'Second Front Page Widget Area',
        'description': _FRONT_PAGE_DESCRIPTION,
    },
]

WIDGET_WRAPPERS = {
    'before_widget': '<aside id="%(id)s" class="widget %(class)s">',
    'after_widget': '</aside>',
    'before_title': '<h3 class="widget-title">',
    'after_title': '</h3>',
}
