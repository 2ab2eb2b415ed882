"""
Asset Constants

External resource URLs and theme-local asset paths. CDN URLs are fixed;
options only decide whether they are included.
"""

FONT_AWESOME_CSS = '//maxcdn.bootstrapcdn.com/font-awesome/4.4.0/css/font-awesome.min.css'

OWL_BASE = '//cdnjs.cloudflare.com/ajax/libs/owl-carousel/1.3.3/'
OWL_THEME_CSS = OWL_BASE + 'owl.theme.min.css'
OWL_CAROUSEL_CSS = OWL_BASE + 'owl.carousel.min.css'
OWL_TRANSITIONS_CSS = OWL_BASE + 'owl.transitions.min.css'
OWL_CAROUSEL_JS = OWL_BASE + 'owl.carousel.min.js'

JQUERY_MIN_JS = '//ajax.googleapis.com/ajax/libs/jquery/1.11.2/jquery.min.js'

PARALLAX_JS = (
    '//98dc1135b51d57ecfe2587983663a0675c3218de.googledrive.com'
    '/host/0B69r3TVJZkc4QnhwUGY3T1NsTFU/parallax.js'
)

GOOGLE_FONTS_CSS = 'https://fonts.googleapis.com/css'
OPEN_SANS_FAMILY = 'Open+Sans:400italic,700italic,400,700'
FONT_BASE_SUBSETS = 'latin,latin-ext'
FONT_EXTRA_SUBSETS = {
    'cyrillic': ',cyrillic,cyrillic-ext',
    'greek': ',greek,greek-ext',
    'vietnamese': ',vietnamese',
}

# Theme-local files, relative to the static folder
THEME_STYLESHEET = 'style.css'
IE_STYLESHEET = 'css/ie.css'
NAVIGATION_JS = 'js/navigation.js'
BACKEND_CSS = 'css/backend.css'
DEFAULT_STYLES = [
    ('grid', 'css/grid.css'),
    ('overlap', 'css/overlap.css'),
    ('responsive', 'css/responsive.css'),
]
THEME_SCRIPT = ('jpc-script', 'js/script.js')

NAVIGATION_JS_VERSION = '20140711'
IE_STYLESHEET_VERSION = '20121010'
