"""
Theme Option Schema

Declares every option in the theme's option group and how the
Theme Options page renders it. The settings form, the option store and
the POST handler all iterate this schema.
"""

from collections import namedtuple

# kind is one of 'text', 'checkbox', 'textarea'
OptionField = namedtuple('OptionField', ['name', 'label', 'kind', 'placeholder', 'help'])
OptionSection = namedtuple('OptionSection', ['title', 'fields'])

OPTION_GROUP = 'option-group'

# Checkbox options store this literal when ticked
TRUE_VALUE = 'true'

OPTION_SECTIONS = [
    OptionSection('I. Social Media', [
        OptionField('facebook', 'Facebook', 'text', 'Facebook', None),
        OptionField('twitter', 'Twitter', 'text', 'Twitter', None),
        OptionField('google_plus', 'Google Plus', 'text', 'Google Plus', None),
        OptionField('linkedin', 'LinkedIn', 'text', 'LinkedIN', None),
        OptionField('youtube', 'Youtube', 'text', 'Youtube', None),
        OptionField('instagram', 'Instagram', 'text', 'Instagram', None),
        OptionField('pinterest', 'Pinterest', 'text', 'Pinterest', None),
    ]),
    OptionSection('II. Website Settings', [
        OptionField('favicon', 'Frontend Favicon', 'text', 'Frontend Favicon', None),
        OptionField('admin_favicon', 'Backend Favicon', 'text', 'Admin Backend Favicon', None),
        OptionField('ssl', 'Force SSL: (Redirect To HTTPS)', 'checkbox', None, None),
    ]),
    OptionSection('III. Enable Theme Features', [
        OptionField('font_awesome', 'FontAwesome v4.4.0', 'checkbox', None,
                    {'href': 'https://fortawesome.github.io/Font-Awesome/icons/', 'text': 'Read Documentation'}),
        OptionField('jquery_min', 'jQuery min v1.11.2', 'checkbox', None, None),
        OptionField('owl', 'Owl Carousel v1.3', 'checkbox', None,
                    {'href': 'http://www.owlcarousel.owlgraphic.com/demos/demos.html', 'text': 'Read Documentation'}),
        OptionField('parallax', 'JS Parallax Scrolling', 'checkbox', None,
                    {'href': None, 'text': 'Example :  $("SELECTOR").parallax("50%", 0.1);'}),
    ]),
    OptionSection('IV. Copyright Section', [
        OptionField('copyright', 'Copyright', 'textarea', None, None),
        OptionField('developer', 'Developer', 'textarea', None, None),
    ]),
]

# Registered option names, in form order
OPTION_KEYS = [field.name for section in OPTION_SECTIONS for field in section.fields]

SOCIAL_KEYS = [field.name for field in OPTION_SECTIONS[0].fields]

# Admin menu entry for the options page
ADMIN_MENU = {
    'page_title': 'Theme Options',
    'menu_title': 'Theme Options',
    'capability': 'manage_options',
    'slug': 'theme-options',
    'position': 99,
}
