"""
Shortcode Service

Text macros of the form [tag attr="value"] expanded while rendering.

Supported forms:
    [tag]  [tag a="1" b='2' c=3 positional]  [tag /]  [tag]content[/tag]
    [[tag]]  renders the literal [tag]

Tags with no registered handler are left in the text unchanged.
"""

import re
from datetime import date

from utils.logging import get_logger

LOG = get_logger('theme.shortcodes')

_ATTR_PATTERN = re.compile(
    r'([\w-]+)\s*=\s*"([^"]*)"(?:\s|$)'
    r"|([\w-]+)\s*=\s*'([^']*)'(?:\s|$)"
    r'|([\w-]+)\s*=\s*([^\s\'"]+)(?:\s|$)'
    r'|"([^"]*)"(?:\s|$)'
    r"|'([^']*)'(?:\s|$)"
    r'|(\S+)(?:\s|$)'
)


def parse_atts(text):
    """
    Parse a shortcode attribute string into a dict.

    Named attributes are lower-cased keys. Positional values are stored
    under integer keys in order of appearance.
    """
    atts = {}
    position = 0
    text = (text or '').replace('\u00a0', ' ').replace('\u200b', ' ')
    for match in _ATTR_PATTERN.finditer(text.strip()):
        groups = match.groups()
        if groups[0] is not None:
            atts[groups[0].lower()] = groups[1]
        elif groups[2] is not None:
            atts[groups[2].lower()] = groups[3]
        elif groups[4] is not None:
            atts[groups[4].lower()] = groups[5]
        else:
            value = next(g for g in groups[6:] if g is not None)
            atts[position] = value
            position += 1
    return atts


def shortcode_atts(defaults, atts):
    """Merge user attributes over defaults, dropping keys the defaults don't know."""
    atts = atts or {}
    return {key: atts.get(key, default) for key, default in defaults.items()}


class ShortcodeRegistry:
    """Registered shortcode handlers and the expander that calls them."""

    def __init__(self):
        self._handlers = {}

    def add(self, tag, handler):
        if not tag or not re.match(r'^[^<>&/\[\]\x00-\x20=]+$', tag):
            raise ValueError(f'Invalid shortcode name: {tag!r}')
        self._handlers[tag] = handler

    def remove(self, tag):
        self._handlers.pop(tag, None)

    def has(self, tag):
        return tag in self._handlers

    @property
    def tags(self):
        return list(self._handlers)

    def _pattern(self, tags):
        names = '|'.join(re.escape(t) for t in sorted(tags, key=len, reverse=True))
        return re.compile(
            r'\[(\[?)'                       # 1: opening escape bracket
            r'(' + names + r')'              # 2: tag
            r'(?![\w-])'
            r'([^\]/]*(?:/(?!\])[^\]/]*)*?)'  # 3: attributes
            r'(?:(/)\]'                      # 4: self-closing
            r'|\](?:((?:(?!\[/\2\]).)*?)\[/\2\])?)'  # 5: enclosed content
            r'(\]?)',                        # 6: closing escape bracket
            re.DOTALL
        )

    def do_shortcode(self, content, exclude=()):
        """Expand every registered shortcode found in content, except tags in exclude."""
        tags = [t for t in self._handlers if t not in exclude]
        if not content or '[' not in content or not tags:
            return content or ''
        return self._pattern(tags).sub(self._replace, content)

    def _replace(self, match):
        if match.group(1) == '[' and match.group(6) == ']':
            return match.group(0)[1:-1]
        tag = match.group(2)
        handler = self._handlers.get(tag)
        if handler is None:
            LOG.debug('no handler for shortcode tag=%s', tag)
            return match.group(0)
        atts = parse_atts(match.group(3))
        output = handler(atts, match.group(5), tag)
        return match.group(1) + ('' if output is None else str(output)) + match.group(6)


def social_media_shortcode(atts, content=None, tag=None):
    """
    [social-media mode="..."]

    Returns the mode attribute itself (default "type"). It does not look up
    the social link options.
    """
    attrs = shortcode_atts({'mode': 'type'}, atts)
    return attrs['mode']


def present_year_shortcode(atts, content=None, tag=None, today=None):
    """[year]: the current four-digit year."""
    today = today or date.today()
    return f'{today.year:04d}'


FOOTER_TAGS = ('copyright', 'developer')


def option_text_shortcode(registry, get_option):
    """
    Build a handler returning the option named by the tag. Shortcodes inside
    the stored text are expanded too, apart from the footer tags themselves.
    """
    def handler(atts, content=None, tag=None):
        return registry.do_shortcode(get_option(tag), exclude=FOOTER_TAGS)
    return handler


def build_registry(get_option):
    """Registry with the theme's shortcodes: social-media, year, copyright, developer."""
    registry = ShortcodeRegistry()
    registry.add('social-media', social_media_shortcode)
    registry.add('year', present_year_shortcode)
    footer_text = option_text_shortcode(registry, get_option)
    for tag in FOOTER_TAGS:
        registry.add(tag, footer_text)
    return registry
