"""
Asset Queue Service

Collects the stylesheets and scripts a page needs and renders them as
<link>/<script> tags. Handles are unique: the first enqueue of a handle
wins and later ones are ignored. Registered-but-not-enqueued handles are
only emitted when something depends on them.
"""

from markupsafe import Markup, escape

from constants import assets as A
from utils.logging import get_logger
from .options import is_enabled

LOG = get_logger('theme.assets')


class AssetError(ValueError):
    """Raised for malformed asset registrations."""
    pass


class Asset:
    """A single stylesheet or script."""

    def __init__(self, handle, src, deps=(), ver=None, media='all', in_footer=False, conditional=None):
        self.handle = handle
        self.src = src
        self.deps = list(deps)
        self.ver = ver
        self.media = media
        self.in_footer = in_footer
        self.conditional = conditional

    @property
    def url(self):
        if not self.ver:
            return self.src
        sep = '&' if '?' in self.src else '?'
        return f'{self.src}{sep}ver={self.ver}'

    def __repr__(self):
        return f'<Asset {self.handle} {self.src}>'


class _Queue:
    """Ordered handle registry for one asset type."""

    def __init__(self):
        self.registered = {}
        self.queue = []

    def register(self, asset):
        if not asset.handle:
            raise AssetError('Asset handle is required')
        if asset.handle in self.registered:
            return False
        self.registered[asset.handle] = asset
        return True

    def enqueue(self, asset):
        self.register(asset)
        if asset.handle in self.queue:
            LOG.debug('duplicate enqueue ignored handle=%s', asset.handle)
            return False
        self.queue.append(asset.handle)
        return True

    def is_queued(self, handle):
        return handle in self.queue

    def resolve(self):
        """Return queued assets with their dependencies first, each once."""
        done = []
        seen = set()

        def visit(handle, chain):
            if handle in seen:
                return
            asset = self.registered.get(handle)
            if asset is None:
                LOG.debug('unknown dependency skipped handle=%s', handle)
                return
            if handle in chain:
                LOG.debug('dependency cycle skipped handle=%s', handle)
                return
            for dep in asset.deps:
                visit(dep, chain | {handle})
            seen.add(handle)
            done.append(asset)

        for handle in self.queue:
            visit(handle, frozenset())
        return done


class AssetQueue:
    """Per-request style and script queue."""

    def __init__(self):
        self.styles = _Queue()
        self.scripts = _Queue()

    def register_style(self, handle, src, deps=(), ver=None, media='all', conditional=None):
        return self.styles.register(Asset(handle, src, deps, ver, media=media, conditional=conditional))

    def enqueue_style(self, handle, src, deps=(), ver=None, media='all', conditional=None):
        return self.styles.enqueue(Asset(handle, src, deps, ver, media=media, conditional=conditional))

    def register_script(self, handle, src, deps=(), ver=None, in_footer=False):
        return self.scripts.register(Asset(handle, src, deps, ver, in_footer=in_footer))

    def enqueue_script(self, handle, src, deps=(), ver=None, in_footer=False):
        return self.scripts.enqueue(Asset(handle, src, deps, ver, in_footer=in_footer))

    def style_is_queued(self, handle):
        return self.styles.is_queued(handle)

    def script_is_queued(self, handle):
        return self.scripts.is_queued(handle)

    def style_tags(self):
        return Markup('\n').join(_style_tag(asset) for asset in self.styles.resolve())

    def head_script_tags(self):
        return Markup('\n').join(
            _script_tag(asset) for asset in self.scripts.resolve() if not asset.in_footer
        )

    def footer_script_tags(self):
        return Markup('\n').join(
            _script_tag(asset) for asset in self.scripts.resolve() if asset.in_footer
        )


def _style_tag(asset):
    tag = Markup(
        '<link rel="stylesheet" id="{}-css" href="{}" type="text/css" media="{}" />'
    ).format(asset.handle, asset.url, asset.media)
    if asset.conditional:
        return Markup('<!--[if {}]>\n{}\n<![endif]-->').format(Markup(asset.conditional), tag)
    return tag


def _script_tag(asset):
    return Markup('<script type="text/javascript" src="{}"></script>').format(asset.url)


def get_font_url(enabled=True, subset='no-subset'):
    """
    Return the Google Fonts stylesheet URL for Open Sans, or '' when the
    font is disabled. An extra character subset may be requested with
    'cyrillic', 'greek' or 'vietnamese'.
    """
    if not enabled:
        return ''
    subsets = A.FONT_BASE_SUBSETS + A.FONT_EXTRA_SUBSETS.get(subset, '')
    return f'{A.GOOGLE_FONTS_CSS}?family={A.OPEN_SANS_FAMILY}&subset={subsets}'


def enqueue_parent_assets(queue, static_url, font_url=''):
    """Twenty Twelve's own navigation script, web font and stylesheets."""
    queue.enqueue_script(
        'twentytwelve-navigation', static_url(A.NAVIGATION_JS), deps=['jquery'],
        ver=A.NAVIGATION_JS_VERSION, in_footer=True
    )
    if font_url:
        queue.enqueue_style('twentytwelve-fonts', font_url)
    queue.enqueue_style('twentytwelve-style', static_url(A.THEME_STYLESHEET))
    queue.enqueue_style(
        'twentytwelve-ie', static_url(A.IE_STYLESHEET), deps=['twentytwelve-style'],
        ver=A.IE_STYLESHEET_VERSION, conditional='lt IE 9'
    )


def enqueue_theme_assets(queue, options, static_url):
    """
    Front-end assets driven by the theme options.

    Each toggle adds its CDN resources only when the stored value is exactly
    "true". The grid/overlap/responsive styles and the theme script always load.
    """
    if is_enabled('font_awesome', options):
        queue.enqueue_style('font-awesome', A.FONT_AWESOME_CSS)
    if is_enabled('owl', options):
        queue.enqueue_style('owl-theme', A.OWL_THEME_CSS)
        queue.enqueue_style('owl-min', A.OWL_CAROUSEL_CSS)
        # Same handle as above, so this one never makes it into the page
        queue.enqueue_style('owl-min', A.OWL_TRANSITIONS_CSS)

    for handle, path in A.DEFAULT_STYLES:
        queue.enqueue_style(handle, static_url(path))

    if is_enabled('jquery_min', options):
        queue.enqueue_script('jquery-min', A.JQUERY_MIN_JS, in_footer=True)
    if is_enabled('owl', options):
        queue.enqueue_script('owl-js', A.OWL_CAROUSEL_JS, in_footer=True)
    if is_enabled('parallax', options):
        queue.enqueue_script('parallax', A.PARALLAX_JS, in_footer=True)

    handle, path = A.THEME_SCRIPT
    queue.enqueue_script(handle, static_url(path), in_footer=True)


def enqueue_admin_assets(queue, static_url):
    queue.enqueue_style('backend-css-styles', static_url(A.BACKEND_CSS))


def build_front_queue(options, static_url, core_jquery_url=None, font_url=''):
    """Assemble the full front-end queue for one page render."""
    queue = AssetQueue()
    if core_jquery_url:
        queue.register_script('jquery', core_jquery_url)
    enqueue_parent_assets(queue, static_url, font_url=font_url)
    enqueue_theme_assets(queue, options, static_url)
    return queue


def build_admin_queue(static_url):
    queue = AssetQueue()
    enqueue_admin_assets(queue, static_url)
    return queue
