"""Asset queue and option-driven asset inclusion."""
import pytest
from bs4 import BeautifulSoup

from constants import assets as A
from services import AssetError, AssetQueue, build_front_queue, build_admin_queue, get_font_url


def static_url(path):
    return '/static/' + path


def _srcs(markup, attr):
    tag = 'link' if attr == 'href' else 'script'
    return [el[attr] for el in BeautifulSoup(str(markup), 'html.parser').find_all(tag)]


def test_first_enqueue_of_a_handle_wins():
    queue = AssetQueue()
    assert queue.enqueue_style('owl-min', '/a.css')
    assert not queue.enqueue_style('owl-min', '/b.css')

    assert _srcs(queue.style_tags(), 'href') == ['/a.css']


def test_dependencies_render_before_dependents():
    queue = AssetQueue()
    queue.register_script('jquery', '/jquery.js')
    queue.enqueue_script('nav', '/nav.js', deps=['jquery'])
    queue.enqueue_script('other', '/other.js')

    assert _srcs(queue.head_script_tags(), 'src') == ['/jquery.js', '/nav.js', '/other.js']


def test_registered_only_assets_are_not_emitted():
    queue = AssetQueue()
    queue.register_script('jquery', '/jquery.js')
    queue.enqueue_script('app', '/app.js')

    assert _srcs(queue.head_script_tags(), 'src') == ['/app.js']


def test_registered_style_emitted_only_as_dependency():
    queue = AssetQueue()
    assert queue.register_style('base', '/base.css')
    assert not queue.register_style('base', '/other.css')
    assert str(queue.style_tags()) == ''

    queue.enqueue_style('theme', '/theme.css', deps=['base'])

    assert _srcs(queue.style_tags(), 'href') == ['/base.css', '/theme.css']
    assert queue.style_is_queued('theme')
    assert not queue.style_is_queued('base')


def test_unknown_dependency_is_skipped():
    queue = AssetQueue()
    queue.enqueue_script('nav', '/nav.js', deps=['missing'])

    assert _srcs(queue.head_script_tags(), 'src') == ['/nav.js']


def test_version_query_and_footer_split():
    queue = AssetQueue()
    queue.enqueue_script('head', '/head.js', ver='1.0')
    queue.enqueue_script('foot', '/foot.js?x=1', ver='2', in_footer=True)

    assert _srcs(queue.head_script_tags(), 'src') == ['/head.js?ver=1.0']
    assert _srcs(queue.footer_script_tags(), 'src') == ['/foot.js?x=1&ver=2']


def test_conditional_stylesheet_wrapped_in_ie_comment():
    queue = AssetQueue()
    queue.enqueue_style('ie', '/ie.css', conditional='lt IE 9')

    html = str(queue.style_tags())
    assert html.startswith('<!--[if lt IE 9]>')
    assert html.endswith('<![endif]-->')


def test_empty_handle_rejected():
    with pytest.raises(AssetError):
        AssetQueue().enqueue_style('', '/x.css')


def test_font_url_subsets():
    assert get_font_url() == (
        'https://fonts.googleapis.com/css?family=Open+Sans:400italic,700italic,400,700'
        '&subset=latin,latin-ext'
    )
    assert get_font_url(subset='greek').endswith('&subset=latin,latin-ext,greek,greek-ext')
    assert get_font_url(subset='cyrillic').endswith(',cyrillic,cyrillic-ext')
    assert get_font_url(subset='vietnamese').endswith('latin-ext,vietnamese')
    assert get_font_url(subset='klingon').endswith('&subset=latin,latin-ext')
    assert get_font_url(enabled=False) == ''


TOGGLES = {
    'font_awesome': [A.FONT_AWESOME_CSS],
    'owl': [A.OWL_THEME_CSS, A.OWL_CAROUSEL_CSS, A.OWL_CAROUSEL_JS],
    'jquery_min': [A.JQUERY_MIN_JS],
    'parallax': [A.PARALLAX_JS],
}


def _all_urls(queue):
    return (
        _srcs(queue.style_tags(), 'href') +
        _srcs(queue.head_script_tags(), 'src') +
        _srcs(queue.footer_script_tags(), 'src')
    )


@pytest.mark.parametrize('key', sorted(TOGGLES))
@pytest.mark.parametrize('value,present', [
    ('true', True),
    ('True', False),
    ('1', False),
    ('yes', False),
    ('', False),
])
def test_toggle_controls_asset_presence(key, value, present):
    urls = _all_urls(build_front_queue({key: value}, static_url))
    for url in TOGGLES[key]:
        assert (url in urls) is present


def test_owl_transitions_never_emitted():
    urls = _all_urls(build_front_queue({'owl': 'true'}, static_url))
    assert A.OWL_TRANSITIONS_CSS not in urls


def test_default_assets_always_present():
    queue = build_front_queue({}, static_url, core_jquery_url='/core/jquery.js')
    styles = _srcs(queue.style_tags(), 'href')
    head = _srcs(queue.head_script_tags(), 'src')
    footer = _srcs(queue.footer_script_tags(), 'src')

    for path in ('css/grid.css', 'css/overlap.css', 'css/responsive.css', 'style.css'):
        assert static_url(path) in styles
    assert head == ['/core/jquery.js']
    assert footer == [
        '/static/js/navigation.js?ver=20140711',
        '/static/js/script.js',
    ]
    assert queue.style_is_queued('twentytwelve-ie')
    assert not queue.style_is_queued('twentytwelve-fonts')
    assert queue.script_is_queued('jpc-script')
    assert queue.script_is_queued('twentytwelve-navigation')
    assert not queue.script_is_queued('jquery')
    assert not queue.script_is_queued('parallax')


def test_front_queue_order():
    options = {key: 'true' for key in TOGGLES}
    queue = build_front_queue(options, static_url, font_url='https://fonts.example/css')
    styles = _srcs(queue.style_tags(), 'href')

    assert styles == [
        'https://fonts.example/css',
        '/static/style.css',
        A.FONT_AWESOME_CSS,
        A.OWL_THEME_CSS,
        A.OWL_CAROUSEL_CSS,
        '/static/css/grid.css',
        '/static/css/overlap.css',
        '/static/css/responsive.css',
    ]
    scripts = _srcs(queue.footer_script_tags(), 'src')
    assert scripts[-4:] == [A.JQUERY_MIN_JS, A.OWL_CAROUSEL_JS, A.PARALLAX_JS, '/static/js/script.js']


def test_admin_queue_only_has_backend_css():
    queue = build_admin_queue(static_url)
    assert _srcs(queue.style_tags(), 'href') == ['/static/css/backend.css']
    assert str(queue.footer_script_tags()) == ''


@pytest.mark.parametrize('value,present', [('true', True), ('false', False), ('', False)])
def test_front_page_reflects_font_awesome_option(client, parse_html, set_options, value, present):
    set_options(font_awesome=value)
    page = parse_html(client.get('/'))
    hrefs = [link['href'] for link in page.find_all('link', rel='stylesheet')]
    assert (A.FONT_AWESOME_CSS in hrefs) is present


def test_front_page_footer_scripts(client, parse_html, set_options):
    set_options(parallax='true', jquery_min='true')
    srcs = [s['src'] for s in parse_html(client.get('/')).find_all('script', src=True)]

    assert A.PARALLAX_JS in srcs
    assert A.JQUERY_MIN_JS in srcs
    assert A.OWL_CAROUSEL_JS not in srcs
