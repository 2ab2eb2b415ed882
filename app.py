from flask import Flask, render_template, request, redirect, url_for, flash, g, current_app
from flask_migrate import Migrate

from config import get_config
from constants import OPTION_GROUP, OPTION_SECTIONS, SOCIAL_KEYS, ADMIN_MENU, TRUE_VALUE
from models import db
from services import (
    get_option,
    get_options,
    save_option_group,
    get_font_url,
    build_front_queue,
    build_admin_queue,
    build_registry,
    register_https_redirect,
    setup_theme,
    page_menu_args,
    format_page_title,
    body_classes,
)
from utils import admin_required, get_logger

LOG = get_logger('theme.app')

migrate = Migrate()

TITLE_SEP = '|'


def safe_int(value, default=1, min_val=None, max_val=None):
    """Safely parse an integer value with optional bounds."""
    try:
        result = int(value) if value else default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def static_url(path):
    return url_for('static', filename=path)


def theme_options():
    """All registered options, read once per request."""
    if 'theme_options' not in g:
        g.theme_options = get_options()
    return g.theme_options


# ============================================
# STARTUP CALLBACKS
# ============================================

def register_theme(app):
    app.extensions['theme'] = setup_theme(app.config.get('BACKGROUND_COLOR', ''))


def register_shortcodes(app):
    registry = build_registry(get_option)
    app.extensions['shortcodes'] = registry
    app.jinja_env.filters['do_shortcode'] = registry.do_shortcode


def register_template_context(app):
    @app.context_processor
    def inject_site():
        return {
            'site_name': app.config.get('SITE_NAME', ''),
            'site_description': app.config.get('SITE_DESCRIPTION', ''),
            'theme': app.extensions['theme'],
            'theme_options': theme_options(),
            'social_keys': SOCIAL_KEYS,
            'admin_menu': ADMIN_MENU,
        }


def register_routes(app):

    # ============================================
    # ROUTES - FRONT END
    # ============================================

    @app.route('/')
    def index():
        options = theme_options()
        config = current_app.config
        font_url = get_font_url(config.get('OPEN_SANS', True), config.get('FONT_SUBSET', 'no-subset'))
        assets = build_front_queue(options, static_url, config.get('CORE_JQUERY_URL'), font_url=font_url)

        theme = current_app.extensions['theme']
        page = safe_int(request.args.get('paged'), default=1, min_val=1)
        title = format_page_title(
            '', TITLE_SEP, config.get('SITE_NAME', ''), config.get('SITE_DESCRIPTION', ''),
            is_front_page=True, page=page
        )
        classes = body_classes(
            theme, ['home'],
            background_color=config.get('BACKGROUND_COLOR', ''),
            font_queued=assets.style_is_queued('twentytwelve-fonts'),
        )
        return render_template(
            'index.html',
            assets=assets,
            page_title=title,
            body_class=' '.join(classes),
            menu_args=page_menu_args(),
            content_width=theme.get_content_width(),
        )

    # ============================================
    # ROUTES - ADMIN
    # ============================================

    @app.route('/admin/theme-options', methods=['GET', 'POST'])
    @admin_required
    def theme_options_page():
        if request.method == 'POST':
            save_option_group(request.form)
            flash('Settings saved.', 'success')
            return redirect(url_for('theme_options_page', **{'settings-updated': 'true'}))

        return render_template(
            'admin/theme_options.html',
            assets=build_admin_queue(static_url),
            option_group=OPTION_GROUP,
            sections=OPTION_SECTIONS,
            options=get_options(),
            true_value=TRUE_VALUE,
        )


# Explicit, ordered startup sequence
STARTUP = (
    register_theme,
    register_shortcodes,
    register_https_redirect,
    register_template_context,
    register_routes,
)


def create_app(env=None):
    app = Flask(__name__)
    app.config.from_object(get_config(env))
    db.init_app(app)
    migrate.init_app(app, db)
    for callback in STARTUP:
        callback(app)
    LOG.debug('app created env=%s', env or 'default')
    return app


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    with app.app_context():
        db.create_all()


app = create_app()


if __name__ == '__main__':
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
