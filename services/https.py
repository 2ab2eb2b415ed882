"""
HTTPS Redirect Service

When the "ssl" option is on, plain-HTTP requests are answered with a
redirect to the same host and request URI over https.
"""

from urllib.parse import quote

from flask import redirect, request

from utils.logging import get_logger
from .options import is_enabled

LOG = get_logger('theme.https')


def is_secure_request(environ):
    """True when the server flags the request as HTTPS."""
    if environ.get('HTTPS', '').lower() == 'on':
        return True
    return environ.get('wsgi.url_scheme') == 'https'


def request_uri(environ):
    """
    The raw request URI (path plus query string) as the client sent it.

    Uses REQUEST_URI or RAW_URI when the server provides them, otherwise
    rebuilds it from SCRIPT_NAME, PATH_INFO and QUERY_STRING.
    """
    raw = environ.get('REQUEST_URI') or environ.get('RAW_URI')
    if raw:
        return raw
    # PATH_INFO carries the raw request bytes decoded as latin-1 (PEP 3333)
    path = quote(
        environ.get('SCRIPT_NAME', '') + environ.get('PATH_INFO', ''),
        safe="/;=,:@!$&'()*+~-._", encoding='latin-1'
    )
    query = environ.get('QUERY_STRING', '')
    return f'{path}?{query}' if query else path


def https_target(environ):
    """Return the https:// URL for this request, or None when no redirect applies."""
    if is_secure_request(environ):
        return None
    host = environ.get('HTTP_HOST') or environ.get('SERVER_NAME', '')
    return 'https://' + host + request_uri(environ)


def enforce_https():
    """before_request hook: redirect to HTTPS when the ssl option is on."""
    if not is_enabled('ssl'):
        return None
    target = https_target(request.environ)
    if target is None:
        return None
    LOG.info('redirecting to https target=%s', target)
    return redirect(target, code=302)


def register_https_redirect(app):
    app.before_request(enforce_https)
