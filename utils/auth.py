"""
Admin Access Check

HTTP Basic gate for the admin pages. Disabled when ADMIN_PASSWORD is not
configured, which is only meant for local development.
"""

import hmac
from functools import wraps

from flask import Response, current_app, request

from .logging import get_logger

LOG = get_logger('theme.auth')


def check_admin_credentials(auth):
    """Return True when the request's Basic credentials match the config."""
    password = current_app.config.get('ADMIN_PASSWORD')
    if not password:
        return True
    if auth is None or auth.username is None or auth.password is None:
        return False
    username = current_app.config.get('ADMIN_USERNAME', 'admin')
    return (
        hmac.compare_digest(auth.username.encode('utf-8'), username.encode('utf-8')) and
        hmac.compare_digest(auth.password.encode('utf-8'), password.encode('utf-8'))
    )


def _challenge():
    return Response(
        'Administrator access required.', 401,
        {'WWW-Authenticate': 'Basic realm="Theme Options"'}
    )


def admin_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not check_admin_credentials(request.authorization):
            LOG.warning('admin access denied path=%s', request.path)
            return _challenge()
        return view(*args, **kwargs)
    return wrapped
