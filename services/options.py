"""
Option Store Service

Reads and writes the theme's global key-value options. Values are plain
strings stored exactly as submitted; a missing option reads as empty and
a toggle is on only when its value is the literal "true".
"""

from constants import OPTION_KEYS, TRUE_VALUE
from models import db, Option
from utils.logging import get_logger

LOG = get_logger('theme.options')


class OptionError(ValueError):
    """Raised when writing an option that is not registered."""
    pass


def get_option(key, default=''):
    """Return the stored value for key, or default when it was never set."""
    row = Option.query.filter_by(key=key).first()
    if row is None or row.value is None:
        return default
    return row.value


def get_options(keys=None):
    """Return {key: value} for the given keys (all registered keys by default)."""
    keys = list(OPTION_KEYS if keys is None else keys)
    rows = Option.query.filter(Option.key.in_(keys)).all() if keys else []
    stored = {row.key: row.value for row in rows}
    return {key: stored.get(key) or '' for key in keys}


def is_enabled(key, options=None):
    """Strict toggle check: only the exact string "true" counts as on."""
    value = options.get(key, '') if options is not None else get_option(key)
    return value == TRUE_VALUE


def update_option(key, value, commit=True):
    """Insert or replace a registered option. None is stored as ''."""
    if key not in OPTION_KEYS:
        raise OptionError(f'Unknown option: {key}')
    if value is None:
        value = ''
    row = Option.query.filter_by(key=key).first()
    if row is None:
        row = Option(key=key, value=value)
        db.session.add(row)
    else:
        row.value = value
    if commit:
        db.session.commit()
    return row


def save_option_group(form):
    """
    Persist a settings form submission.

    Every registered key is written: a key absent from the submission (an
    unchecked checkbox, for instance) is stored as empty. Unregistered
    fields are ignored. Returns the list of keys whose value changed.
    """
    current = get_options()
    changed = []
    for key in OPTION_KEYS:
        value = form.get(key)
        if value is None:
            value = ''
        if current.get(key, '') != value:
            changed.append(key)
        update_option(key, value, commit=False)
    db.session.commit()
    if changed:
        LOG.info('theme options updated: %s', ', '.join(changed))
    return changed
