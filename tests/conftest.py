"""Shared fixtures: a fresh app on in-memory SQLite per test."""
import os
import sys

import pytest
from bs4 import BeautifulSoup

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app  # noqa: E402
from models import db  # noqa: E402
from services import update_option  # noqa: E402


@pytest.fixture
def flask_app():
    flask_app = create_app('testing')
    with flask_app.app_context():
        db.create_all()
    yield flask_app
    with flask_app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app_ctx(flask_app):
    with flask_app.app_context():
        yield flask_app


@pytest.fixture
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture
def set_options(flask_app):
    def _set(**values):
        with flask_app.app_context():
            for key, value in values.items():
                update_option(key, value)
    return _set


@pytest.fixture
def parse_html():
    def _parse(response):
        return BeautifulSoup(response.get_data(as_text=True), 'html.parser')
    return _parse
