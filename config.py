"""
Application Configuration

Centralizes all Flask and theme configuration settings.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

DEFAULT_LOG_LEVEL = 'INFO'
_TRUE = {'1', 'true', 'yes', 'on'}


def env_bool(name, default=False):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE


def log_level_name():
    return os.environ.get('LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///theme.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = log_level_name()

    # Site identity (blog name / tagline)
    SITE_NAME = os.environ.get('SITE_NAME', 'JPC')
    SITE_DESCRIPTION = os.environ.get('SITE_DESCRIPTION', 'Just another website')

    # Theme appearance
    BACKGROUND_COLOR = os.environ.get('BACKGROUND_COLOR', 'e6e6e6')
    OPEN_SANS = env_bool('OPEN_SANS', default=True)
    FONT_SUBSET = os.environ.get('FONT_SUBSET', 'no-subset')

    # Core jQuery, emitted only when a queued script depends on it
    CORE_JQUERY_URL = os.environ.get('CORE_JQUERY_URL', '//code.jquery.com/jquery-1.11.3.min.js')

    # Admin access (HTTP Basic). Leave the password unset to disable the check.
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SECRET_KEY = 'testing-secret'
    ADMIN_PASSWORD = None


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
