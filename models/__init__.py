"""
Models Package

Exports the database models and the db instance for use throughout the application.
"""

from .base import db

from .option import Option

__all__ = [
    'db',
    'Option',
]
