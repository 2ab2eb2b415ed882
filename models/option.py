"""
Option Model

Global key-value storage for theme options (one row per option name).
"""

from .base import db


class Option(db.Model):
    """Key-value storage for site-wide theme options."""
    __tablename__ = 'options'

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(64), unique=True, nullable=False, index=True)
    value = db.Column(db.Text, default='')

    def __repr__(self):
        return f'<Option {self.key}>'
