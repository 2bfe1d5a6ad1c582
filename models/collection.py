"""
Stored Collection Model

Key/value table holding each persisted collection (inventory, saved
products) as one JSON document.
"""

from datetime import datetime

from .base import db


class StoredCollection(db.Model):
    """A named, JSON-encoded sequence of records."""
    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(50), unique=True, nullable=False, index=True)
    value = db.Column(db.JSON, nullable=False, default=list)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
