"""
Storage Service

Storage backends for the persisted collections. Both expose the same two
calls: load(key) returns the stored list or None, save(key, items) replaces
it.
"""

import copy
import logging

from models import db, StoredCollection

logger = logging.getLogger(__name__)


class MemoryStorage:
    """Dict-backed storage for embedding the engine without a database."""

    def __init__(self, initial=None):
        self._data = copy.deepcopy(initial) if initial else {}

    def load(self, key):
        items = self._data.get(key)
        return copy.deepcopy(items) if items is not None else None

    def save(self, key, items):
        self._data[key] = copy.deepcopy(list(items))


class DatabaseStorage:
    """Stores each collection as one StoredCollection row. Needs an app context."""

    def load(self, key):
        row = StoredCollection.query.filter_by(key=key).first()
        if row is None:
            logger.debug("No stored collection for %s", key)
            return None
        logger.debug("Loaded %d items from %s", len(row.value), key)
        return list(row.value)

    def save(self, key, items):
        items = list(items)
        row = StoredCollection.query.filter_by(key=key).first()
        if row is None:
            row = StoredCollection(key=key, value=items)
            db.session.add(row)
        else:
            row.value = items
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        logger.debug("Saved %d items to %s", len(items), key)
