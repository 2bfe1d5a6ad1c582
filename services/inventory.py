"""
Inventory Store

Holds the ingredient records. Every mutation returns a new store and leaves
the original untouched, so a caller can compute the new inventory and
everything derived from it before committing any of it.
"""

import logging
import time

from models import IngredientRecord

logger = logging.getLogger(__name__)

_last_id = 0


def next_id():
    """Millisecond timestamp id, bumped when two ids are requested in the same millisecond."""
    global _last_id
    _last_id = max(int(time.time() * 1000), _last_id + 1)
    return _last_id


class IngredientNotFound(KeyError):
    """Raised when updating or removing an ingredient id the store doesn't hold."""


class InventoryStore:
    """Ordered, immutable collection of IngredientRecords keyed by id."""

    def __init__(self, records=()):
        self._records = tuple(records)
        self._by_id = {record.id: record for record in self._records}
        if len(self._by_id) != len(self._records):
            raise ValueError('Duplicate ingredient ids in inventory')

    def __iter__(self):
        return iter(self._records)

    def __len__(self):
        return len(self._records)

    def __contains__(self, ingredient_id):
        return ingredient_id in self._by_id

    def __eq__(self, other):
        return isinstance(other, InventoryStore) and self._records == other._records

    def __repr__(self):
        return f'InventoryStore({len(self._records)} ingredients)'

    def get(self, ingredient_id):
        """Return the record with this id, or None."""
        return self._by_id.get(ingredient_id)

    def ids(self):
        return [record.id for record in self._records]

    def add(self, record):
        if record.id in self._by_id:
            raise ValueError(f'Ingredient id {record.id} already exists')
        logger.info("Adding ingredient %s (%s)", record.id, record.name)
        return InventoryStore(self._records + (record,))

    def update(self, ingredient_id, **changes):
        """Replace fields of one record in place. The id is kept."""
        current = self._require(ingredient_id)
        updated = current.with_changes(**changes)
        logger.info("Updating ingredient %s (%s)", ingredient_id, updated.name)
        return InventoryStore(updated if record.id == ingredient_id else record for record in self._records)

    def remove(self, ingredient_id):
        current = self._require(ingredient_id)
        logger.info("Removing ingredient %s (%s)", ingredient_id, current.name)
        return InventoryStore(record for record in self._records if record.id != ingredient_id)

    def to_list(self):
        return [record.to_dict() for record in self._records]

    @classmethod
    def from_list(cls, data):
        return cls(IngredientRecord.from_dict(item) for item in data or ())

    def _require(self, ingredient_id):
        record = self._by_id.get(ingredient_id)
        if record is None:
            raise IngredientNotFound(ingredient_id)
        return record
