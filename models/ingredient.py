"""
Ingredient Model

Contains the IngredientRecord, the purchased item every recipe line
references by id.
"""

from dataclasses import dataclass, replace
from decimal import Decimal

from utils.numbers import to_decimal, to_int


@dataclass(frozen=True)
class IngredientRecord:
    """
    A purchased ingredient package.

    purchase_price is what was paid for purchase_quantity of purchase_unit,
    e.g. 1200 for 1 kg of flour or 900 for 6 u of eggs.
    """
    id: int
    name: str
    purchase_price: Decimal = Decimal('0')
    purchase_quantity: Decimal = Decimal('1')
    purchase_unit: str = 'kg'

    def with_changes(self, **changes):
        """Return a copy with the given fields replaced. The id never changes."""
        changes.pop('id', None)
        return replace(self, **changes)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'purchase_price': str(self.purchase_price),
            'purchase_quantity': str(self.purchase_quantity),
            'purchase_unit': self.purchase_unit,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=to_int(data.get('id')),
            name=data.get('name', ''),
            purchase_price=to_decimal(data.get('purchase_price')),
            purchase_quantity=to_decimal(data.get('purchase_quantity')) or Decimal('1'),
            purchase_unit=data.get('purchase_unit') or 'kg',
        )
