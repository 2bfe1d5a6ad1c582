"""
Recipe Models

Contains the RecipeLine, FixedCosts and SavedRecipe models for composing
recipes and keeping saved product snapshots.
"""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Optional, Tuple

from utils.numbers import to_decimal, to_int


@dataclass(frozen=True)
class RecipeLine:
    """One ingredient usage entry. ingredient_ref is None until an ingredient is picked."""
    id: int
    ingredient_ref: Optional[int] = None
    usage_quantity: Decimal = Decimal('0')
    usage_unit: str = 'g'

    def to_dict(self):
        return {
            'id': self.id,
            'ingredient_ref': self.ingredient_ref,
            'usage_quantity': str(self.usage_quantity),
            'usage_unit': self.usage_unit,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=to_int(data.get('id'), default=0),
            ingredient_ref=to_int(data.get('ingredient_ref')),
            usage_quantity=to_decimal(data.get('usage_quantity')),
            usage_unit=data.get('usage_unit') or 'g',
        )


@dataclass(frozen=True)
class FixedCosts:
    """Per-product costs that don't depend on the inventory."""
    packaging: Decimal = Decimal('0')
    cutlery: Decimal = Decimal('0')
    extras: Decimal = Decimal('0')

    @property
    def total(self):
        return self.packaging + self.cutlery + self.extras

    def to_dict(self):
        return {
            'packaging': str(self.packaging),
            'cutlery': str(self.cutlery),
            'extras': str(self.extras),
        }

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            packaging=to_decimal(data.get('packaging')),
            cutlery=to_decimal(data.get('cutlery')),
            extras=to_decimal(data.get('extras')),
        )


@dataclass(frozen=True)
class SavedRecipe:
    """
    A saved product: the recipe lines and fixed costs frozen at save time,
    plus the last computed cost fields.

    total_cost, margin and margin_percent are a cache over the inventory.
    They are refreshed through services.cost.recalculate_saved_recipe
    whenever an ingredient is edited or deleted.
    """
    id: int
    name: str
    date: str
    recipe_lines: Tuple[RecipeLine, ...] = ()
    fixed_costs: FixedCosts = field(default_factory=FixedCosts)
    sale_price: Decimal = Decimal('0')
    total_cost: Decimal = Decimal('0')
    margin: Decimal = Decimal('0')
    margin_percent: Decimal = Decimal('0')

    def references(self, ingredient_id):
        return any(line.ingredient_ref == ingredient_id for line in self.recipe_lines)

    def with_costs(self, total_cost, margin, margin_percent):
        return replace(self, total_cost=total_cost, margin=margin, margin_percent=margin_percent)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'date': self.date,
            'recipe_lines': [line.to_dict() for line in self.recipe_lines],
            'fixed_costs': self.fixed_costs.to_dict(),
            'sale_price': str(self.sale_price),
            'total_cost': str(self.total_cost),
            'margin': str(self.margin),
            'margin_percent': str(self.margin_percent),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=to_int(data.get('id')),
            name=data.get('name', ''),
            date=data.get('date', ''),
            recipe_lines=tuple(RecipeLine.from_dict(line) for line in data.get('recipe_lines') or ()),
            fixed_costs=FixedCosts.from_dict(data.get('fixed_costs')),
            sale_price=to_decimal(data.get('sale_price')),
            total_cost=to_decimal(data.get('total_cost')),
            margin=to_decimal(data.get('margin')),
            margin_percent=to_decimal(data.get('margin_percent')),
        )
