"""
Cost Calculation Service

Functions for calculating recipe line, recipe and margin figures from the
ingredient inventory, and for refreshing the cost fields of saved products.

None of these functions raise on bad numbers: a line that can't be costed
contributes 0 and reports why through line_status().
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_HALF_UP,
    localcontext,
)
from enum import Enum
from typing import Tuple

from models import FixedCosts, RecipeLine, SavedRecipe
from .inventory import InventoryStore, next_id
from .units import base_factor, same_family, to_base

logger = logging.getLogger(__name__)

ZERO = Decimal('0')
ONE_DECIMAL = Decimal('0.1')

# Arithmetic for every figure below runs with these traps set
ENGINE_CONTEXT = Context(prec=28, traps=[InvalidOperation, DivisionByZero, Overflow])


class LineStatus(str, Enum):
    OK = 'ok'
    UNSET = 'unset'
    ORPHANED = 'orphaned'
    UNIT_MISMATCH = 'unit_mismatch'


@dataclass(frozen=True)
class LineCost:
    line: RecipeLine
    cost: Decimal
    status: LineStatus


@dataclass(frozen=True)
class RecipeCost:
    ingredients_cost: Decimal
    total_cost: Decimal
    lines: Tuple[LineCost, ...] = ()

    @property
    def has_warnings(self):
        return any(lc.status in (LineStatus.ORPHANED, LineStatus.UNIT_MISMATCH) for lc in self.lines)


@dataclass(frozen=True)
class Margin:
    margin: Decimal
    margin_percent: Decimal


def round1(value):
    """Round to one decimal place, half-up (20.05 -> 20.1)."""
    return Decimal(value).quantize(ONE_DECIMAL, rounding=ROUND_HALF_UP)


def _guarded(compute, what):
    """Run compute() under ENGINE_CONTEXT. A figure that can't be represented counts as 0."""
    try:
        with localcontext(ENGINE_CONTEXT):
            return compute()
    except ArithmeticError:
        logger.warning("Could not compute %s, using 0", what)
        return ZERO


def find_ingredient(inventory, ingredient_id):
    """Look up an ingredient in an InventoryStore or any iterable of records."""
    if ingredient_id is None:
        return None
    if isinstance(inventory, InventoryStore):
        return inventory.get(ingredient_id)
    return next((item for item in inventory if item.id == ingredient_id), None)


def line_status(line, inventory):
    """Why a line does or doesn't contribute cost."""
    if line.ingredient_ref is None:
        return LineStatus.UNSET
    item = find_ingredient(inventory, line.ingredient_ref)
    if item is None:
        return LineStatus.ORPHANED
    if not same_family(item.purchase_unit, line.usage_unit):
        return LineStatus.UNIT_MISMATCH
    return LineStatus.OK


def price_per_base_unit(ingredient):
    """Price of one g, ml or u of the ingredient. 0 for an empty package."""
    def compute():
        base_qty = to_base(ingredient.purchase_quantity, ingredient.purchase_unit)
        if base_qty <= 0:
            return ZERO
        return ingredient.purchase_price / base_qty

    return _guarded(compute, f'price per base unit of ingredient {ingredient.id}')


def compute_line_cost(line, inventory):
    """
    Cost contributed by one recipe line.

    unit price = price / (purchase qty * purchase factor)
    line cost  = unit price * (usage qty * usage factor)

    Returns 0 for an unset or orphaned ingredient reference, for units of
    different families (kg bought, ml used) and for an empty package.
    """
    if line_status(line, inventory) is not LineStatus.OK:
        return ZERO

    item = find_ingredient(inventory, line.ingredient_ref)

    def compute():
        purchase_base = item.purchase_quantity * base_factor(item.purchase_unit)
        if purchase_base <= 0:
            return ZERO
        unit_price = item.purchase_price / purchase_base
        return unit_price * (line.usage_quantity * base_factor(line.usage_unit))

    return _guarded(compute, f'cost of recipe line {line.id}')


def compute_recipe_cost(lines, inventory, fixed_costs=None):
    """
    Ingredients cost plus fixed costs for a list of recipe lines.

    Returns:
        RecipeCost with the per-line breakdown in the order given
    """
    fixed_costs = fixed_costs or FixedCosts()
    breakdown = tuple(
        LineCost(line=line, cost=compute_line_cost(line, inventory), status=line_status(line, inventory))
        for line in lines
    )
    ingredients_cost = _guarded(lambda: sum((lc.cost for lc in breakdown), ZERO), 'ingredients cost')
    return RecipeCost(
        ingredients_cost=ingredients_cost,
        total_cost=_guarded(lambda: ingredients_cost + fixed_costs.total, 'total cost'),
        lines=breakdown,
    )


def compute_margin(total_cost, sale_price):
    """Margin and margin percent. A sale price of 0 or less gives 0 %; a negative margin is valid."""
    margin = _guarded(lambda: sale_price - total_cost, 'margin')
    margin_percent = _guarded(
        lambda: round1(margin / sale_price * 100) if sale_price > 0 else ZERO,
        'margin percent',
    )
    return Margin(margin=margin, margin_percent=margin_percent)


def recalculate_saved_recipe(recipe, inventory):
    """Return the saved recipe with total_cost, margin and margin_percent recomputed against inventory."""
    cost = compute_recipe_cost(recipe.recipe_lines, inventory, recipe.fixed_costs)
    margin = compute_margin(cost.total_cost, recipe.sale_price)
    return recipe.with_costs(cost.total_cost, margin.margin, margin.margin_percent)


def recalculate_saved_recipes(recipes, inventory):
    return tuple(recalculate_saved_recipe(recipe, inventory) for recipe in recipes)


def build_saved_recipe(name, lines, fixed_costs, sale_price, inventory, recipe_id=None, today=None):
    """
    Freeze the calculator's current lines and fixed costs into a SavedRecipe
    with its cost fields computed.
    """
    recipe = SavedRecipe(
        id=recipe_id if recipe_id is not None else next_id(),
        name=name,
        date=(today or date.today()).isoformat(),
        recipe_lines=tuple(lines),
        fixed_costs=fixed_costs or FixedCosts(),
        sale_price=sale_price,
    )
    return recalculate_saved_recipe(recipe, inventory)
