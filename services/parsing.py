"""
Parsing Service

Turns raw form input (strings) into the typed records the costing engine
works on. Unparsable amounts fall back to defaults; missing required fields
and unknown units raise ValidationError.
"""

import re
from decimal import Decimal, ROUND_HALF_UP

from constants import AMOUNT_PLACES, DEFAULT_PURCHASE_UNIT, DEFAULT_USAGE_UNIT, MAX_AMOUNT, MAX_LENGTHS
from models import FixedCosts, IngredientRecord, RecipeLine
from utils import sanitize_name, to_decimal, to_int
from .inventory import next_id
from .units import is_valid_unit, normalize_unit

ZERO = Decimal('0')
ONE = Decimal('1')


class ValidationError(ValueError):
    """User input that can't be turned into a record (missing name, bad unit...)."""

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field


def parse_quantity(value, default=ZERO):
    """
    Parse a quantity like '500', '0,5', '1/2' or '1 1/2' into a Decimal.

    Anything unparsable or negative returns ``default``. Results are capped at
    MAX_AMOUNT and rounded to AMOUNT_PLACES, so a tiny value like 1e-9 reads as 0.
    """
    if value is None or isinstance(value, bool):
        return default
    text = str(value).strip()
    if not text:
        return default

    try:
        result = to_decimal(text, default=None)
        if result is None:
            result = ZERO
            for part in text.split():
                if '/' in part:
                    match = re.match(r'^(\d+)\s*/\s*(\d+)$', part)
                    if not match or int(match.group(2)) == 0:
                        return default
                    result += Decimal(match.group(1)) / Decimal(match.group(2))
                else:
                    part_value = to_decimal(part, default=None)
                    if part_value is None:
                        return default
                    result += part_value

        if result < 0:
            return default
        return min(result, Decimal(MAX_AMOUNT)).quantize(AMOUNT_PLACES, rounding=ROUND_HALF_UP)
    except ArithmeticError:
        return default


def parse_amount(value, default=ZERO):
    """Parse a money amount (price, fixed cost). Unparsable or negative -> default."""
    return parse_quantity(value, default=default)


def parse_unit(value, default, field='unit'):
    """Parse a unit name. Empty -> default, unknown -> ValidationError."""
    if value is None or not str(value).strip():
        return default
    unit = normalize_unit(value)
    if unit is None or not is_valid_unit(unit):
        raise ValidationError(f'Invalid unit: {value}', field=field)
    return unit


def parse_name(value, field, max_length):
    name = sanitize_name(value, max_length=max_length)
    if not name:
        raise ValidationError(f'{field.replace("_", " ").capitalize()} is required', field=field)
    return name


def parse_ingredient(form, ingredient_id=None):
    """
    Build an IngredientRecord from form fields name, purchase_price,
    purchase_quantity and purchase_unit.

    Name and price are required. A missing, unparsable or zero package
    quantity is read as 1.
    """
    name = parse_name(form.get('name'), 'name', MAX_LENGTHS['ingredient_name'])

    raw_price = form.get('purchase_price')
    if raw_price is None or not str(raw_price).strip():
        raise ValidationError('Purchase price is required', field='purchase_price')
    price = parse_amount(raw_price, default=None)
    if price is None:
        raise ValidationError(f'Invalid purchase price: {raw_price}', field='purchase_price')

    quantity = parse_quantity(form.get('purchase_quantity'), default=ONE) or ONE
    unit = parse_unit(form.get('purchase_unit'), DEFAULT_PURCHASE_UNIT, field='purchase_unit')

    return IngredientRecord(
        id=ingredient_id if ingredient_id is not None else next_id(),
        name=name,
        purchase_price=price,
        purchase_quantity=quantity,
        purchase_unit=unit,
    )


def parse_ingredient_changes(form):
    """
    Partial update for an ingredient edit: only the fields present in form.

    Returns:
        dict of field -> typed value, suitable for InventoryStore.update()
    """
    changes = {}
    if 'name' in form:
        changes['name'] = parse_name(form.get('name'), 'name', MAX_LENGTHS['ingredient_name'])
    if 'purchase_price' in form:
        price = parse_amount(form.get('purchase_price'), default=None)
        if price is None:
            raise ValidationError(f'Invalid purchase price: {form.get("purchase_price")}', field='purchase_price')
        changes['purchase_price'] = price
    if 'purchase_quantity' in form:
        changes['purchase_quantity'] = parse_quantity(form.get('purchase_quantity'), default=ONE) or ONE
    if 'purchase_unit' in form:
        changes['purchase_unit'] = parse_unit(form.get('purchase_unit'), DEFAULT_PURCHASE_UNIT,
                                              field='purchase_unit')
    return changes


def parse_recipe_line(raw):
    return RecipeLine(
        id=to_int(raw.get('id')) or next_id(),
        ingredient_ref=to_int(raw.get('ingredient_ref')),
        usage_quantity=parse_quantity(raw.get('usage_quantity')),
        usage_unit=parse_unit(raw.get('usage_unit'), DEFAULT_USAGE_UNIT, field='usage_unit'),
    )


def parse_recipe_lines(raw_lines):
    """Parse a list of raw line dicts, keeping their order. Line ids must be unique."""
    lines = tuple(parse_recipe_line(raw) for raw in raw_lines or ())
    if len({line.id for line in lines}) != len(lines):
        raise ValidationError('Duplicate recipe line id', field='lines')
    return lines


def parse_fixed_costs(raw):
    raw = raw or {}
    return FixedCosts(
        packaging=parse_amount(raw.get('packaging')),
        cutlery=parse_amount(raw.get('cutlery')),
        extras=parse_amount(raw.get('extras')),
    )


def parse_product_name(value):
    return parse_name(value, 'product_name', MAX_LENGTHS['recipe_name'])
