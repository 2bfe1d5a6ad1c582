"""
Unit Constants and Conversion Tables

Contains the unit families, conversion factors to each family's base unit,
and the default usage unit suggested for each purchase unit.
"""

from decimal import Decimal

MASS = 'mass'
VOLUME = 'volume'
COUNT = 'count'

# Unit families (family -> {unit: factor to base unit})
UNIT_FAMILIES = {
    MASS: {'g': Decimal('1'), 'kg': Decimal('1000')},
    VOLUME: {'ml': Decimal('1'), 'l': Decimal('1000')},
    COUNT: {'u': Decimal('1')},
}

# Base unit of each family
BASE_UNITS = {MASS: 'g', VOLUME: 'ml', COUNT: 'u'}

# Flattened lookups (unit -> family, unit -> factor)
UNIT_TO_FAMILY = {
    unit: family
    for family, units in UNIT_FAMILIES.items()
    for unit in units
}
BASE_FACTORS = {
    unit: factor
    for units in UNIT_FAMILIES.values()
    for unit, factor in units.items()
}

# Unit aliases accepted from user input (lowercase input -> standard unit)
UNIT_MAPPINGS = {
    'g': 'g', 'gr': 'g', 'gram': 'g', 'grams': 'g',
    'kg': 'kg', 'kilo': 'kg', 'kilogram': 'kg', 'kilograms': 'kg',
    'ml': 'ml', 'milliliter': 'ml', 'milliliters': 'ml',
    'l': 'l', 'lt': 'l', 'liter': 'l', 'liters': 'l',
    'u': 'u', 'un': 'u', 'unit': 'u', 'units': 'u',
}

# Suggested usage unit when a recipe line picks an ingredient
USAGE_UNIT_SUGGESTIONS = {'kg': 'g', 'l': 'ml'}

# Order the units are offered in forms
PURCHASE_UNIT_CHOICES = ('kg', 'g', 'l', 'ml', 'u')
USAGE_UNIT_CHOICES = ('g', 'kg', 'ml', 'l', 'u')
