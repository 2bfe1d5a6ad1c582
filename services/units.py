"""
Unit Service

Unit family classification and conversion to each family's base unit
(g, ml, u).
"""

import logging
from decimal import Decimal

from constants import (
    BASE_FACTORS,
    BASE_UNITS,
    COUNT,
    UNIT_MAPPINGS,
    UNIT_TO_FAMILY,
    USAGE_UNIT_SUGGESTIONS,
    VALID_UNITS,
)

logger = logging.getLogger(__name__)


def normalize_unit(unit):
    """Map user input like 'Kg', 'gr' or 'liters' to a standard unit, or None."""
    if unit is None:
        return None
    return UNIT_MAPPINGS.get(str(unit).strip().lower().rstrip('.'))


def is_valid_unit(unit):
    """True for one of the standard units a form may submit."""
    return unit in VALID_UNITS


def classify_unit(unit):
    """
    Return the family ('mass', 'volume' or 'count') of a unit.

    Unknown units are treated as count, matching what saved data from older
    versions expects. Input forms reject them before they get here.
    """
    family = UNIT_TO_FAMILY.get(unit)
    if family is None:
        logger.warning("Unknown unit %r, treating it as %s", unit, COUNT)
        return COUNT
    return family


def base_factor(unit):
    """Conversion factor from unit to its family's base unit (1 for unknown units)."""
    return BASE_FACTORS.get(unit, Decimal('1'))


def base_unit(unit):
    return BASE_UNITS[classify_unit(unit)]


def same_family(unit_a, unit_b):
    return classify_unit(unit_a) == classify_unit(unit_b)


def to_base(quantity, unit):
    """Express quantity of unit in the family's base unit (e.g. 2 kg -> 2000 g)."""
    return quantity * base_factor(unit)


def from_base(quantity, unit):
    """Inverse of to_base (e.g. 2000 g -> 2 kg)."""
    return quantity / base_factor(unit)


def convert_unit(quantity, from_unit, to_unit):
    """
    Convert quantity between two units of the same family.

    Returns None when the units belong to different families.
    """
    if from_unit == to_unit:
        return quantity
    if not same_family(from_unit, to_unit):
        return None
    return from_base(to_base(quantity, from_unit), to_unit)


def suggest_usage_unit(purchase_unit):
    """Default usage unit for a recipe line: the small unit of the same family."""
    return USAGE_UNIT_SUGGESTIONS.get(purchase_unit, purchase_unit)
