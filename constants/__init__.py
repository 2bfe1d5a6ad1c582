"""
Constants Package

Unit tables and validation limits shared by the services and the app.
"""

from .units import (
    MASS,
    VOLUME,
    COUNT,
    UNIT_FAMILIES,
    BASE_UNITS,
    UNIT_TO_FAMILY,
    BASE_FACTORS,
    UNIT_MAPPINGS,
    USAGE_UNIT_SUGGESTIONS,
    PURCHASE_UNIT_CHOICES,
    USAGE_UNIT_CHOICES,
)

from .validation import (
    VALID_UNITS,
    DEFAULT_PURCHASE_UNIT,
    DEFAULT_USAGE_UNIT,
    MAX_LENGTHS,
    MAX_AMOUNT,
    AMOUNT_PLACES,
    INVENTORY_KEY,
    PRODUCTS_KEY,
)
