"""
Services Package

Business logic modules for the cost calculator.
"""

from .units import (
    normalize_unit,
    is_valid_unit,
    classify_unit,
    base_factor,
    base_unit,
    same_family,
    to_base,
    from_base,
    convert_unit,
    suggest_usage_unit,
)

from .inventory import (
    IngredientNotFound,
    InventoryStore,
    next_id,
)

from .cost import (
    LineStatus,
    LineCost,
    RecipeCost,
    Margin,
    round1,
    find_ingredient,
    line_status,
    price_per_base_unit,
    compute_line_cost,
    compute_recipe_cost,
    compute_margin,
    recalculate_saved_recipe,
    recalculate_saved_recipes,
    build_saved_recipe,
)

from .products import (
    RecipeNotFound,
    SavedRecipeStore,
)

from .parsing import (
    ValidationError,
    parse_quantity,
    parse_amount,
    parse_unit,
    parse_ingredient,
    parse_ingredient_changes,
    parse_recipe_line,
    parse_recipe_lines,
    parse_fixed_costs,
    parse_product_name,
)

from .storage import (
    MemoryStorage,
    DatabaseStorage,
)

from .workspace import Workspace

__all__ = [
    # Units
    'normalize_unit',
    'is_valid_unit',
    'classify_unit',
    'base_factor',
    'base_unit',
    'same_family',
    'to_base',
    'from_base',
    'convert_unit',
    'suggest_usage_unit',
    # Inventory
    'IngredientNotFound',
    'InventoryStore',
    'next_id',
    # Cost
    'LineStatus',
    'LineCost',
    'RecipeCost',
    'Margin',
    'round1',
    'find_ingredient',
    'line_status',
    'price_per_base_unit',
    'compute_line_cost',
    'compute_recipe_cost',
    'compute_margin',
    'recalculate_saved_recipe',
    'recalculate_saved_recipes',
    'build_saved_recipe',
    # Saved products
    'RecipeNotFound',
    'SavedRecipeStore',
    # Parsing
    'ValidationError',
    'parse_quantity',
    'parse_amount',
    'parse_unit',
    'parse_ingredient',
    'parse_ingredient_changes',
    'parse_recipe_line',
    'parse_recipe_lines',
    'parse_fixed_costs',
    'parse_product_name',
    # Storage
    'MemoryStorage',
    'DatabaseStorage',
    # Workspace
    'Workspace',
]
