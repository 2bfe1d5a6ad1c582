# Utility modules for CostoExacto
from .numbers import to_decimal, to_int
from .sanitizer import sanitize_name
