"""
Contract Validation Module

Валидация JSON контрактов сериализованных approximate numbers.
"""

from .validators import (
    APPROXIMATE_NUMBER_SCHEMA,
    SCHEMA_DIR,
    load_schema,
    validate_approximate_number,
)

__all__ = [
    # Constants
    "APPROXIMATE_NUMBER_SCHEMA",
    "SCHEMA_DIR",
    # Functions
    "load_schema",
    "validate_approximate_number",
]
