"""
Contract Validation Module

JSON Schema контракт сериализованных значений complexkit.
"""

from .validators import (
    COMPLEX_VALUE_SCHEMA_PATH,
    COMPLEX_VALUE_VALIDATOR,
    validate_complex_value,
)

__all__ = [
    # Constants
    "COMPLEX_VALUE_SCHEMA_PATH",
    "COMPLEX_VALUE_VALIDATOR",
    # Functions
    "validate_complex_value",
]
