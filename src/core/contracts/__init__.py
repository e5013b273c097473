"""
Contract Validation Module

Валидация входных JSON payload против JSON Schema контрактов.
"""

from .validators import (
    CONTRACT_NAMES,
    SCHEMA_DIR,
    PayloadContract,
    get_contract,
    read_schema,
    validate_complex_sequence,
    validate_series,
    validate_training_set,
)

__all__ = [
    # Constants
    "CONTRACT_NAMES",
    "SCHEMA_DIR",
    # Classes
    "PayloadContract",
    # Functions
    "get_contract",
    "read_schema",
    "validate_series",
    "validate_training_set",
    "validate_complex_sequence",
]
