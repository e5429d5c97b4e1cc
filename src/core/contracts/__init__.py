"""
Contract Validation Module

JSON Schema контракты декларативных спецификаций распределений.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    DistributionSpecValidator,
    SchemaLoader,
    default_loader,
    validate_distribution_spec,
)

__all__ = [
    "SCHEMA_DIR",
    # Loading
    "SchemaLoader",
    "default_loader",
    # Validators
    "ContractValidator",
    "DistributionSpecValidator",
    "validate_distribution_spec",
]
