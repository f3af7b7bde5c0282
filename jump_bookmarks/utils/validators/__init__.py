"""
Validators Package

Validation building blocks used by the path validator.
"""

# Base classes
from .base import ValidationIssue, ValidationResult, Validator

# Alias validator
from .alias import ALIAS_PATTERN, AliasValidator

__all__ = [
    # Base classes
    "Validator",
    "ValidationResult",
    "ValidationIssue",
    # Alias
    "ALIAS_PATTERN",
    "AliasValidator",
]
