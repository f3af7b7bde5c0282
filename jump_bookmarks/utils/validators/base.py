"""
Base Validation Classes

This module provides the foundation for the validators in the system:
the base class and the result structures they return.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class ValidationIssue:
    """Represents a single validation error"""

    message: str
    field_name: Optional[str] = None

    def __str__(self) -> str:
        if self.field_name:
            return f"{self.field_name}: {self.message}"
        return self.message


@dataclass
class ValidationResult:
    """Result of validation with detailed feedback"""

    is_valid: bool = True
    issues: List[ValidationIssue] = field(default_factory=list)

    def add_error(self, message: str, field_name: Optional[str] = None) -> None:
        """Record an issue and mark the result invalid"""
        self.issues.append(ValidationIssue(message=message, field_name=field_name))
        self.is_valid = False


class Validator(ABC):
    """Abstract base class for all validators"""

    def __init__(self, field_name: Optional[str] = None, required: bool = False):
        """
        Initialize validator

        Args:
            field_name: Name of the field being validated (for error messages)
            required: Whether the field is required (cannot be None/empty)
        """
        self.field_name = field_name
        self.required = required
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """
        Validate a value

        Args:
            value: Value to validate

        Returns:
            ValidationResult with validation details
        """
        pass

    def _check_required(self, value: Any) -> Optional[ValidationResult]:
        """
        Check the required constraint

        Args:
            value: Value to check

        Returns:
            ValidationResult if validation fails, None if checks pass
        """
        if not self.required:
            return None

        result = ValidationResult(is_valid=True)
        if value is None:
            result.add_error("Field is required but received None", self.field_name)
            return result
        if isinstance(value, str) and not value:
            result.add_error(
                "Field is required but received empty string", self.field_name
            )
            return result

        return None
