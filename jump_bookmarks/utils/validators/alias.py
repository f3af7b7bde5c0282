"""
Alias Validator

Aliases are the keys of the bookmark collection and are typed on the
command line, so they are restricted to a shell-safe character set.
"""

import re
from typing import Any, Optional

from .base import ValidationResult, Validator

ALIAS_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class AliasValidator(Validator):
    """Validator for bookmark aliases"""

    def __init__(self, field_name: Optional[str] = "alias"):
        super().__init__(field_name, required=True)

    def validate(self, value: Any) -> ValidationResult:
        """Validate an alias; no trimming or case folding is applied"""
        result = self._check_required(value)
        if result is None:
            result = ValidationResult(is_valid=True)

            if not isinstance(value, str):
                result.add_error(
                    f"Alias must be a string, got {type(value).__name__}",
                    self.field_name,
                )
            elif not ALIAS_PATTERN.fullmatch(value):
                result.add_error(
                    "Use only alphanumeric characters, underscores, and hyphens",
                    self.field_name,
                )

        for issue in result.issues:
            self.logger.debug(f"Rejected alias {value!r}: {issue}")

        return result
