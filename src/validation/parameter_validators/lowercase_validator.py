"""Validator for lowercase strings (SRP: validates only letter case)"""
from typing import Any, Dict, Optional
from src.validation.base import FieldValidator, ValidationResult
from src.validation.enums import ValidationErrorType, ValidationType


class LowercaseValidator(FieldValidator):
    """Validates that a string equals its own lowercase form"""

    rule = ValidationType.LOWERCASE

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        if value is None:
            return ValidationResult()

        if not isinstance(value, str):
            return self._error(
                ValidationErrorType.INVALID_TYPE,
                f"must be a string, got {type(value).__name__}",
                ValidationType.TYPE
            )

        if value != value.lower():
            return self._error(ValidationErrorType.INVALID_FORMAT, f"must be lowercase, got '{value}'")

        return ValidationResult()
