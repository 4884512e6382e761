"""Validator for required fields (SRP: validates only presence of a non-zero value)"""
from typing import Any, Dict, Optional
from src.validation.base import FieldValidator, ValidationResult
from src.validation.enums import ValidationErrorType, ValidationType
from src.validation.utils import ValidationUtils


class RequiredValidator(FieldValidator):
    """Validates that a field holds a non-zero value"""

    rule = ValidationType.REQUIRED

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        if ValidationUtils.is_zero_value(value):
            return self._error(ValidationErrorType.MISSING_PARAMETER, "value is required")
        return ValidationResult()
