"""Validator for enumerated values (SRP: validates only set membership)"""
from typing import Any, Dict, Iterable, Optional
from src.validation.base import FieldValidator, ValidationResult
from src.validation.enums import ValidationErrorType, ValidationType


class OneOfValidator(FieldValidator):
    """Validates that a value belongs to an allowed set"""

    rule = ValidationType.ONE_OF

    def __init__(self, parameter_name: str, allowed_values: Iterable[Any]):
        super().__init__(parameter_name)
        self._allowed_values = list(allowed_values)

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        if value not in self._allowed_values:
            allowed = " ".join(str(v) for v in self._allowed_values)
            return self._error(
                ValidationErrorType.INVALID_VALUE,
                f"must be one of [{allowed}], got '{value}'"
            )
        return ValidationResult()
