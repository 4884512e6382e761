"""Validator for string and sequence lengths (SRP: validates only lengths)"""
from typing import Any, Dict, Optional
from src.validation.base import FieldValidator, ValidationResult
from src.validation.enums import ValidationErrorType, ValidationType


class LengthValidator(FieldValidator):
    """Validates the length of a string or list field"""

    rule = ValidationType.MAX

    def __init__(
        self,
        parameter_name: str,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None
    ):
        super().__init__(parameter_name)
        self._min_length = min_length
        self._max_length = max_length

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        if value is None:
            return ValidationResult()

        if not isinstance(value, (str, list, tuple)):
            return self._error(
                ValidationErrorType.INVALID_TYPE,
                f"must be a string or list, got {type(value).__name__}",
                ValidationType.TYPE
            )

        length = len(value)
        if self._min_length is not None and length < self._min_length:
            return self._error(
                ValidationErrorType.INVALID_LENGTH,
                f"length must be >= {self._min_length}, got {length}",
                ValidationType.MIN
            )
        if self._max_length is not None and length > self._max_length:
            return self._error(
                ValidationErrorType.INVALID_LENGTH,
                f"length must be <= {self._max_length}, got {length}",
                ValidationType.MAX
            )

        return ValidationResult()
