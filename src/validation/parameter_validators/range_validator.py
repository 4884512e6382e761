"""Validator for inclusive numeric bounds (SRP: validates only value ranges)"""
from typing import Any, Dict, Optional
from src.validation.base import FieldValidator, ValidationResult
from src.validation.enums import ValidationErrorType, ValidationType
from src.validation.utils import ValidationUtils


class RangeValidator(FieldValidator):
    """Validates that a numeric field lies within [min_value, max_value]"""

    rule = ValidationType.MIN

    def __init__(
        self,
        parameter_name: str,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None
    ):
        """
        Initialize range validator.

        Args:
            parameter_name: Name of the parameter being validated
            min_value: Inclusive lower bound (None for no lower bound)
            max_value: Inclusive upper bound (None for no upper bound)
        """
        super().__init__(parameter_name)
        self._min_value = min_value
        self._max_value = max_value

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate numeric range.

        Args:
            value: Value to validate (None is skipped, presence is RequiredValidator's job)
            context: Optional context (unused)

        Returns:
            ValidationResult with validation status
        """
        if value is None:
            return ValidationResult()

        if not ValidationUtils.is_number(value):
            return self._error(
                ValidationErrorType.INVALID_TYPE,
                f"must be a number, got {type(value).__name__}",
                ValidationType.TYPE
            )

        if self._min_value is not None and value < self._min_value:
            return self._error(
                ValidationErrorType.INVALID_RANGE,
                f"must be >= {self._min_value}, got {value}",
                ValidationType.MIN
            )

        if self._max_value is not None and value > self._max_value:
            return self._error(
                ValidationErrorType.INVALID_RANGE,
                f"must be <= {self._max_value}, got {value}",
                ValidationType.MAX
            )

        return ValidationResult()
