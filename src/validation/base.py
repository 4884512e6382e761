"""Base classes for validation system following OOP and SRP principles"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from src.validation.enums import ValidationErrorType, ValidationType


class ValidationError(Exception):
    """Custom exception for validation errors"""

    def __init__(
        self,
        error_type: ValidationErrorType,
        message: str,
        parameter_name: Optional[str] = None,
        rule: Optional[ValidationType] = None
    ):
        """
        Initialize validation error.

        Args:
            error_type: Type of validation error (enum)
            message: Human-readable error message
            parameter_name: Name of the parameter that failed validation
            rule: Rule that rejected the value
        """
        self.error_type = error_type
        self.parameter_name = parameter_name
        self.rule = rule
        super().__init__(message)


class ValidationResult:
    """Result of a validation operation"""

    def __init__(self, is_valid: bool = True, errors: Optional[List[ValidationError]] = None):
        """
        Initialize validation result.

        Args:
            is_valid: Whether validation passed
            errors: List of validation errors if validation failed
        """
        self._is_valid = is_valid
        self._errors = errors or []

    @property
    def is_valid(self) -> bool:
        """Check if validation passed"""
        return self._is_valid

    @property
    def errors(self) -> List[ValidationError]:
        """Get list of validation errors"""
        return self._errors

    def add_error(self, error: ValidationError) -> None:
        """
        Add a validation error.

        Args:
            error: Validation error to add
        """
        self._errors.append(error)
        self._is_valid = False

    def merge(self, other: "ValidationResult") -> None:
        """Add all errors of another result to this one"""
        for error in other.errors:
            self.add_error(error)


class BaseValidator(ABC):
    """Abstract base class for all validators (Interface)"""

    @abstractmethod
    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate a value.

        Args:
            value: Value to validate
            context: Optional context dictionary with additional information

        Returns:
            ValidationResult with validation status and errors
        """
        pass


class FieldValidator(BaseValidator):
    """Base class for validators bound to a single named field"""

    rule: ValidationType

    def __init__(self, parameter_name: str):
        self._parameter_name = parameter_name

    @property
    def parameter_name(self) -> str:
        return self._parameter_name

    def _error(
        self,
        error_type: ValidationErrorType,
        details: str,
        rule: Optional[ValidationType] = None
    ) -> ValidationResult:
        rule = rule or self.rule
        return ValidationResult(errors=[
            ValidationError(
                error_type=error_type,
                message=f"field {self._parameter_name} is not valid: {rule.value}: {details}",
                parameter_name=self._parameter_name,
                rule=rule
            )
        ], is_valid=False)
