"""Validation module for request and parameter validation"""
from src.validation.base import BaseValidator, FieldValidator, ValidationResult, ValidationError
from src.validation.enums import ValidationErrorType, ValidationType, RequestType
from src.validation.validator_manager import ValidatorManager
from src.validation.utils import ValidationUtils

__all__ = [
    "BaseValidator",
    "FieldValidator",
    "ValidationResult",
    "ValidationError",
    "ValidationErrorType",
    "ValidationType",
    "RequestType",
    "ValidatorManager",
    "ValidationUtils",
]
