"""Validation enums for type-safe validation"""
from enum import Enum


class ValidationErrorType(Enum):
    """Types of validation errors"""
    MISSING_PARAMETER = "missing_parameter"
    INVALID_TYPE = "invalid_type"
    INVALID_VALUE = "invalid_value"
    INVALID_RANGE = "invalid_range"
    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"


class ValidationType(Enum):
    """Validation rules that can be attached to a field"""
    REQUIRED = "required"
    MIN = "min"
    MAX = "max"
    LOWERCASE = "lowercase"
    ONE_OF = "oneof"
    TYPE = "type"


class RequestType(Enum):
    """Types of validated request shapes"""
    PROCESS = "process"
    IMAGE_ACTION = "image_action"
    SINGLE_ACTION = "single_action"
