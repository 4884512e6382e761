"""Validator for pipeline requests (SRP: validates only top-level request structure)"""
from typing import Any, Dict, Optional
from src.validation.base import BaseValidator, ValidationResult
from src.validation.parameter_validators import (
    RequiredValidator,
    LengthValidator,
    FieldRulesValidator,
)
from src.core.enums import ResponseKey


MAX_IMAGE_NAME_LENGTH = 100


class ProcessRequestValidator(BaseValidator):
    """Validates the actions list and image name of a process request"""

    def __init__(self):
        """Initialize process request validator with field rules"""
        self._rules = FieldRulesValidator({
            ResponseKey.ACTIONS.value: [
                RequiredValidator(ResponseKey.ACTIONS.value),
                LengthValidator(ResponseKey.ACTIONS.value, min_length=1),
            ],
            ResponseKey.IMAGE_NAME.value: [
                RequiredValidator(ResponseKey.IMAGE_NAME.value),
                LengthValidator(ResponseKey.IMAGE_NAME.value, max_length=MAX_IMAGE_NAME_LENGTH),
            ],
        })

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate process request.

        Args:
            value: ProcessRequest (or equivalent dict) to validate
            context: Optional context (unused)

        Returns:
            ValidationResult with validation status
        """
        return self._rules.validate(value, context)
