"""Validator for single-action endpoint requests"""
from typing import Any, Dict, Optional
from src.validation.base import BaseValidator, ValidationResult
from src.validation.parameter_validators import (
    RequiredValidator,
    LengthValidator,
    OneOfValidator,
    FieldRulesValidator,
)
from src.validation.request_validators.process_request_validator import MAX_IMAGE_NAME_LENGTH
from src.core.enums import ActionKind, ResponseKey


class SingleActionRequestValidator(BaseValidator):
    """
    Validates requests of the /image/<action> endpoints.

    The action comes from the URL path and must be one of the registered
    action kinds; the image name comes from the body.
    """

    def __init__(self):
        self._rules = FieldRulesValidator({
            ResponseKey.ACTION.value: [
                OneOfValidator(ResponseKey.ACTION.value, ActionKind.values()),
            ],
            ResponseKey.IMAGE_NAME.value: [
                RequiredValidator(ResponseKey.IMAGE_NAME.value),
                LengthValidator(ResponseKey.IMAGE_NAME.value, max_length=MAX_IMAGE_NAME_LENGTH),
            ],
        })

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        return self._rules.validate(value, context)
