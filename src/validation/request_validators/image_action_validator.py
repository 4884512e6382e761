"""Validator for a single action descriptor (SRP: validates only descriptor shape)"""
from typing import Any, Dict, Optional
from src.validation.base import BaseValidator, ValidationResult
from src.validation.parameter_validators import (
    RequiredValidator,
    LengthValidator,
    FieldRulesValidator,
)
from src.core.enums import ResponseKey


MAX_ACTION_LENGTH = 10


class ImageActionValidator(BaseValidator):
    """Validates that an action descriptor names an action and carries params"""

    def __init__(self):
        self._rules = FieldRulesValidator({
            ResponseKey.ACTION.value: [
                RequiredValidator(ResponseKey.ACTION.value),
                LengthValidator(ResponseKey.ACTION.value, max_length=MAX_ACTION_LENGTH),
            ],
            ResponseKey.PARAMS.value: [
                RequiredValidator(ResponseKey.PARAMS.value),
            ],
        })

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        return self._rules.validate(value, context)
