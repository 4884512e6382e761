"""Validator applying per-field rule lists to a record"""
from typing import Any, Dict, List, Optional
from src.validation.base import BaseValidator, ValidationResult
from src.validation.utils import ValidationUtils


class FieldRulesValidator(BaseValidator):
    """
    Validates a record (dict or object) against declared per-field rules.

    Rules of a field run in declaration order and stop at the first failure,
    so a missing value reports 'required' rather than a range error as well.
    Fields are independent: every failing field is reported.
    """

    def __init__(self, rules: Dict[str, List[BaseValidator]]):
        """
        Args:
            rules: Mapping of field name -> ordered validators for that field
        """
        self._rules = rules

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        result = ValidationResult()

        for field_name, validators in self._rules.items():
            field_value = ValidationUtils.get_field(value, field_name)
            for validator in validators:
                field_result = validator.validate(field_value, context)
                if not field_result.is_valid:
                    result.merge(field_result)
                    break

        return result
