"""Field-level validators used to build request and parameter rules"""
from src.validation.parameter_validators.required_validator import RequiredValidator
from src.validation.parameter_validators.range_validator import RangeValidator
from src.validation.parameter_validators.length_validator import LengthValidator
from src.validation.parameter_validators.lowercase_validator import LowercaseValidator
from src.validation.parameter_validators.one_of_validator import OneOfValidator
from src.validation.parameter_validators.field_rules_validator import FieldRulesValidator

__all__ = [
    "RequiredValidator",
    "RangeValidator",
    "LengthValidator",
    "LowercaseValidator",
    "OneOfValidator",
    "FieldRulesValidator",
]
