"""Validation utility functions (SRP: helper functions for validation checks)"""
from typing import Any


class ValidationUtils:
    """Utility class for common validation checks"""

    @staticmethod
    def is_number(value: Any) -> bool:
        """Check for int/float values, excluding bool"""
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def is_zero_value(value: Any) -> bool:
        """
        Check whether a value counts as absent for the 'required' rule.

        None, zero numbers, False and empty strings are treated as not
        provided. Collections only need to be present; their length is
        checked by the length rule.

        Args:
            value: Value to check

        Returns:
            True if the value is a zero value
        """
        if value is None:
            return True
        if isinstance(value, bool):
            return value is False
        if isinstance(value, (int, float)):
            return value == 0
        if isinstance(value, str):
            return value == ""
        return False

    @staticmethod
    def get_field(record: Any, field_name: str) -> Any:
        """
        Read a field from a dict or an attribute-style record.

        Missing fields resolve to None.
        """
        if isinstance(record, dict):
            return record.get(field_name)
        return getattr(record, field_name, None)
