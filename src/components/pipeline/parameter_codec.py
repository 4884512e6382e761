"""Structural re-coding of untyped action payloads into typed parameter records"""
import json
from typing import Any, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from src.core import ActionDecodeError
from src.models import ActionParameters

P = TypeVar("P", bound=ActionParameters)


class ParameterCodec:
    """
    Decodes an action payload by serializing it back to JSON and parsing the
    result into the target record.

    The target record decides which fields are read: extra keys are ignored
    and missing or null keys keep their zero value, to be reported by
    validation.
    Only shape errors (wrong JSON types, non-object payloads) fail here.
    """

    @classmethod
    def decode(cls, payload: Any, parameters_type: Type[P], action: str) -> P:
        """
        Decode a payload into a parameter record

        Args:
            payload: JSON-like value taken from the request
            parameters_type: Parameter record class of the action
            action: Action kind, used in error messages

        Returns:
            Parameter record instance

        Raises:
            ActionDecodeError: If the payload cannot be represented as the record
        """
        if isinstance(payload, dict):
            payload = {key: value for key, value in payload.items() if value is not None}

        try:
            encoded = json.dumps(payload, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise ActionDecodeError(action, str(e))

        try:
            return parameters_type.model_validate_json(encoded)
        except PydanticValidationError as e:
            raise ActionDecodeError(action, cls._format_errors(e))

    @staticmethod
    def _format_errors(error: PydanticValidationError) -> str:
        messages = []
        for item in error.errors():
            location = ".".join(str(part) for part in item["loc"]) or "params"
            messages.append(f"{location}: {item['msg']}")
        return "; ".join(messages)
