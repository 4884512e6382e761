"""
Image Action Model

One step of a processing pipeline as sent by the client: an action kind plus
an untyped parameter payload. The payload is only interpreted once the kind
has been resolved in the action registry.
"""
from dataclasses import dataclass
from typing import Any, Dict

from src.core import ResponseKey, RequestDecodeError


@dataclass(frozen=True)
class ImageAction:
    """Action descriptor from API request"""
    action: str = ""
    params: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> "ImageAction":
        """
        Parse dictionary into ImageAction

        Missing keys fall back to empty values and are reported later by
        validation; wrong JSON shapes fail immediately.

        Args:
            data: Raw action descriptor

        Returns:
            ImageAction instance

        Raises:
            RequestDecodeError: If data is not an object or 'action' is not a string
        """
        if not isinstance(data, dict):
            raise RequestDecodeError(f"action must be an object, got {type(data).__name__}")

        action = data.get(ResponseKey.ACTION.value, "")
        if action is None:
            action = ""
        if not isinstance(action, str):
            raise RequestDecodeError(
                f"field {ResponseKey.ACTION.value} must be a string, got {type(action).__name__}"
            )

        return cls(action=action, params=data.get(ResponseKey.PARAMS.value))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format"""
        return {
            ResponseKey.ACTION.value: self.action,
            ResponseKey.PARAMS.value: self.params,
        }
