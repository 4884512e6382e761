"""
Process Request Model

Top-level request of the pipeline endpoint: an ordered list of actions and
the name of a stored image.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from src.core import ResponseKey, RequestDecodeError
from src.models.image_action import ImageAction


@dataclass(frozen=True)
class ProcessRequest:
    """Pipeline request from API"""
    actions: List[ImageAction] = field(default_factory=list)
    image_name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "ProcessRequest":
        """
        Parse dictionary into ProcessRequest

        Args:
            data: Raw JSON body

        Returns:
            ProcessRequest instance

        Raises:
            RequestDecodeError: If the body does not have the expected JSON shape
        """
        if not isinstance(data, dict):
            raise RequestDecodeError(f"request must be an object, got {type(data).__name__}")

        raw_actions = data.get(ResponseKey.ACTIONS.value)
        if raw_actions is None:
            raw_actions = []
        if not isinstance(raw_actions, list):
            raise RequestDecodeError(
                f"field {ResponseKey.ACTIONS.value} must be a list, got {type(raw_actions).__name__}"
            )

        image_name = data.get(ResponseKey.IMAGE_NAME.value)
        if image_name is None:
            image_name = ""
        if not isinstance(image_name, str):
            raise RequestDecodeError(
                f"field {ResponseKey.IMAGE_NAME.value} must be a string, got {type(image_name).__name__}"
            )

        return cls(
            actions=[ImageAction.from_dict(item) for item in raw_actions],
            image_name=image_name,
        )

    @classmethod
    def for_single_action(cls, action: str, data: Any) -> "ProcessRequest":
        """
        Build a one-step request from a single-action endpoint body.

        The body carries the action's parameters at top level next to
        'image_name'.

        Raises:
            RequestDecodeError: If the body is not a JSON object
        """
        if not isinstance(data, dict):
            raise RequestDecodeError(f"request must be an object, got {type(data).__name__}")

        image_name = data.get(ResponseKey.IMAGE_NAME.value)
        if image_name is None:
            image_name = ""
        if not isinstance(image_name, str):
            raise RequestDecodeError(
                f"field {ResponseKey.IMAGE_NAME.value} must be a string, got {type(image_name).__name__}"
            )

        params = {k: v for k, v in data.items() if k != ResponseKey.IMAGE_NAME.value}
        return cls(actions=[ImageAction(action=action, params=params)], image_name=image_name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format"""
        return {
            ResponseKey.ACTIONS.value: [action.to_dict() for action in self.actions],
            ResponseKey.IMAGE_NAME.value: self.image_name,
        }
