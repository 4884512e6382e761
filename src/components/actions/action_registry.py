from typing import Dict, List

from src.components.actions.base import BaseImageAction
from src.components.actions.crop_action import CropAction
from src.components.actions.resize_action import ResizeAction
from src.components.actions.convert_action import ConvertAction
from src.components.actions.blur_action import BlurAction
from src.components.actions.gamma_action import GammaAction
from src.components.actions.contrast_action import ContrastAction
from src.components.actions.sharpen_action import SharpenAction
from src.components.actions.brightness_action import BrightnessAction
from src.components.actions.saturation_action import SaturationAction
from src.core import ActionKind, UnknownActionError


class ActionRegistry:
    """
    Registry of pipeline actions (Factory + Registry Pattern)

    Read-only lookup from action kind to its action. Built once at import
    and shared by all requests; adding an action means adding one entry here.
    """

    _ACTIONS: Dict[ActionKind, BaseImageAction] = {
        action.kind: action
        for action in (
            CropAction(),
            ResizeAction(),
            ConvertAction(),
            BlurAction(),
            GammaAction(),
            ContrastAction(),
            SharpenAction(),
            BrightnessAction(),
            SaturationAction(),
        )
    }

    @classmethod
    def get(cls, action: str) -> BaseImageAction:
        """
        Resolve an action kind string (exact, case-sensitive match)

        Args:
            action: Action kind as sent by the client

        Returns:
            Registered action

        Raises:
            UnknownActionError: If no action is registered under that name
        """
        try:
            kind = ActionKind(action)
        except ValueError:
            raise UnknownActionError(action, cls.kinds())

        registered = cls._ACTIONS.get(kind)
        if registered is None:
            raise UnknownActionError(action, cls.kinds())
        return registered

    @classmethod
    def kinds(cls) -> List[str]:
        """Registered action kinds in declaration order"""
        return [kind.value for kind in cls._ACTIONS]
