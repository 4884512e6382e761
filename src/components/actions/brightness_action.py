import numpy as np

from src.components.actions.adjustment_action import PercentageAction
from src.components.imaging import ColorOps
from src.core import ActionKind
from src.models import BrightnessParameters


class BrightnessAction(PercentageAction):
    kind = ActionKind.BRIGHTNESS
    parameters_type = BrightnessParameters

    def transform(self, image: np.ndarray, percentage: float) -> np.ndarray:
        return ColorOps.brightness(image, percentage)
