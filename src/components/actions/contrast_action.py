import numpy as np

from src.components.actions.adjustment_action import PercentageAction
from src.components.imaging import ColorOps
from src.core import ActionKind
from src.models import ContrastParameters


class ContrastAction(PercentageAction):
    kind = ActionKind.CONTRAST
    parameters_type = ContrastParameters

    def transform(self, image: np.ndarray, percentage: float) -> np.ndarray:
        return ColorOps.contrast(image, percentage)
