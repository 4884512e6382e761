import numpy as np

from src.components.actions.adjustment_action import PercentageAction
from src.components.imaging import ColorOps
from src.core import ActionKind
from src.models import SaturationParameters


class SaturationAction(PercentageAction):
    kind = ActionKind.SATURATION
    parameters_type = SaturationParameters

    def transform(self, image: np.ndarray, percentage: float) -> np.ndarray:
        return ColorOps.saturation(image, percentage)
