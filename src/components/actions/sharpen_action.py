import numpy as np

from src.components.actions.adjustment_action import SigmaAction
from src.components.imaging import FilterOps
from src.core import ActionKind
from src.models import SharpenParameters


class SharpenAction(SigmaAction):
    """Unsharp mask"""

    kind = ActionKind.SHARPEN
    parameters_type = SharpenParameters

    def transform(self, image: np.ndarray, sigma: float) -> np.ndarray:
        return FilterOps.sharpen(image, sigma)
