import numpy as np

from src.components.actions.adjustment_action import SigmaAction
from src.components.imaging import FilterOps
from src.core import ActionKind
from src.models import BlurParameters


class BlurAction(SigmaAction):
    """Gaussian blur"""

    kind = ActionKind.BLUR
    parameters_type = BlurParameters

    def transform(self, image: np.ndarray, sigma: float) -> np.ndarray:
        return FilterOps.blur(image, sigma)
