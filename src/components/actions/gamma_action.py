import numpy as np

from src.components.actions.adjustment_action import SigmaAction
from src.components.imaging import ColorOps
from src.core import ActionKind
from src.models import GammaParameters


class GammaAction(SigmaAction):
    """Gamma correction, the gamma value is sent as 'sigma'"""

    kind = ActionKind.GAMMA
    parameters_type = GammaParameters

    def transform(self, image: np.ndarray, sigma: float) -> np.ndarray:
        return ColorOps.gamma(image, sigma)
