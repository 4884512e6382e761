from abc import abstractmethod
from typing import Dict, List

import numpy as np

from src.components.actions.base import BaseImageAction
from src.models import PipelineState, SigmaParameters, PercentageParameters
from src.validation import BaseValidator
from src.validation.parameter_validators import RequiredValidator, RangeValidator


class SigmaAction(BaseImageAction):
    """Base for actions driven by a single 'sigma' in [0.1, 100]"""

    MIN_SIGMA = 0.1
    MAX_SIGMA = 100.0

    def rules(self) -> Dict[str, List[BaseValidator]]:
        return {
            "sigma": [
                RequiredValidator("sigma"),
                RangeValidator("sigma", min_value=self.MIN_SIGMA, max_value=self.MAX_SIGMA),
            ],
        }

    def apply(self, params: SigmaParameters, state: PipelineState) -> PipelineState:
        return state.with_image(self.transform(state.image, params.sigma))

    @abstractmethod
    def transform(self, image: np.ndarray, sigma: float) -> np.ndarray:
        pass


class PercentageAction(BaseImageAction):
    """Base for actions driven by a single 'percentage' in [-100, 100]"""

    MIN_PERCENTAGE = -100
    MAX_PERCENTAGE = 100

    def rules(self) -> Dict[str, List[BaseValidator]]:
        return {
            "percentage": [
                RequiredValidator("percentage"),
                RangeValidator(
                    "percentage", min_value=self.MIN_PERCENTAGE, max_value=self.MAX_PERCENTAGE
                ),
            ],
        }

    def apply(self, params: PercentageParameters, state: PipelineState) -> PipelineState:
        return state.with_image(self.transform(state.image, params.percentage))

    @abstractmethod
    def transform(self, image: np.ndarray, percentage: float) -> np.ndarray:
        pass
