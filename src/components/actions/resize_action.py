from typing import Dict, List

from src.components.actions.base import BaseImageAction
from src.components.imaging import GeometryOps
from src.core import ActionKind
from src.models import ResizeParameters, PipelineState
from src.validation import BaseValidator
from src.validation.parameter_validators import RequiredValidator, RangeValidator


MAX_DIMENSION = 8000


class ResizeAction(BaseImageAction):
    """Resample the current image to a new size"""

    kind = ActionKind.RESIZE
    parameters_type = ResizeParameters

    def rules(self) -> Dict[str, List[BaseValidator]]:
        return {
            "width": [
                RequiredValidator("width"),
                RangeValidator("width", min_value=0, max_value=MAX_DIMENSION),
            ],
            "height": [
                RequiredValidator("height"),
                RangeValidator("height", min_value=0, max_value=MAX_DIMENSION),
            ],
        }

    def apply(self, params: ResizeParameters, state: PipelineState) -> PipelineState:
        return state.with_image(GeometryOps.resize(state.image, params.width, params.height))
