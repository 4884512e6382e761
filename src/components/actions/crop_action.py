from typing import Dict, List

from src.components.actions.base import BaseImageAction
from src.components.imaging import GeometryOps
from src.core import ActionKind, CropBoundsError
from src.models import CropParameters, PipelineState
from src.validation import BaseValidator
from src.validation.parameter_validators import RequiredValidator, RangeValidator


class CropAction(BaseImageAction):
    """
    Cut a rectangle out of the current image.

    Besides the static rules, the rectangle must fit inside the image as it
    is at this point of the pipeline, not the originally loaded image.
    """

    kind = ActionKind.CROP
    parameters_type = CropParameters

    def rules(self) -> Dict[str, List[BaseValidator]]:
        return {
            "x": [RangeValidator("x", min_value=0)],
            "y": [RangeValidator("y", min_value=0)],
            "width": [RequiredValidator("width"), RangeValidator("width", min_value=1)],
            "height": [RequiredValidator("height"), RangeValidator("height", min_value=1)],
        }

    def apply(self, params: CropParameters, state: PipelineState) -> PipelineState:
        self.check_bounds(params, state)
        cropped = GeometryOps.crop(state.image, params.x, params.y, params.width, params.height)
        return state.with_image(cropped)

    @staticmethod
    def check_bounds(params: CropParameters, state: PipelineState) -> None:
        """
        Raises:
            CropBoundsError: If x + width or y + height exceed the image size
        """
        if params.x + params.width > state.width or params.y + params.height > state.height:
            raise CropBoundsError(
                params.x, params.y, params.width, params.height, state.width, state.height
            )
