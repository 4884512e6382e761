from typing import Dict, List

from src.components.actions.base import BaseImageAction
from src.core import ActionKind
from src.models import ConvertParameters, PipelineState
from src.validation import BaseValidator
from src.validation.parameter_validators import (
    RequiredValidator,
    LowercaseValidator,
    LengthValidator,
)


MAX_FORMAT_LENGTH = 10


class ConvertAction(BaseImageAction):
    """
    Select the container format of the saved result.

    Pixels are left untouched; only the target extension of the state
    changes. Whether the format can actually be encoded is decided by the
    image store when the result is saved.
    """

    kind = ActionKind.CONVERT
    parameters_type = ConvertParameters

    def rules(self) -> Dict[str, List[BaseValidator]]:
        return {
            "format": [
                RequiredValidator("format"),
                LowercaseValidator("format"),
                LengthValidator("format", max_length=MAX_FORMAT_LENGTH),
            ],
        }

    def apply(self, params: ConvertParameters, state: PipelineState) -> PipelineState:
        return state.with_extension(params.format)
