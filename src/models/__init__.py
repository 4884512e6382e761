from src.models.image_action import ImageAction
from src.models.process_request import ProcessRequest
from src.models.pipeline_state import PipelineState
from src.models.action_parameters import (
    ActionParameters,
    CropParameters,
    ResizeParameters,
    SigmaParameters,
    BlurParameters,
    SharpenParameters,
    GammaParameters,
    PercentageParameters,
    BrightnessParameters,
    ContrastParameters,
    SaturationParameters,
    ConvertParameters,
)

__all__ = [
    "ImageAction",
    "ProcessRequest",
    "PipelineState",
    "ActionParameters",
    "CropParameters",
    "ResizeParameters",
    "SigmaParameters",
    "BlurParameters",
    "SharpenParameters",
    "GammaParameters",
    "PercentageParameters",
    "BrightnessParameters",
    "ContrastParameters",
    "SaturationParameters",
    "ConvertParameters",
]
