"""
Typed parameter records, one per action kind.

Records are decoded strictly: a value of the wrong JSON type is rejected
instead of coerced, and unknown keys are ignored. Fields default to their
zero value so that a missing field is reported by validation ('required')
rather than by decoding. Value bounds are not checked here; each action
declares its own validation rules.
"""
from pydantic import BaseModel, ConfigDict


class ActionParameters(BaseModel):
    """Base class for action parameter records"""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


class CropParameters(ActionParameters):
    """Crop rectangle in pixels, origin at the top-left corner"""
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


class ResizeParameters(ActionParameters):
    """Target size in pixels"""
    width: int = 0
    height: int = 0


class SigmaParameters(ActionParameters):
    """Records with a single 'sigma' value"""
    sigma: float = 0.0


class BlurParameters(SigmaParameters):
    """Gaussian blur strength"""


class SharpenParameters(SigmaParameters):
    """Unsharp mask strength"""


class GammaParameters(SigmaParameters):
    """Gamma correction value, sent as 'sigma'"""


class PercentageParameters(ActionParameters):
    """Records with a single signed 'percentage' value"""
    percentage: float = 0.0


class BrightnessParameters(PercentageParameters):
    pass


class ContrastParameters(PercentageParameters):
    pass


class SaturationParameters(PercentageParameters):
    pass


class ConvertParameters(ActionParameters):
    """Target container format, e.g. 'png'"""
    format: str = ""
