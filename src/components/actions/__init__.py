from src.components.actions.base import BaseImageAction
from src.components.actions.adjustment_action import SigmaAction, PercentageAction
from src.components.actions.crop_action import CropAction
from src.components.actions.resize_action import ResizeAction
from src.components.actions.convert_action import ConvertAction
from src.components.actions.blur_action import BlurAction
from src.components.actions.gamma_action import GammaAction
from src.components.actions.contrast_action import ContrastAction
from src.components.actions.sharpen_action import SharpenAction
from src.components.actions.brightness_action import BrightnessAction
from src.components.actions.saturation_action import SaturationAction
from src.components.actions.action_registry import ActionRegistry

__all__ = [
    "BaseImageAction",
    "SigmaAction",
    "PercentageAction",
    "CropAction",
    "ResizeAction",
    "ConvertAction",
    "BlurAction",
    "GammaAction",
    "ContrastAction",
    "SharpenAction",
    "BrightnessAction",
    "SaturationAction",
    "ActionRegistry",
]
