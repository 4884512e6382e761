"""Request validators for different request types"""
from src.validation.request_validators.process_request_validator import ProcessRequestValidator
from src.validation.request_validators.image_action_validator import ImageActionValidator
from src.validation.request_validators.single_action_request_validator import SingleActionRequestValidator

__all__ = [
    "ProcessRequestValidator",
    "ImageActionValidator",
    "SingleActionRequestValidator",
]
