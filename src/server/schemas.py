"""API request/response models using Pydantic for documentation and response building"""
from typing import Dict, Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from src.core import ResponseStatus


class ImageActionSchema(BaseModel):
    """One step of a processing pipeline"""
    action: str = Field(..., description="Action kind (crop, resize, convert, blur, gamma, contrast, sharpen, brightness, saturation)")
    params: Dict[str, Any] = Field(..., description="Parameters of the action kind")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "action": "resize",
                "params": {"width": 50, "height": 50}
            }
        }
    )


class ProcessImageRequest(BaseModel):
    """
    Pipeline request model.

    Actions are applied in order to the stored image; the result is saved
    only if every action succeeds.
    """
    actions: List[ImageActionSchema] = Field(..., min_length=1, description="Ordered actions to apply")
    image_name: str = Field(..., max_length=100, description="Name of a stored image")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "actions": [
                    {"action": "crop", "params": {"x": 10, "y": 10, "width": 80, "height": 80}},
                    {"action": "blur", "params": {"sigma": 1.5}},
                    {"action": "convert", "params": {"format": "png"}}
                ],
                "image_name": "img_20240101120000000000_1.jpg"
            }
        }
    )


class SingleActionRequest(BaseModel):
    """
    Single-action request model.

    The parameters of the action named in the URL sit next to image_name.
    """
    image_name: str = Field(..., max_length=100, description="Name of a stored image")

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "image_name": "img_20240101120000000000_1.jpg",
                "sigma": 2.0
            }
        }
    )


class ImageResponse(BaseModel):
    """Response carrying the URL of a stored image"""
    status: str = Field(default=ResponseStatus.OK.value, description="Response status")
    image_url: str = Field(..., description="URL of the stored image")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "OK",
                "image_url": "/images/proc_20240101120000000000_2.png"
            }
        }
    )


class StatusResponse(BaseModel):
    """Server status response model"""
    status: str = Field(..., description="Server status")
    services: Dict[str, str] = Field(default_factory=dict, description="Status per registered service")
    actions: List[str] = Field(default_factory=list, description="Registered action kinds")


class ErrorResponse(BaseModel):
    """
    Standard error response model.

    Returned by endpoint error handler on decode, validation or processing errors.
    """
    status: str = Field(default=ResponseStatus.ERROR.value, description="Response status")
    error: str = Field(..., description="Error message")
    error_type: Optional[str] = Field(default=None, description="Error category")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "Error",
                "error": "failed to perform action brightness (#0): field percentage is not valid: max: must be <= 100, got 150.0",
                "error_type": "validation"
            }
        }
    )
