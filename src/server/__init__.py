"""Server module initialization"""
from src.server.application import ServerApplication
from src.server.launcher import ServerLauncher
from src.server.decorators import endpoint_error_handler
from src.server.openapi import OpenAPISpecGenerator
from src.server.schemas import (
    ImageActionSchema,
    ProcessImageRequest,
    SingleActionRequest,
    ImageResponse,
    StatusResponse,
    ErrorResponse,
)

__all__ = [
    "ServerApplication",
    "ServerLauncher",
    "endpoint_error_handler",
    "OpenAPISpecGenerator",
    "ImageActionSchema",
    "ProcessImageRequest",
    "SingleActionRequest",
    "ImageResponse",
    "StatusResponse",
    "ErrorResponse",
]
