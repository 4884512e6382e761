from src.core.enums import (
    ActionKind,
    ResponseKey,
    ResponseStatus,
    ErrorCategory,
    ImageFormat,
    Environment,
    ContentType,
)
from src.core.exceptions import (
    ImageEditorException,
    ConfigurationError,
    RequestDecodeError,
    ActionDecodeError,
    ActionValidationError,
    UnknownActionError,
    TransformError,
    CropBoundsError,
    UnsupportedFormatError,
    ImageNotFoundError,
    NameGenerationError,
    ActionFailedError,
)
from src.core.config import ServerConfig

__all__ = [
    "ActionKind",
    "ResponseKey",
    "ResponseStatus",
    "ErrorCategory",
    "ImageFormat",
    "Environment",
    "ContentType",
    "ImageEditorException",
    "ConfigurationError",
    "RequestDecodeError",
    "ActionDecodeError",
    "ActionValidationError",
    "UnknownActionError",
    "TransformError",
    "CropBoundsError",
    "UnsupportedFormatError",
    "ImageNotFoundError",
    "NameGenerationError",
    "ActionFailedError",
    "ServerConfig",
]
