"""
Custom exceptions for the image editor service.

Every exception carries an ErrorCategory so the HTTP layer can map it to a
status code without inspecting messages.
"""

from typing import List, Optional

from src.core.enums import ErrorCategory


class ImageEditorException(Exception):
    """Base exception class for all image editor errors"""

    category: ErrorCategory = ErrorCategory.INTERNAL


class ConfigurationError(ImageEditorException):
    """Raised when environment configuration cannot be parsed"""
    pass


class RequestDecodeError(ImageEditorException):
    """Raised when the request body does not have the expected JSON shape"""

    category = ErrorCategory.DECODE


class ActionDecodeError(ImageEditorException):
    """
    Raised when an action payload cannot be decoded into its parameter record.

    This covers wrong value types (e.g. a string where a number is required)
    and payloads that are not JSON objects at all.
    """

    category = ErrorCategory.DECODE

    def __init__(self, action: str, details: Optional[str] = None):
        """
        Initialize ActionDecodeError.

        Args:
            action: Action kind whose payload failed to decode
            details: Decoder error details
        """
        self.action = action
        self.details = details

        message = f"invalid {action} params"
        if details:
            message += f": {details}"
        super().__init__(message)


class ActionValidationError(ImageEditorException):
    """Raised when a request or parameter record violates a validation rule"""

    category = ErrorCategory.VALIDATION

    def __init__(self, errors: List[Exception]):
        """
        Initialize ActionValidationError.

        Args:
            errors: Individual validation errors (src.validation.ValidationError)
        """
        self.errors = list(errors)
        super().__init__(", ".join(str(error) for error in self.errors))

    @property
    def fields(self) -> List[Optional[str]]:
        """Names of the fields that failed validation"""
        return [getattr(error, "parameter_name", None) for error in self.errors]


class UnknownActionError(ImageEditorException):
    """Raised when an action kind is not present in the registry"""

    category = ErrorCategory.UNKNOWN_ACTION

    def __init__(self, action: str, allowed: Optional[List[str]] = None):
        self.action = action
        self.allowed = allowed or []
        message = f"field {action} must be one of the allowed values"
        if self.allowed:
            message += f": {' '.join(self.allowed)}"
        super().__init__(message)


class TransformError(ImageEditorException):
    """Raised when an image transformation or encoding fails"""

    category = ErrorCategory.TRANSFORM


class CropBoundsError(TransformError):
    """
    Raised when a crop rectangle exceeds the current image extents.

    Evaluated against the image as it exists at that point of the pipeline,
    which may already have been resized or cropped by earlier actions.
    """

    category = ErrorCategory.BOUNDS

    def __init__(self, x: int, y: int, width: int, height: int, image_width: int, image_height: int):
        self.rect = (x, y, width, height)
        self.image_size = (image_width, image_height)
        super().__init__(
            f"crop area ({x}, {y}, {width}x{height}) exceeds image boundaries "
            f"({image_width}x{image_height})"
        )


class UnsupportedFormatError(TransformError):
    """Raised when the store is asked to encode an unsupported container format"""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"unsupported file format: {extension}")


class ImageNotFoundError(ImageEditorException):
    """Raised when a named image is missing from the store or cannot be decoded"""

    category = ErrorCategory.NOT_FOUND

    def __init__(self, image_name: str, details: Optional[str] = None):
        self.image_name = image_name
        self.details = details
        message = f"image '{image_name}' not found"
        if details:
            message += f": {details}"
        super().__init__(message)


class NameGenerationError(ImageEditorException):
    """Raised when an output file name cannot be generated"""
    pass


class ActionFailedError(ImageEditorException):
    """
    First failure of a pipeline run.

    Identifies which action failed (position and kind) and wraps the
    categorized cause.
    """

    def __init__(self, index: int, action: str, cause: ImageEditorException):
        """
        Initialize ActionFailedError.

        Args:
            index: Zero-based position of the failing action
            action: Kind of the failing action as sent by the client
            cause: The categorized error that stopped the pipeline
        """
        self.index = index
        self.action = action
        self.cause = cause
        super().__init__(f"failed to perform action {action} (#{index}): {cause}")

    @property
    def category(self) -> ErrorCategory:  # type: ignore[override]
        return self.cause.category
