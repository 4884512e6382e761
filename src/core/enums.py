from enum import Enum


class ActionKind(Enum):
    """Image actions supported by the processing pipeline"""
    CROP = "crop"
    RESIZE = "resize"
    CONVERT = "convert"
    BLUR = "blur"
    GAMMA = "gamma"
    CONTRAST = "contrast"
    SHARPEN = "sharpen"
    BRIGHTNESS = "brightness"
    SATURATION = "saturation"

    @classmethod
    def values(cls) -> list:
        return [kind.value for kind in cls]


class ResponseKey(Enum):
    """API request/response keys"""
    STATUS = "status"
    ERROR = "error"
    ERROR_TYPE = "error_type"
    IMAGE_URL = "image_url"
    SERVICES = "services"
    ACTIONS = "actions"
    ACTION = "action"
    PARAMS = "params"
    IMAGE_NAME = "image_name"


class ResponseStatus(Enum):
    """Status values of the JSON response envelope"""
    OK = "OK"
    ERROR = "Error"


class ErrorCategory(Enum):
    """Discriminates failures raised while handling an image request"""
    DECODE = "decode"
    VALIDATION = "validation"
    UNKNOWN_ACTION = "unknown_action"
    BOUNDS = "bounds"
    TRANSFORM = "transform"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


class ImageFormat(Enum):
    """Container formats the image store can encode"""
    JPG = ".jpg"
    JPEG = ".jpeg"
    PNG = ".png"

    @classmethod
    def from_extension(cls, extension: str) -> "ImageFormat":
        """
        Resolve a file extension (with or without leading dot, any case).

        Raises:
            ValueError: If the extension is not a supported container
        """
        normalized = extension.lower()
        if not normalized.startswith("."):
            normalized = "." + normalized
        return cls(normalized)

    @property
    def is_jpeg(self) -> bool:
        return self in (ImageFormat.JPG, ImageFormat.JPEG)


class Environment(Enum):
    """Deployment environments, used to pick the logging setup"""
    LOCAL = "local"
    DEV = "dev"
    PROD = "prod"


class ContentType(Enum):
    IMAGE_JPEG = "image/jpeg"
    IMAGE_PNG = "image/png"
    OCTET_STREAM = "application/octet-stream"

    @classmethod
    def is_image(cls, content_type: str) -> bool:
        return content_type.startswith('image/')
