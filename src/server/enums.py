from enum import Enum


class ServiceStatus(Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ServerStatus(Enum):
    STARTING = "starting"
    RUNNING = "running"
    STOPPED = "stopped"
    ERROR = "error"


class HTTPStatus(Enum):
    OK = 200
    BAD_REQUEST = 400
    NOT_FOUND = 404
    UNSUPPORTED_MEDIA_TYPE = 415
    INTERNAL_SERVER_ERROR = 500


class ServiceName(Enum):
    """Service names for dependency injection"""
    IMAGE_PROCESSING_SERVICE = "image_processing_service"


class Endpoint(Enum):
    """API endpoint names"""
    STATUS = "status"
    UPLOAD = "upload"
    PROCESS = "process"
    SINGLE_ACTION = "single_action"
    SERVE_IMAGE = "serve_image"
