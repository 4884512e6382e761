from src.server.services.image_processing_service import ImageProcessingService
from src.server.services.image_processing_service_factory import ImageProcessingServiceFactory
from src.server.services.logging import configure_logging, RequestIdFilter, REQUEST_ID_HEADER

__all__ = [
    "ImageProcessingService",
    "ImageProcessingServiceFactory",
    "configure_logging",
    "RequestIdFilter",
    "REQUEST_ID_HEADER",
]
