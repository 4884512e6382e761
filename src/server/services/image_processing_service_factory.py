from typing import Dict
from src.components.storage import FilesystemImageStore
from src.core import ServerConfig
from src.server.services.image_processing_service import ImageProcessingService


class ImageProcessingServiceFactory:
    """Factory for creating image processing service instances (Singleton Pattern per storage directory)"""

    _instances: Dict[str, ImageProcessingService] = {}

    @classmethod
    def get_instance(cls, config: ServerConfig) -> ImageProcessingService:
        """
        Get singleton instance of the service for the configured storage directory

        Args:
            config: Server configuration

        Returns:
            ImageProcessingService instance
        """
        if config.storage_image_path not in cls._instances:
            store = FilesystemImageStore(
                config.storage_image_path,
                upload_prefix=config.upload_prefix
            )
            cls._instances[config.storage_image_path] = ImageProcessingService(
                store,
                output_prefix=config.output_prefix
            )
        return cls._instances[config.storage_image_path]

    @classmethod
    def reset_instance(cls, storage_image_path: str | None = None) -> None:
        """
        Reset singleton instance(s) (useful for testing)

        Args:
            storage_image_path: If specified, reset only that directory's instance. Otherwise, reset all.
        """
        if storage_image_path is None:
            cls._instances = {}
        else:
            cls._instances.pop(storage_image_path, None)
