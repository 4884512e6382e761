from abc import ABC, abstractmethod
from typing import BinaryIO

import numpy as np


class IImageStore(ABC):
    """Interface for image persistence used by the processing service"""

    @abstractmethod
    def find_image(self, image_name: str) -> str:
        """Return the path of a stored image, or raise ImageNotFoundError"""
        pass

    @abstractmethod
    def load_image(self, image_name: str) -> np.ndarray:
        """Decode a stored image, or raise ImageNotFoundError"""
        pass

    @abstractmethod
    def save_image(self, image: np.ndarray, image_name: str) -> str:
        """Encode and store an image, returning its URL"""
        pass

    @abstractmethod
    def upload_image(self, stream: BinaryIO, filename: str) -> str:
        """Store an uploaded file as-is, returning its URL"""
        pass

    @abstractmethod
    def delete_image(self, image_name: str) -> None:
        pass

    @abstractmethod
    def generate_name(self, prefix: str, extension: str) -> str:
        """Build a unique file name from a prefix and an extension"""
        pass
