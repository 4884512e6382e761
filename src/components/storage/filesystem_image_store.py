"""Image store backed by a local directory"""
from datetime import datetime
from typing import BinaryIO
import itertools
import logging
import os
import threading

import cv2
import numpy as np

from src.components.storage.content_sniffer import ContentSniffer
from src.components.storage.image_store import IImageStore
from src.core import (
    ImageFormat,
    ImageNotFoundError,
    NameGenerationError,
    TransformError,
    UnsupportedFormatError,
)

logger = logging.getLogger(__name__)


class FilesystemImageStore(IImageStore):
    """
    Stores images as files in a single directory.

    Images are decoded into uint8 BGR/BGRA numpy arrays and encoded back to
    JPEG or PNG depending on the extension of the target name. Stored files
    are exposed under url_prefix.
    """

    TIMESTAMP_FORMAT = "%Y%m%d%H%M%S%f"

    _sequence = itertools.count(1)
    _sequence_lock = threading.Lock()

    def __init__(self, storage_path: str, url_prefix: str = "/images", upload_prefix: str = "img"):
        """
        Args:
            storage_path: Directory holding the images, created if missing
            url_prefix: URL path under which stored files are served
            upload_prefix: Name prefix of uploaded files
        """
        self._upload_prefix = upload_prefix
        self._storage_path = os.path.abspath(storage_path)
        self._url_prefix = url_prefix.rstrip("/")
        os.makedirs(self._storage_path, exist_ok=True)

    @property
    def storage_path(self) -> str:
        return self._storage_path

    def find_image(self, image_name: str) -> str:
        """
        Raises:
            ImageNotFoundError: If the name is unsafe or no such file exists
        """
        if not self._is_safe_name(image_name):
            raise ImageNotFoundError(image_name, "failed to find image")

        path = os.path.join(self._storage_path, image_name)
        if not os.path.isfile(path):
            raise ImageNotFoundError(image_name, "failed to find image")
        return path

    def load_image(self, image_name: str) -> np.ndarray:
        """
        Decode a stored image into a uint8 BGR or BGRA array

        Raises:
            ImageNotFoundError: If the file is missing or cannot be decoded
        """
        path = self.find_image(image_name)

        data = np.fromfile(path, dtype=np.uint8)
        image = cv2.imdecode(data, cv2.IMREAD_UNCHANGED) if data.size else None
        if image is None:
            raise ImageNotFoundError(image_name, "failed to load image")

        return self._normalize(image)

    def save_image(self, image: np.ndarray, image_name: str) -> str:
        """
        Encode an image according to the extension of image_name

        Returns:
            URL of the stored image

        Raises:
            UnsupportedFormatError: If the extension is not JPEG or PNG
            TransformError: If the name is unsafe or encoding or writing fails
        """
        if not self._is_safe_name(image_name):
            raise TransformError(f"invalid image name: {image_name}")

        extension = os.path.splitext(image_name)[1]
        try:
            image_format = ImageFormat.from_extension(extension)
        except ValueError:
            raise UnsupportedFormatError(extension.lower())

        if image_format.is_jpeg and image.ndim == 3 and image.shape[2] == 4:
            image = cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)

        try:
            ok, buffer = cv2.imencode(image_format.value, image)
        except cv2.error as e:
            raise TransformError(f"failed to encode {image_name}: {str(e)}") from e
        if not ok:
            raise TransformError(f"failed to encode {image_name}")

        self._write(image_name, buffer.tobytes())
        logger.info(f"Image saved - name: {image_name}, size: {image.shape[1]}x{image.shape[0]}")
        return self._url(image_name)

    def upload_image(self, stream: BinaryIO, filename: str) -> str:
        """
        Store an uploaded JPEG or PNG file under a generated name

        Raises:
            UnsupportedFormatError: If the content is not a supported image
            NameGenerationError: If the file name has no extension
            TransformError: If the file cannot be written
        """
        data = stream.read()
        content_type = ContentSniffer.detect_image(data)
        if content_type is None:
            raise UnsupportedFormatError(ContentSniffer.detect(data).value)

        image_name = self.generate_name(self._upload_prefix, os.path.splitext(filename)[1])
        self._write(image_name, data)
        logger.info(f"Image uploaded - name: {image_name}, content_type: {content_type.value}")
        return self._url(image_name)

    def delete_image(self, image_name: str) -> None:
        path = self.find_image(image_name)
        os.remove(path)

    def generate_name(self, prefix: str, extension: str) -> str:
        """
        Build '<prefix>_<timestamp>_<sequence><extension>'

        The process-wide sequence keeps names unique for calls within the
        same microsecond.

        Raises:
            NameGenerationError: If prefix or extension is empty
        """
        if not prefix or not extension:
            raise NameGenerationError("the file prefix or extension must not be empty")

        if not extension.startswith("."):
            extension = "." + extension

        with self._sequence_lock:
            sequence = next(self._sequence)

        timestamp = datetime.now().strftime(self.TIMESTAMP_FORMAT)
        return f"{prefix}_{timestamp}_{sequence}{extension}"

    def _write(self, image_name: str, data: bytes) -> None:
        path = os.path.join(self._storage_path, image_name)
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            if os.path.exists(path):
                self.delete_image(image_name)
            raise TransformError(f"failed to write {image_name}: {str(e)}") from e

    def _url(self, image_name: str) -> str:
        return f"{self._url_prefix}/{image_name}"

    @staticmethod
    def _is_safe_name(image_name: str) -> bool:
        if not image_name or image_name in (".", ".."):
            return False
        if "/" in image_name or "\\" in image_name or os.sep in image_name:
            return False
        return ".." not in image_name

    @staticmethod
    def _normalize(image: np.ndarray) -> np.ndarray:
        if image.dtype == np.uint16:
            image = (image // 257).astype(np.uint8)
        elif image.dtype != np.uint8:
            image = np.clip(image, 0, 255).astype(np.uint8)

        if image.ndim == 2:
            return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
        if image.shape[2] == 1:
            return cv2.cvtColor(image[..., 0], cv2.COLOR_GRAY2BGR)
        return image
