from typing import Optional

from src.core import ContentType


class ContentSniffer:
    """Detects image content types from leading bytes"""

    SNIFF_LENGTH = 512

    _SIGNATURES = (
        (b"\xff\xd8\xff", ContentType.IMAGE_JPEG),
        (b"\x89PNG\r\n\x1a\n", ContentType.IMAGE_PNG),
    )

    @classmethod
    def detect(cls, data: bytes) -> ContentType:
        """
        Args:
            data: File content (only the first SNIFF_LENGTH bytes are inspected)

        Returns:
            Detected content type, OCTET_STREAM when unknown
        """
        head = data[:cls.SNIFF_LENGTH]
        for signature, content_type in cls._SIGNATURES:
            if head.startswith(signature):
                return content_type
        return ContentType.OCTET_STREAM

    @classmethod
    def detect_image(cls, data: bytes) -> Optional[ContentType]:
        """Detected type if it is a supported image, else None"""
        content_type = cls.detect(data)
        return content_type if ContentType.is_image(content_type.value) else None
