from src.components.storage.image_store import IImageStore
from src.components.storage.content_sniffer import ContentSniffer
from src.components.storage.filesystem_image_store import FilesystemImageStore

__all__ = [
    "IImageStore",
    "ContentSniffer",
    "FilesystemImageStore",
]
