"""Shared fixtures: synthetic images and a temporary image store"""
import cv2
import numpy as np
import pytest

from src.components.storage import FilesystemImageStore


@pytest.fixture
def gradient_image():
    """100x100 BGR image with distinct values per row and column"""
    rows = np.arange(100, dtype=np.uint8).reshape(100, 1)
    cols = np.arange(100, dtype=np.uint8).reshape(1, 100)
    image = np.zeros((100, 100, 3), dtype=np.uint8)
    image[..., 0] = rows + cols
    image[..., 1] = rows
    image[..., 2] = cols * 2
    return image


@pytest.fixture
def colour_image():
    """64x48 BGR image with saturated colour blocks"""
    image = np.zeros((48, 64, 3), dtype=np.uint8)
    image[:, :32] = (200, 40, 10)
    image[:, 32:] = (20, 180, 230)
    return image


@pytest.fixture
def bgra_image():
    """32x32 BGRA image with a constant alpha of 77"""
    image = np.full((32, 32, 4), 100, dtype=np.uint8)
    image[..., 3] = 77
    return image


@pytest.fixture
def png_bytes(gradient_image):
    ok, buffer = cv2.imencode(".png", gradient_image)
    assert ok
    return buffer.tobytes()


@pytest.fixture
def jpeg_bytes(gradient_image):
    ok, buffer = cv2.imencode(".jpg", gradient_image)
    assert ok
    return buffer.tobytes()


@pytest.fixture
def store(tmp_path):
    """Filesystem store in a temporary directory"""
    return FilesystemImageStore(str(tmp_path / "images"))


@pytest.fixture
def stored_png(store, png_bytes):
    """Name of a 100x100 PNG present in the store"""
    with open(f"{store.storage_path}/source.png", "wb") as f:
        f.write(png_bytes)
    return "source.png"


@pytest.fixture
def stored_jpeg(store, jpeg_bytes):
    """Name of a 100x100 JPEG present in the store"""
    with open(f"{store.storage_path}/source.jpg", "wb") as f:
        f.write(jpeg_bytes)
    return "source.jpg"
