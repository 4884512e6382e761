"""Tests for FilesystemImageStore"""
import io
import os
import re
import threading

import cv2
import numpy as np
import pytest

from src.components.storage import FilesystemImageStore
from src.core import (
    ImageNotFoundError,
    NameGenerationError,
    TransformError,
    UnsupportedFormatError,
    ErrorCategory,
)


class TestStorageDirectory:

    def test_directory_created(self, tmp_path):
        path = tmp_path / "nested" / "images"
        store = FilesystemImageStore(str(path))

        assert path.is_dir()
        assert store.storage_path == str(path)


class TestFindAndLoad:
    """Tests for find_image and load_image"""

    def test_find_existing(self, store, stored_png):
        assert store.find_image(stored_png) == os.path.join(store.storage_path, stored_png)

    def test_find_missing(self, store):
        with pytest.raises(ImageNotFoundError) as exc_info:
            store.find_image("missing.png")

        assert exc_info.value.category == ErrorCategory.NOT_FOUND
        assert "failed to find image" in str(exc_info.value)

    @pytest.mark.parametrize("name", ["../source.png", "sub/source.png", "..", "", "a\\b.png"])
    def test_unsafe_names_not_found(self, store, stored_png, name):
        with pytest.raises(ImageNotFoundError):
            store.find_image(name)

    def test_load_png(self, store, stored_png, gradient_image):
        image = store.load_image(stored_png)

        assert image.dtype == np.uint8
        np.testing.assert_array_equal(image, gradient_image)

    def test_load_jpeg(self, store, stored_jpeg):
        assert store.load_image(stored_jpeg).shape == (100, 100, 3)

    def test_load_grey_png_expands_to_bgr(self, store):
        grey = np.full((10, 12), 90, dtype=np.uint8)
        cv2.imwrite(os.path.join(store.storage_path, "grey.png"), grey)

        image = store.load_image("grey.png")

        assert image.shape == (10, 12, 3)
        assert (image == 90).all()

    def test_load_16_bit_png_scaled_down(self, store):
        deep = np.full((4, 4, 3), 65535, dtype=np.uint16)
        cv2.imwrite(os.path.join(store.storage_path, "deep.png"), deep)

        image = store.load_image("deep.png")

        assert image.dtype == np.uint8
        assert (image == 255).all()

    def test_load_png_with_alpha(self, store, bgra_image):
        cv2.imwrite(os.path.join(store.storage_path, "alpha.png"), bgra_image)
        assert store.load_image("alpha.png").shape == (32, 32, 4)

    @pytest.mark.parametrize("content", [b"not an image", b""])
    def test_load_undecodable(self, store, content):
        with open(os.path.join(store.storage_path, "broken.png"), "wb") as f:
            f.write(content)

        with pytest.raises(ImageNotFoundError) as exc_info:
            store.load_image("broken.png")

        assert "failed to load image" in str(exc_info.value)


class TestSaveImage:
    """Tests for save_image"""

    def test_save_png_round_trip(self, store, gradient_image):
        url = store.save_image(gradient_image, "out.png")

        assert url == "/images/out.png"
        np.testing.assert_array_equal(store.load_image("out.png"), gradient_image)

    @pytest.mark.parametrize("name", ["out.jpg", "out.jpeg", "OUT.JPG", "out.PNG"])
    def test_supported_extensions(self, store, gradient_image, name):
        store.save_image(gradient_image, name)
        assert os.path.isfile(os.path.join(store.storage_path, name))

    def test_jpeg_drops_alpha(self, store, bgra_image):
        store.save_image(bgra_image, "flat.jpg")
        assert store.load_image("flat.jpg").shape == (32, 32, 3)

    def test_png_keeps_alpha(self, store, bgra_image):
        store.save_image(bgra_image, "alpha.png")
        assert store.load_image("alpha.png")[0, 0, 3] == 77

    @pytest.mark.parametrize("name", ["out.gif", "out.webp", "out"])
    def test_unsupported_extension(self, store, gradient_image, name):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            store.save_image(gradient_image, name)

        assert exc_info.value.category == ErrorCategory.TRANSFORM
        assert not os.path.exists(os.path.join(store.storage_path, name))

    @pytest.mark.parametrize("name", ["proc_1./../a.png", "../a.png", "sub/a.png", "a\\b.png"])
    def test_unsafe_name_rejected_before_writing(self, store, tmp_path, gradient_image, name):
        with pytest.raises(TransformError) as exc_info:
            store.save_image(gradient_image, name)

        assert "invalid image name" in str(exc_info.value)
        assert [p.name for p in tmp_path.rglob("*")] == ["images"]

    def test_empty_image_fails_to_encode(self, store):
        empty = np.zeros((0, 0, 3), dtype=np.uint8)

        with pytest.raises(TransformError):
            store.save_image(empty, "empty.png")

    def test_custom_url_prefix(self, tmp_path, gradient_image):
        store = FilesystemImageStore(str(tmp_path), url_prefix="/static/")
        assert store.save_image(gradient_image, "a.png") == "/static/a.png"


class TestUploadImage:
    """Tests for upload_image"""

    def test_upload_png(self, store, png_bytes):
        url = store.upload_image(io.BytesIO(png_bytes), "holiday.png")
        name = url.rsplit("/", 1)[1]

        assert url.startswith("/images/img_")
        assert name.endswith(".png")
        with open(os.path.join(store.storage_path, name), "rb") as f:
            assert f.read() == png_bytes

    def test_upload_prefix(self, tmp_path, jpeg_bytes):
        store = FilesystemImageStore(str(tmp_path), upload_prefix="up")
        assert store.upload_image(io.BytesIO(jpeg_bytes), "a.JPG").startswith("/images/up_")

    def test_upload_keeps_client_extension(self, store, jpeg_bytes):
        assert store.upload_image(io.BytesIO(jpeg_bytes), "camera.jpeg").endswith(".jpeg")

    def test_upload_non_image(self, store):
        with pytest.raises(UnsupportedFormatError):
            store.upload_image(io.BytesIO(b"GIF89a not supported"), "anim.gif")

        assert os.listdir(store.storage_path) == []

    def test_upload_without_extension(self, store, png_bytes):
        with pytest.raises(NameGenerationError):
            store.upload_image(io.BytesIO(png_bytes), "noextension")


class TestGenerateName:
    """Tests for generate_name"""

    NAME_PATTERN = re.compile(r"^proc_\d{20}_\d+\.png$")

    @pytest.mark.parametrize("extension", ["png", ".png"])
    def test_format(self, store, extension):
        assert self.NAME_PATTERN.match(store.generate_name("proc", extension))

    @pytest.mark.parametrize("prefix, extension", [("", ".png"), ("proc", ""), ("", "")])
    def test_empty_parts(self, store, prefix, extension):
        with pytest.raises(NameGenerationError) as exc_info:
            store.generate_name(prefix, extension)

        assert exc_info.value.category == ErrorCategory.INTERNAL

    def test_unique_across_threads(self, store):
        names = []
        lock = threading.Lock()

        def worker():
            for _ in range(50):
                name = store.generate_name("proc", ".png")
                with lock:
                    names.append(name)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(set(names)) == 400


class TestDeleteImage:

    def test_delete(self, store, stored_png):
        store.delete_image(stored_png)
        assert not os.path.exists(os.path.join(store.storage_path, stored_png))

    def test_delete_missing(self, store):
        with pytest.raises(ImageNotFoundError):
            store.delete_image("missing.png")
