import cv2
import numpy as np


class GeometryOps:
    """Operations that change the pixel grid of an image"""

    @classmethod
    def crop(cls, image: np.ndarray, x: int, y: int, width: int, height: int) -> np.ndarray:
        """
        Cut the rectangle [x, x+width) x [y, y+height) out of the image.

        The rectangle is clipped to the image, bounds checking is the
        caller's job.
        """
        return image[y:y + height, x:x + width].copy()

    @classmethod
    def resize(cls, image: np.ndarray, width: int, height: int) -> np.ndarray:
        """
        Resample to width x height with a Lanczos filter.

        If one of width or height is 0 the aspect ratio is preserved. If both
        are 0 an empty image is returned.
        """
        src_height, src_width = image.shape[:2]

        if width == 0 and height == 0:
            return np.zeros((0, 0) + image.shape[2:], dtype=image.dtype)
        if width == 0:
            width = max(1, int(round(src_width * height / src_height)))
        if height == 0:
            height = max(1, int(round(src_height * width / src_width)))

        if (width, height) == (src_width, src_height):
            return image.copy()

        return cv2.resize(image, (width, height), interpolation=cv2.INTER_LANCZOS4)
