import cv2
import numpy as np


class FilterOps:
    """Convolution based operations"""

    @classmethod
    def blur(cls, image: np.ndarray, sigma: float) -> np.ndarray:
        """Gaussian blur, kernel size derived from sigma"""
        if sigma <= 0:
            return image.copy()
        return cv2.GaussianBlur(image, (0, 0), sigmaX=sigma, sigmaY=sigma)

    @classmethod
    def sharpen(cls, image: np.ndarray, sigma: float) -> np.ndarray:
        """Unsharp mask: src + (src - blur(src, sigma)), clamped to [0, 255]"""
        if sigma <= 0:
            return image.copy()
        blurred = cls.blur(image, sigma).astype(np.int16)
        source = image.astype(np.int16)
        return np.clip(2 * source - blurred, 0, 255).astype(np.uint8)
