import cv2
import numpy as np

from src.components.imaging.lut import LookupTable


class ColorOps:
    """Per-pixel colour adjustments"""

    MIN_GAMMA = 0.0001

    @classmethod
    def gamma(cls, image: np.ndarray, gamma: float) -> np.ndarray:
        """Gamma correction: 255 * (i / 255) ** (1 / gamma)"""
        exponent = 1.0 / max(gamma, cls.MIN_GAMMA)
        values = np.power(LookupTable.intensities() / 255.0, exponent) * 255.0
        return LookupTable.apply(image, LookupTable.from_values(values))

    @classmethod
    def brightness(cls, image: np.ndarray, percentage: float) -> np.ndarray:
        """Shift intensities by percentage of the full range, in [-100, 100]"""
        percentage = cls._clamp_percentage(percentage)
        if percentage == 0:
            return image.copy()
        shift = 255.0 * percentage / 100.0
        return LookupTable.apply(image, LookupTable.from_values(LookupTable.intensities() + shift))

    @classmethod
    def contrast(cls, image: np.ndarray, percentage: float) -> np.ndarray:
        """
        Stretch or compress intensities around mid-grey.

        -100 maps everything to mid-grey, 100 thresholds at mid-grey.
        """
        percentage = cls._clamp_percentage(percentage)
        if percentage == 0:
            return image.copy()

        v = (100.0 + percentage) / 100.0
        normalized = LookupTable.intensities() / 255.0
        if 0 <= v <= 1:
            values = (0.5 + (normalized - 0.5) * v) * 255.0
        elif 1 < v < 2:
            values = (0.5 + (normalized - 0.5) * (1.0 / (2.0 - v))) * 255.0
        else:
            values = np.floor(normalized + 0.5) * 255.0
        return LookupTable.apply(image, LookupTable.from_values(values))

    @classmethod
    def saturation(cls, image: np.ndarray, percentage: float) -> np.ndarray:
        """Scale HLS saturation by (1 + percentage / 100)"""
        percentage = cls._clamp_percentage(percentage)
        if percentage == 0 or image.ndim == 2 or image.shape[2] < 3:
            return image.copy()

        factor = 1.0 + percentage / 100.0
        hls = cv2.cvtColor(np.ascontiguousarray(image[..., :3]), cv2.COLOR_BGR2HLS).astype(np.float64)
        hls[..., 2] = np.clip(hls[..., 2] * factor, 0, 255)
        colour = cv2.cvtColor(np.round(hls).astype(np.uint8), cv2.COLOR_HLS2BGR)

        result = image.copy()
        result[..., :3] = colour
        return result

    @staticmethod
    def _clamp_percentage(percentage: float) -> float:
        return min(max(percentage, -100.0), 100.0)
