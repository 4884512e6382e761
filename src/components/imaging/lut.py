import numpy as np


class LookupTable:
    """Per-intensity lookup tables applied to the colour channels of uint8 images"""

    SIZE = 256

    @classmethod
    def intensities(cls) -> np.ndarray:
        return np.arange(cls.SIZE, dtype=np.float64)

    @classmethod
    def from_values(cls, values: np.ndarray) -> np.ndarray:
        """Round and clamp float values into a uint8 table"""
        return np.clip(np.round(values), 0, 255).astype(np.uint8)

    @classmethod
    def apply(cls, image: np.ndarray, table: np.ndarray) -> np.ndarray:
        """
        Map every colour sample through the table.

        Alpha (4th channel) is carried over unchanged. Returns a new array.
        """
        if image.ndim == 2:
            return table[image]
        result = image.copy()
        colour = min(image.shape[2], 3)
        result[..., :colour] = table[image[..., :colour]]
        return result
