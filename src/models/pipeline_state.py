from dataclasses import dataclass, replace

import numpy as np


@dataclass(frozen=True, eq=False)
class PipelineState:
    """
    Accumulator threaded through a pipeline run.

    Each action returns a new state instead of mutating the previous one:
    the image reference is replaced by the action's output and, for format
    conversion, only the target extension changes.
    """
    image: np.ndarray
    target_extension: str = ""

    def with_image(self, image: np.ndarray) -> "PipelineState":
        """Return a copy of the state holding a new image"""
        return replace(self, image=image)

    def with_extension(self, extension: str) -> "PipelineState":
        """Return a copy of the state with a new target extension"""
        return replace(self, target_extension=extension)

    @property
    def width(self) -> int:
        return int(self.image.shape[1])

    @property
    def height(self) -> int:
        return int(self.image.shape[0])
