import os

from src.models import PipelineState


class OutputNaming:
    """Derives the extension of a pipeline result"""

    @staticmethod
    def source_extension(image_name: str) -> str:
        """Lower-cased extension of a stored image name, including the dot"""
        return os.path.splitext(image_name)[1].lower()

    @classmethod
    def final_extension(cls, state: PipelineState, image_name: str) -> str:
        """
        Extension for the saved result

        The target extension left by the last convert action wins; without
        one, the extension of the source image is kept.
        """
        if state.target_extension:
            return state.target_extension
        return cls.source_extension(image_name)
