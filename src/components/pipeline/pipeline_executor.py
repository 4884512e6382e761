from typing import Sequence
import logging

from src.components.actions import ActionRegistry, BaseImageAction
from src.components.pipeline.parameter_codec import ParameterCodec
from src.core import (
    ImageEditorException,
    ActionValidationError,
    ActionFailedError,
    TransformError,
)
from src.models import ImageAction, PipelineState
from src.validation import ValidatorManager, RequestType

logger = logging.getLogger(__name__)


class PipelineExecutor:
    """
    Applies an ordered list of actions to an in-memory image.

    Each step validates the descriptor, resolves the action in the registry,
    decodes and validates its parameters, then applies it to the state
    produced by the previous step. The first failure stops the run; nothing
    is persisted by the executor, so a failed run leaves no trace.
    """

    def __init__(self, registry: type = ActionRegistry, codec: type = ParameterCodec):
        """
        Args:
            registry: Action lookup (class exposing get(action) -> BaseImageAction)
            codec: Payload decoder (class exposing decode(payload, type, action))
        """
        self._registry = registry
        self._codec = codec

    def run(self, actions: Sequence[ImageAction], state: PipelineState) -> PipelineState:
        """
        Fold the actions over the initial state

        Args:
            actions: Actions in application order
            state: Loaded image and its original extension

        Returns:
            Final pipeline state

        Raises:
            ActionFailedError: On the first failing action, with its index and kind
        """
        for index, action in enumerate(actions):
            state = self._apply(index, action, state)
        return state

    def _apply(self, index: int, action: ImageAction, state: PipelineState) -> PipelineState:
        try:
            new_state = self._step(action, state)
        except ImageEditorException as e:
            logger.error(
                f"Action #{index} '{action.action}' failed - "
                f"category: {e.category.value}, error: {str(e)}"
            )
            raise ActionFailedError(index, action.action, e) from e

        logger.debug(
            f"Action #{index} '{action.action}' applied - "
            f"size: {new_state.width}x{new_state.height}, extension: {new_state.target_extension}"
        )
        return new_state

    def _step(self, action: ImageAction, state: PipelineState) -> PipelineState:
        ValidatorManager.ensure_valid(RequestType.IMAGE_ACTION, action)

        registered: BaseImageAction = self._registry.get(action.action)
        params = self._codec.decode(action.params, registered.parameters_type, action.action)

        result = registered.validator.validate(params)
        if not result.is_valid:
            raise ActionValidationError(result.errors)

        try:
            return registered.apply(params, state)
        except TransformError:
            raise
        except Exception as e:
            raise TransformError(f"{registered.name} failed: {type(e).__name__}: {str(e)}") from e
