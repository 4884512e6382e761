from typing import Any, BinaryIO, Optional
import logging

from src.components.pipeline import PipelineExecutor, OutputNaming
from src.components.storage import IImageStore
from src.core import ResponseKey, NameGenerationError, TransformError
from src.models import ProcessRequest, PipelineState
from src.server.enums import ServiceStatus
from src.validation import ValidatorManager, RequestType

logger = logging.getLogger(__name__)


class ImageProcessingService:
    """
    Service running action pipelines against stored images

    Follows Dependency Injection and Single Responsibility principles: the
    store handles persistence, the executor handles transformations.
    """

    NAME_GENERATION_FAILED = "failed to generate name"
    SAVE_FAILED = "failed to save image"

    def __init__(
        self,
        store: IImageStore,
        executor: Optional[PipelineExecutor] = None,
        output_prefix: str = "proc"
    ):
        """
        Initialize image processing service

        Args:
            store: Image store holding sources and results
            executor: Pipeline executor (default: registry-backed executor)
            output_prefix: Name prefix of processed images
        """
        self._store = store
        self._executor = executor or PipelineExecutor()
        self._output_prefix = output_prefix
        self._status = ServiceStatus.LOADING

    def initialize(self) -> None:
        logger.info(f"Image processing service ready - output prefix: {self._output_prefix}")
        self._status = ServiceStatus.READY

    def get_status(self) -> str:
        return self._status.value

    def parse_request(self, data: Any) -> ProcessRequest:
        """
        Parse and validate a pipeline request body

        Raises:
            RequestDecodeError: If the body does not have the expected shape
            ActionValidationError: If the actions list or image name is invalid
        """
        request = ProcessRequest.from_dict(data)
        ValidatorManager.ensure_valid(RequestType.PROCESS, request)
        return request

    def parse_single_action(self, action: str, data: Any) -> ProcessRequest:
        """
        Parse and validate a single-action request body

        Raises:
            RequestDecodeError: If the body is not a JSON object
            ActionValidationError: If the action kind or image name is invalid
        """
        request = ProcessRequest.for_single_action(action, data)
        ValidatorManager.ensure_valid(RequestType.SINGLE_ACTION, {
            ResponseKey.ACTION.value: action,
            ResponseKey.IMAGE_NAME.value: request.image_name,
        })
        return request

    def process(self, request: ProcessRequest) -> str:
        """
        Apply the request's actions to its image and store the result

        The result is saved only when every action succeeds.

        Args:
            request: Validated pipeline request

        Returns:
            URL of the processed image

        Raises:
            ImageNotFoundError: If the source image is missing or unreadable
            ActionFailedError: On the first failing action
            NameGenerationError: If no output name can be derived
            TransformError: If the result cannot be encoded or written
        """
        self._store.find_image(request.image_name)
        image = self._store.load_image(request.image_name)

        logger.info(
            f"Processing request - image: {request.image_name}, "
            f"actions: {[action.action for action in request.actions]}"
        )

        initial = PipelineState(image, OutputNaming.source_extension(request.image_name))
        final = self._executor.run(request.actions, initial)

        extension = OutputNaming.final_extension(final, request.image_name)
        try:
            output_name = self._store.generate_name(self._output_prefix, extension)
        except NameGenerationError as e:
            logger.error(f"Name generation failed - source: {request.image_name}, reason: {str(e)}")
            raise NameGenerationError(self.NAME_GENERATION_FAILED) from e

        try:
            url = self._store.save_image(final.image, output_name)
        except TransformError as e:
            logger.error(f"Save failed - result: {output_name}, reason: {str(e)}")
            raise TransformError(self.SAVE_FAILED) from e

        logger.info(f"Processing complete - source: {request.image_name}, result: {output_name}")
        return url

    def upload(self, stream: BinaryIO, filename: str) -> str:
        """
        Store an uploaded image

        Returns:
            URL of the stored image
        """
        return self._store.upload_image(stream, filename)
