"""Server-side decorators for endpoint handlers"""
from functools import wraps
from typing import Callable, Any, Dict, Optional, Tuple
from flask import request, jsonify
from werkzeug.exceptions import BadRequest, RequestEntityTooLarge
import traceback
import logging

from src.core import (
    ResponseKey,
    ResponseStatus,
    ErrorCategory,
    ImageEditorException,
    RequestDecodeError,
    ActionFailedError,
)
from src.server.enums import Endpoint, HTTPStatus

logger = logging.getLogger(__name__)


# Status per error category for failures outside the action pipeline.
# Pipeline failures (ActionFailedError) are always reported as 400.
_CATEGORY_STATUS: Dict[ErrorCategory, HTTPStatus] = {
    ErrorCategory.DECODE: HTTPStatus.BAD_REQUEST,
    ErrorCategory.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorCategory.UNKNOWN_ACTION: HTTPStatus.BAD_REQUEST,
    ErrorCategory.BOUNDS: HTTPStatus.BAD_REQUEST,
    ErrorCategory.TRANSFORM: HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
    ErrorCategory.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorCategory.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def status_for(error: ImageEditorException) -> HTTPStatus:
    """HTTP status of a categorized error"""
    if isinstance(error, ActionFailedError):
        return HTTPStatus.BAD_REQUEST
    return _CATEGORY_STATUS.get(error.category, HTTPStatus.INTERNAL_SERVER_ERROR)


def error_response(message: str, status: HTTPStatus, error_type: Optional[str] = None) -> Tuple[Any, int]:
    """Build the JSON error envelope"""
    body = {
        ResponseKey.STATUS.value: ResponseStatus.ERROR.value,
        ResponseKey.ERROR.value: message,
    }
    if error_type:
        body[ResponseKey.ERROR_TYPE.value] = error_type
    return jsonify(body), status.value


def extract_json() -> Any:
    """
    Read the request body as JSON regardless of Content-Type.

    Raises:
        RequestDecodeError: If the body is empty or is not valid JSON
    """
    if not request.get_data(cache=True).strip():
        raise RequestDecodeError("empty request")

    data = request.get_json(force=True, silent=True)
    if data is None:
        raise RequestDecodeError("failed to decode request")
    return data


def endpoint_error_handler(endpoint: Endpoint, parse_json: bool = True) -> Callable:
    """
    Decorator for endpoint handlers to provide unified error handling and JSON extraction.

    Handles:
    - JSON body extraction (empty or malformed bodies are decode errors)
    - ImageEditorException (status picked from its category)
    - BadRequest / RequestEntityTooLarge (logged and returned as 400)
    - Generic exceptions (logged and returned as 500)

    The decorated function receives the decoded body as first parameter after self:
        @endpoint_error_handler(Endpoint.PROCESS)
        def _process_image(self, data: Dict[str, Any]):
            # endpoint logic here

    Handlers that read the request themselves (e.g. multipart uploads) pass
    parse_json=False and receive no data argument.

    Args:
        endpoint: The Endpoint enum member for this handler
        parse_json: Whether to decode the body and pass it to the handler

    Returns:
        Decorated function with JSON extraction and error handling
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                if parse_json:
                    return func(*args, extract_json(), **kwargs)
                return func(*args, **kwargs)
            except ImageEditorException as e:
                status = status_for(e)
                logger.error(
                    f"{endpoint.value} error: {str(e)} "
                    f"(category: {e.category.value}, status: {status.value})"
                )
                return error_response(str(e), status, e.category.value)
            except RequestEntityTooLarge as e:
                logger.error(f"{endpoint.value} request too large: {str(e)}")
                return error_response(
                    "failed to parse multipart/form-data: request body too large",
                    HTTPStatus.BAD_REQUEST
                )
            except BadRequest as e:
                logger.error(f"{endpoint.value} bad request: {e.description}")
                return error_response(e.description, HTTPStatus.BAD_REQUEST)
            except Exception as e:
                # Log unexpected error with traceback
                error_trace = traceback.format_exc()
                logger.error(
                    f"{endpoint.value} failed: {str(e)}\n"
                    f"Error type: {type(e).__name__}\n"
                    f"Traceback:\n{error_trace}"
                )
                return error_response(
                    f"{endpoint.value} failed: {str(e)}",
                    HTTPStatus.INTERNAL_SERVER_ERROR,
                    ErrorCategory.INTERNAL.value
                )

        return wrapper

    return decorator
