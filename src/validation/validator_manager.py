"""Validator manager to orchestrate validation based on request type (Strategy Pattern)"""
from typing import Any, Dict, Type
from src.core.exceptions import ActionValidationError
from src.validation.base import BaseValidator, ValidationResult
from src.validation.enums import RequestType
from src.validation.request_validators import (
    ProcessRequestValidator,
    ImageActionValidator,
    SingleActionRequestValidator,
)


class ValidatorManager:
    """
    Manages validation for different request types using Strategy Pattern.

    Single Responsibility: Route validation requests to appropriate validators.
    Validators are stateless, so one instance per request type is shared.
    """

    # Strategy Pattern: Map request types to validator classes
    _VALIDATORS: Dict[RequestType, Type[BaseValidator]] = {
        RequestType.PROCESS: ProcessRequestValidator,
        RequestType.IMAGE_ACTION: ImageActionValidator,
        RequestType.SINGLE_ACTION: SingleActionRequestValidator,
    }

    _instances: Dict[RequestType, BaseValidator] = {}

    @classmethod
    def validate(cls, request_type: RequestType, data: Any) -> ValidationResult:
        """
        Validate request data based on request type.

        Args:
            request_type: Type of request (enum)
            data: Request data to validate

        Returns:
            ValidationResult with validation status and errors

        Raises:
            ValueError: If request_type is not supported
        """
        return cls.get_validator(request_type).validate(data)

    @classmethod
    def ensure_valid(cls, request_type: RequestType, data: Any) -> None:
        """
        Validate and raise on failure.

        Raises:
            ActionValidationError: If any rule fails
        """
        result = cls.validate(request_type, data)
        if not result.is_valid:
            raise ActionValidationError(result.errors)

    @classmethod
    def get_validator(cls, request_type: RequestType) -> BaseValidator:
        """
        Get validator instance for a specific request type.

        Args:
            request_type: Type of request (enum)

        Returns:
            Validator instance for the request type

        Raises:
            ValueError: If request_type is not supported
        """
        if request_type not in cls._instances:
            validator_class = cls._VALIDATORS.get(request_type)

            if validator_class is None:
                raise ValueError(
                    f"No validator found for request type: {request_type.value}. "
                    f"Supported types: {', '.join(rt.value for rt in RequestType)}"
                )

            cls._instances[request_type] = validator_class()

        return cls._instances[request_type]
