from abc import ABC, abstractmethod
from typing import Dict, List, Type

from src.core import ActionKind
from src.models import ActionParameters, PipelineState
from src.validation import BaseValidator
from src.validation.parameter_validators import FieldRulesValidator


class BaseImageAction(ABC):
    """
    Abstract base class for pipeline actions (Strategy Pattern)

    Binds an action kind to its parameter record type, the validation rules
    for that record and the transformation applied to the pipeline state.
    """

    kind: ActionKind
    parameters_type: Type[ActionParameters]

    def __init__(self) -> None:
        self._validator = FieldRulesValidator(self.rules())

    @abstractmethod
    def rules(self) -> Dict[str, List[BaseValidator]]:
        """
        Declare validation rules of the parameter record

        Returns:
            Mapping of field name -> ordered validators
        """
        pass

    @abstractmethod
    def apply(self, params: ActionParameters, state: PipelineState) -> PipelineState:
        """
        Apply the action to the current pipeline state

        Args:
            params: Decoded and validated parameter record
            state: State produced by the previous action

        Returns:
            New pipeline state

        Raises:
            TransformError: If the transformation cannot be performed
        """
        pass

    @property
    def validator(self) -> FieldRulesValidator:
        return self._validator

    @property
    def name(self) -> str:
        return self.kind.value
