"""Tests for ActionRegistry"""
import pytest

from src.components.actions import ActionRegistry, BaseImageAction, CropAction, SaturationAction
from src.core import ActionKind, UnknownActionError, ErrorCategory
from src.models import ActionParameters


class TestActionRegistry:
    """Test suite for ActionRegistry"""

    def test_every_kind_is_registered(self):
        assert ActionRegistry.kinds() == ActionKind.values()

    @pytest.mark.parametrize("kind", ActionKind.values())
    def test_get_returns_matching_action(self, kind):
        action = ActionRegistry.get(kind)

        assert isinstance(action, BaseImageAction)
        assert action.name == kind
        assert issubclass(action.parameters_type, ActionParameters)

    def test_get_returns_shared_instances(self):
        assert isinstance(ActionRegistry.get("crop"), CropAction)
        assert ActionRegistry.get("saturation") is ActionRegistry.get("saturation")
        assert isinstance(ActionRegistry.get("saturation"), SaturationAction)

    @pytest.mark.parametrize("action", ["rotate", "Blur", "CROP", " crop", ""])
    def test_unknown_action(self, action):
        with pytest.raises(UnknownActionError) as exc_info:
            ActionRegistry.get(action)

        assert exc_info.value.category == ErrorCategory.UNKNOWN_ACTION
        assert exc_info.value.allowed == ActionKind.values()
