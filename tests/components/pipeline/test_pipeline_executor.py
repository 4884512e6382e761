"""Tests for PipelineExecutor"""
from unittest.mock import patch

import numpy as np
import pytest

from src.components.imaging import ColorOps, FilterOps, GeometryOps
from src.components.pipeline import PipelineExecutor
from src.core import (
    ActionFailedError,
    ActionValidationError,
    ActionDecodeError,
    UnknownActionError,
    CropBoundsError,
    TransformError,
    ErrorCategory,
)
from src.models import ImageAction, PipelineState
from src.validation import ValidationType


def resize(width, height):
    return ImageAction("resize", {"width": width, "height": height})


def crop(x, y, width, height):
    return ImageAction("crop", {"x": x, "y": y, "width": width, "height": height})


@pytest.fixture
def executor():
    return PipelineExecutor()


@pytest.fixture
def state(gradient_image):
    return PipelineState(gradient_image, ".jpg")


class TestPipelineExecutorSuccess:
    """Successful runs"""

    def test_resize(self, executor, state):
        result = executor.run([resize(50, 50)], state)

        assert (result.width, result.height) == (50, 50)
        assert result.target_extension == ".jpg"

    def test_empty_action_list_returns_state(self, executor, state):
        assert executor.run([], state) is state

    def test_resize_is_idempotent(self, executor, state):
        once = executor.run([resize(50, 50)], state)
        twice = executor.run([resize(50, 50)], once)

        np.testing.assert_array_equal(once.image, twice.image)

    def test_actions_apply_in_order(self, executor, state):
        """Crop bounds depend on what earlier actions did"""
        result = executor.run([resize(200, 200), crop(90, 90, 50, 50)], state)
        assert (result.width, result.height) == (50, 50)

        with pytest.raises(ActionFailedError) as exc_info:
            executor.run([crop(90, 90, 50, 50), resize(200, 200)], state)
        assert exc_info.value.index == 0

    def test_crop_then_resize(self, executor, state):
        result = executor.run([crop(10, 10, 20, 40), resize(60, 30)], state)
        assert (result.width, result.height) == (60, 30)

    def test_last_convert_wins(self, executor, state):
        result = executor.run([
            ImageAction("convert", {"format": "png"}),
            ImageAction("blur", {"sigma": 1}),
            ImageAction("convert", {"format": "jpeg"}),
        ], state)

        assert result.target_extension == "jpeg"

    def test_input_state_not_mutated(self, executor, state, gradient_image):
        original = gradient_image.copy()
        executor.run([
            ImageAction("brightness", {"percentage": 40}),
            ImageAction("blur", {"sigma": 3}),
            ImageAction("convert", {"format": "png"}),
        ], state)

        np.testing.assert_array_equal(state.image, original)
        assert state.target_extension == ".jpg"

    def test_every_kind_runs(self, executor, state):
        result = executor.run([
            crop(0, 0, 80, 80),
            resize(40, 40),
            ImageAction("blur", {"sigma": 0.5}),
            ImageAction("gamma", {"sigma": 1.2}),
            ImageAction("contrast", {"percentage": 10}),
            ImageAction("sharpen", {"sigma": 1}),
            ImageAction("brightness", {"percentage": -10}),
            ImageAction("saturation", {"percentage": 25}),
            ImageAction("convert", {"format": "png"}),
        ], state)

        assert (result.width, result.height) == (40, 40)
        assert result.target_extension == "png"


class TestPipelineExecutorFailures:
    """The first failure stops the run and identifies the action"""

    def test_out_of_bounds_crop(self, executor, state):
        with pytest.raises(ActionFailedError) as exc_info:
            executor.run([crop(90, 90, 50, 50)], state)

        error = exc_info.value
        assert error.category == ErrorCategory.BOUNDS
        assert isinstance(error.cause, CropBoundsError)
        assert error.action == "crop"

    def test_unknown_action(self, executor, state):
        with pytest.raises(ActionFailedError) as exc_info:
            executor.run([ImageAction("rotate", {"angle": 90})], state)

        assert isinstance(exc_info.value.cause, UnknownActionError)
        assert exc_info.value.category == ErrorCategory.UNKNOWN_ACTION

    def test_validation_happens_before_transform(self, executor, state):
        with patch.object(ColorOps, "brightness") as brightness:
            with pytest.raises(ActionFailedError) as exc_info:
                executor.run([ImageAction("brightness", {"percentage": 150})], state)

        brightness.assert_not_called()
        assert isinstance(exc_info.value.cause, ActionValidationError)
        assert exc_info.value.category == ErrorCategory.VALIDATION

    def test_decode_error(self, executor, state):
        with pytest.raises(ActionFailedError) as exc_info:
            executor.run([ImageAction("blur", {"sigma": "abc"})], state)

        assert isinstance(exc_info.value.cause, ActionDecodeError)
        assert exc_info.value.category == ErrorCategory.DECODE

    def test_missing_params(self, executor, state):
        with pytest.raises(ActionFailedError) as exc_info:
            executor.run([ImageAction("blur")], state)

        assert exc_info.value.category == ErrorCategory.VALIDATION
        assert exc_info.value.cause.fields == ["params"]

    def test_short_circuits_at_failing_index(self, executor, state):
        actions = [
            ImageAction("blur", {"sigma": 1}),
            ImageAction("brightness", {"percentage": 150}),
            resize(10, 10),
        ]

        with patch.object(GeometryOps, "resize") as resize_op:
            with pytest.raises(ActionFailedError) as exc_info:
                executor.run(actions, state)

        resize_op.assert_not_called()
        assert exc_info.value.index == 1
        assert exc_info.value.action == "brightness"

    def test_unexpected_library_error_becomes_transform_error(self, executor, state):
        with patch.object(FilterOps, "blur", side_effect=RuntimeError("boom")):
            with pytest.raises(ActionFailedError) as exc_info:
                executor.run([ImageAction("blur", {"sigma": 1})], state)

        assert isinstance(exc_info.value.cause, TransformError)
        assert exc_info.value.category == ErrorCategory.TRANSFORM
        assert "boom" in str(exc_info.value)

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_unknown_action_at_any_position(self, executor, state, position):
        actions = [resize(50, 50), ImageAction("blur", {"sigma": 1})]
        actions.insert(position, ImageAction("rotate", {"angle": 90}))

        with pytest.raises(ActionFailedError) as exc_info:
            executor.run(actions, state)

        assert exc_info.value.index == position
        assert exc_info.value.action == "rotate"
        assert exc_info.value.category == ErrorCategory.UNKNOWN_ACTION

    def test_out_of_bounds_crop_stops_chain(self, executor, state):
        actions = [
            resize(50, 50),
            crop(40, 40, 20, 20),
            ImageAction("sharpen", {"sigma": 1}),
        ]

        with patch.object(FilterOps, "sharpen") as sharpen:
            with pytest.raises(ActionFailedError) as exc_info:
                executor.run(actions, state)

        sharpen.assert_not_called()
        assert exc_info.value.index == 1
        assert exc_info.value.category == ErrorCategory.BOUNDS
        assert isinstance(exc_info.value.cause, CropBoundsError)

    def test_null_parameter_is_required_error(self, executor, state):
        with pytest.raises(ActionFailedError) as exc_info:
            executor.run([ImageAction("blur", {"sigma": None})], state)

        cause = exc_info.value.cause
        assert exc_info.value.category == ErrorCategory.VALIDATION
        assert cause.fields == ["sigma"]
        assert cause.errors[0].rule == ValidationType.REQUIRED
