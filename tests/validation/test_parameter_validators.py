"""Tests for field-level validators"""
import pytest

from src.validation import ValidationErrorType, ValidationType
from src.validation.parameter_validators import (
    RequiredValidator,
    RangeValidator,
    LengthValidator,
    LowercaseValidator,
    OneOfValidator,
    FieldRulesValidator,
)


class TestRequiredValidator:
    """'required' means a non-zero value"""

    @pytest.mark.parametrize("value", [None, 0, 0.0, "", False])
    def test_zero_values_rejected(self, value):
        result = RequiredValidator("width").validate(value)

        assert not result.is_valid
        error = result.errors[0]
        assert error.error_type == ValidationErrorType.MISSING_PARAMETER
        assert error.rule == ValidationType.REQUIRED
        assert error.parameter_name == "width"
        assert str(error).startswith("field width is not valid")

    @pytest.mark.parametrize("value", [1, -5, 0.1, "png", {}, [], {"sigma": 1}])
    def test_present_values_accepted(self, value):
        assert RequiredValidator("field").validate(value).is_valid


class TestRangeValidator:
    """Tests for inclusive numeric bounds"""

    def test_within_bounds(self):
        validator = RangeValidator("sigma", min_value=0.1, max_value=100)
        assert validator.validate(0.1).is_valid
        assert validator.validate(100).is_valid
        assert validator.validate(42.5).is_valid

    def test_below_minimum(self):
        result = RangeValidator("sigma", min_value=0.1, max_value=100).validate(0.05)

        assert not result.is_valid
        assert result.errors[0].rule == ValidationType.MIN
        assert result.errors[0].error_type == ValidationErrorType.INVALID_RANGE

    def test_above_maximum(self):
        result = RangeValidator("percentage", min_value=-100, max_value=100).validate(150)

        assert not result.is_valid
        assert result.errors[0].rule == ValidationType.MAX
        assert "field percentage is not valid: max" in str(result.errors[0])

    def test_open_upper_bound(self):
        assert RangeValidator("x", min_value=0).validate(10 ** 9).is_valid

    def test_none_is_skipped(self):
        assert RangeValidator("x", min_value=0).validate(None).is_valid

    @pytest.mark.parametrize("value", ["10", True, [1]])
    def test_non_numbers_rejected(self, value):
        result = RangeValidator("x", min_value=0).validate(value)

        assert not result.is_valid
        assert result.errors[0].error_type == ValidationErrorType.INVALID_TYPE
        assert result.errors[0].rule == ValidationType.TYPE
        assert "field x is not valid: type" in str(result.errors[0])

    def test_shared_instance_reports_rule_per_call(self):
        """One instance reports MIN and MAX independently"""
        validator = RangeValidator("v", min_value=0, max_value=10)

        assert validator.validate(-1).errors[0].rule == ValidationType.MIN
        assert validator.validate(11).errors[0].rule == ValidationType.MAX
        assert validator.validate(-1).errors[0].rule == ValidationType.MIN


class TestLengthValidator:

    def test_max_length(self):
        validator = LengthValidator("format", max_length=10)

        assert validator.validate("png").is_valid
        result = validator.validate("a" * 11)
        assert not result.is_valid
        assert result.errors[0].rule == ValidationType.MAX

    def test_min_length_on_lists(self):
        validator = LengthValidator("actions", min_length=1)

        assert validator.validate([{"action": "blur"}]).is_valid
        result = validator.validate([])
        assert not result.is_valid
        assert result.errors[0].rule == ValidationType.MIN

    def test_wrong_type(self):
        result = LengthValidator("format", max_length=10).validate(12)
        assert result.errors[0].error_type == ValidationErrorType.INVALID_TYPE
        assert result.errors[0].rule == ValidationType.TYPE


class TestLowercaseValidator:

    def test_lowercase_accepted(self):
        assert LowercaseValidator("format").validate("jpeg").is_valid

    def test_uppercase_rejected(self):
        result = LowercaseValidator("format").validate("PNG")

        assert not result.is_valid
        assert result.errors[0].rule == ValidationType.LOWERCASE

    def test_wrong_type(self):
        result = LowercaseValidator("format").validate(5)

        assert result.errors[0].error_type == ValidationErrorType.INVALID_TYPE
        assert result.errors[0].rule == ValidationType.TYPE


class TestOneOfValidator:

    def test_membership(self):
        validator = OneOfValidator("action", ["crop", "resize"])

        assert validator.validate("crop").is_valid
        result = validator.validate("rotate")
        assert not result.is_valid
        assert result.errors[0].rule == ValidationType.ONE_OF
        assert "rotate" in str(result.errors[0])


class TestFieldRulesValidator:
    """Tests for per-field rule lists"""

    @pytest.fixture
    def validator(self):
        return FieldRulesValidator({
            "width": [RequiredValidator("width"), RangeValidator("width", min_value=1)],
            "height": [RequiredValidator("height"), RangeValidator("height", min_value=1)],
        })

    def test_valid_dict(self, validator):
        assert validator.validate({"width": 10, "height": 20}).is_valid

    def test_stops_at_first_failing_rule_of_a_field(self, validator):
        result = validator.validate({"width": 0, "height": 20})

        assert len(result.errors) == 1
        assert result.errors[0].rule == ValidationType.REQUIRED

    def test_reports_every_failing_field(self, validator):
        result = validator.validate({"width": -1})

        assert [e.parameter_name for e in result.errors] == ["width", "height"]
        assert [e.rule for e in result.errors] == [ValidationType.MIN, ValidationType.REQUIRED]

    def test_reads_attributes(self, validator):
        class Record:
            width = 5
            height = 0

        result = validator.validate(Record())
        assert [e.parameter_name for e in result.errors] == ["height"]
