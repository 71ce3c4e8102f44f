"""Unit tests for operation argument schemas."""

import math

import pytest
from pydantic import ValidationError

from models.arguments import (
    DEFAULT_TIMEZONE,
    CalculatorArguments,
    DateTimeArguments,
    GreetingArguments,
    coerce_lenient_bool,
)


class TestGreetingArguments:
    """Tests for GreetingArguments model."""

    def test_formal_defaults_to_false(self):
        """Omitted formal flag gets its default."""
        args = GreetingArguments.model_validate({"name": "Ana"})

        assert args.name == "Ana"
        assert args.formal is False

    @pytest.mark.parametrize("raw, expected", [
        ("TRUE", True),
        ("true", True),
        ("True", True),
        ("false", False),
        ("FALSE", False),
        ("yes", False),
        (True, True),
        (False, False),
    ])
    def test_formal_lenient_boolean(self, raw, expected):
        """String booleans are coerced case-insensitively."""
        args = GreetingArguments.model_validate({"name": "Ana", "formal": raw})

        assert args.formal is expected

    def test_formal_rejects_numbers(self):
        """Only booleans and strings are accepted for formal."""
        with pytest.raises(ValidationError) as exc_info:
            GreetingArguments.model_validate({"name": "Ana", "formal": 1})

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("formal",)

    def test_missing_name(self):
        """Name is required."""
        with pytest.raises(ValidationError) as exc_info:
            GreetingArguments.model_validate({})

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == ("name",)
        assert errors[0]["msg"] == "Field required"

    def test_empty_name(self):
        """Empty name is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            GreetingArguments.model_validate({"name": ""})

        assert "at least 1 character" in str(exc_info.value)

    def test_name_too_long(self):
        """Names over 100 characters are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            GreetingArguments.model_validate({"name": "x" * 101})

        assert "at most 100 characters" in str(exc_info.value)

    def test_name_at_max_length(self):
        args = GreetingArguments.model_validate({"name": "x" * 100})
        assert len(args.name) == 100

    def test_name_must_be_string(self):
        with pytest.raises(ValidationError):
            GreetingArguments.model_validate({"name": 42})

    def test_unknown_keys_ignored(self):
        """Extra keys are dropped rather than rejected."""
        args = GreetingArguments.model_validate({"name": "Ana", "mood": "happy"})

        assert not hasattr(args, "mood")

    def test_collects_all_violations(self):
        """Every failing field is reported, not just the first."""
        with pytest.raises(ValidationError) as exc_info:
            GreetingArguments.model_validate({"name": "", "formal": 3})

        locs = {err["loc"] for err in exc_info.value.errors()}
        assert locs == {("name",), ("formal",)}


class TestCoerceLenientBool:
    """Tests for the lenient boolean coercion."""

    def test_strings(self):
        assert coerce_lenient_bool("TrUe") is True
        assert coerce_lenient_bool("false") is False
        assert coerce_lenient_bool("") is False

    def test_non_strings_untouched(self):
        assert coerce_lenient_bool(1) == 1
        assert coerce_lenient_bool(None) is None


class TestCalculatorArguments:
    """Tests for CalculatorArguments model."""

    def test_valid_arguments(self):
        args = CalculatorArguments.model_validate({"operation": "add", "a": 15, "b": 25})

        assert args.operation == "add"
        assert args.a == 15
        assert args.b == 25

    def test_invalid_operation(self):
        """Operation must be one of the four supported names."""
        with pytest.raises(ValidationError) as exc_info:
            CalculatorArguments.model_validate({"operation": "power", "a": 2, "b": 3})

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("operation",)
        assert "'divide'" in errors[0]["msg"]

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_operands_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            CalculatorArguments.model_validate({"operation": "add", "a": value, "b": 1})

        assert exc_info.value.errors()[0]["loc"] == ("a",)

    @pytest.mark.parametrize("value", ["5", True, None])
    def test_non_numeric_operands_rejected(self, value):
        with pytest.raises(ValidationError):
            CalculatorArguments.model_validate({"operation": "add", "a": 1, "b": value})

    def test_divide_by_zero(self):
        """Division by zero is rejected at field b."""
        with pytest.raises(ValidationError) as exc_info:
            CalculatorArguments.model_validate({"operation": "divide", "a": 5, "b": 0})

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == ("b",)
        assert errors[0]["msg"] == "Cannot divide by zero"

    @pytest.mark.parametrize("operation", ["add", "subtract", "multiply"])
    def test_zero_allowed_for_other_operations(self, operation):
        args = CalculatorArguments.model_validate({"operation": operation, "a": 5, "b": 0})
        assert args.b == 0

    def test_divide_rule_skipped_when_operation_invalid(self):
        """The divisor rule never runs against an invalid operation."""
        with pytest.raises(ValidationError) as exc_info:
            CalculatorArguments.model_validate({"operation": "modulo", "a": 5, "b": 0})

        errors = exc_info.value.errors()
        assert [err["loc"] for err in errors] == [("operation",)]

    def test_missing_everything(self):
        with pytest.raises(ValidationError) as exc_info:
            CalculatorArguments.model_validate({})

        locs = [err["loc"] for err in exc_info.value.errors()]
        assert locs == [("operation",), ("a",), ("b",)]


class TestDateTimeArguments:
    """Tests for DateTimeArguments model."""

    def test_defaults(self):
        args = DateTimeArguments.model_validate({})

        assert args.format == "long"
        assert args.timezone == DEFAULT_TIMEZONE == "Europe/Madrid"

    @pytest.mark.parametrize("fmt", ["short", "long", "time", "full", "iso"])
    def test_all_formats_accepted(self, fmt):
        assert DateTimeArguments.model_validate({"format": fmt}).format == fmt

    def test_invalid_format(self):
        with pytest.raises(ValidationError) as exc_info:
            DateTimeArguments.model_validate({"format": "medium"})

        assert exc_info.value.errors()[0]["loc"] == ("format",)

    def test_timezone_is_not_checked_by_schema(self):
        """Timezone lookup happens at execution time."""
        args = DateTimeArguments.model_validate({"timezone": "Not/AZone"})
        assert args.timezone == "Not/AZone"


class TestJsonSchema:
    """The models double as the advertised input schemas."""

    def test_greeting_schema(self):
        schema = GreetingArguments.model_json_schema()

        assert schema["required"] == ["name"]
        assert schema["properties"]["name"]["maxLength"] == 100
        assert schema["properties"]["formal"]["type"] == "boolean"
        assert schema["properties"]["formal"]["default"] is False
        assert schema["additionalProperties"] is False

    def test_calculator_schema(self):
        schema = CalculatorArguments.model_json_schema()

        assert schema["required"] == ["operation", "a", "b"]
        assert schema["properties"]["operation"]["enum"] == ["add", "subtract", "multiply", "divide"]
        assert schema["properties"]["a"]["type"] == "number"
