"""Argument schemas for the exposed operations.

Each operation declares its accepted arguments as a pydantic model. A model
instance is the only thing a handler ever receives: raw caller input has to go
through ``model_validate`` first.
"""

from typing import Annotated, Any, Literal

from pydantic import (
    AllowInfNan,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    Strict,
    StrictBool,
    ValidationInfo,
    field_validator,
)
from pydantic_core import PydanticCustomError

DEFAULT_TIMEZONE = "Europe/Madrid"


def coerce_lenient_bool(value: Any) -> Any:
    """Map the strings "true"/"false" (any case) onto booleans.

    Some MCP clients send every argument as a string. Any string other than
    "true" becomes False; non-string values are left for strict validation.
    """
    if isinstance(value, str):
        return value.lower() == "true"
    return value


# Boolean that also accepts "true"/"false" strings
LenientBool = Annotated[StrictBool, BeforeValidator(coerce_lenient_bool)]

# Real number (ints accepted); rejects bools, numeric strings, NaN and infinities
FiniteNumber = Annotated[float, Strict(), AllowInfNan(False)]

CalculatorOperation = Literal["add", "subtract", "multiply", "divide"]
DateFormat = Literal["short", "long", "time", "full", "iso"]


class GreetingArguments(BaseModel):
    """Arguments for the ``greeting`` operation."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        strict=True,
        description="Name of the person to greet. May include surnames or titles.",
        examples=["Ana", "Mr. Garcia", "Dr. Martinez"],
    )
    formal: LenientBool = Field(
        False,
        description=(
            "Formality of the greeting. True for professional or formal contexts, "
            "false for casual ones."
        ),
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"additionalProperties": False},
    )


class CalculatorArguments(BaseModel):
    """Arguments for the ``calculate`` operation."""

    operation: CalculatorOperation = Field(
        ...,
        description="Arithmetic operation to perform.",
        examples=["add", "subtract", "multiply", "divide"],
    )
    a: FiniteNumber = Field(
        ...,
        description="First operand. Integers, decimals and scientific notation are accepted.",
        examples=[10, 3.14, -5, 150.0],
    )
    b: FiniteNumber = Field(
        ...,
        description="Second operand. Must not be zero for division.",
        examples=[5, 2.5, -3, 0.1],
    )

    @field_validator("b")
    @classmethod
    def validate_divisor(cls, v: float, info: ValidationInfo) -> float:
        """Reject a zero divisor when the operation is a division.

        ``info.data`` only holds fields that already validated, so an invalid
        ``operation`` never triggers this rule.
        """
        if info.data.get("operation") == "divide" and v == 0:
            raise PydanticCustomError("divide_by_zero", "Cannot divide by zero")
        return v

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"additionalProperties": False},
    )


class DateTimeArguments(BaseModel):
    """Arguments for the ``datetime`` operation."""

    format: DateFormat = Field(
        "long",
        description=(
            "Output shape. 'short' for a plain date, 'long' for the date with weekday, "
            "'time' for the time only, 'full' for date and time, 'iso' for an ISO-8601 timestamp."
        ),
        examples=["long", "short", "time", "full", "iso"],
    )
    timezone: str = Field(
        DEFAULT_TIMEZONE,
        strict=True,
        description="IANA timezone identifier. Defaults to Spain's timezone.",
        examples=["Europe/Madrid", "America/New_York", "Asia/Tokyo", "UTC"],
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"additionalProperties": False},
    )
