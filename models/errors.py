"""Failure taxonomy shared by the dispatcher, the operations and the MCP server.

Every failure that crosses the dispatcher boundary is an ``OperationFailure``
carrying a machine-checkable ``kind`` and a human-readable message.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional


class FailureKind(str, Enum):
    """The complete set of failure kinds an invocation can produce."""

    UNKNOWN_OPERATION = "unknown_operation"
    INVALID_ARGUMENTS = "invalid_arguments"
    EXECUTION_ERROR = "execution_error"


@dataclass(frozen=True)
class Violation:
    """A single field-level validation failure."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


class OperationFailure(Exception):
    """Base class for typed invocation failures."""

    kind: FailureKind

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "operation": self.operation, "message": self.message}


class UnknownOperationError(OperationFailure):
    """Requested operation is not registered."""

    kind = FailureKind.UNKNOWN_OPERATION

    def __init__(self, operation: str, available: Iterable[str]):
        self.available = list(available)
        super().__init__(
            operation,
            f"Unknown operation: {operation}. "
            f"Available operations: {', '.join(self.available)}",
        )


class InvalidArgumentsError(OperationFailure):
    """One or more arguments failed schema or cross-field validation."""

    kind = FailureKind.INVALID_ARGUMENTS

    def __init__(self, operation: str, violations: List[Violation]):
        self.violations = list(violations)
        details = "; ".join(str(v) for v in self.violations)
        super().__init__(operation, f"Invalid arguments for operation '{operation}': {details}")


class ExecutionError(OperationFailure):
    """A handler could not complete, or failed unexpectedly."""

    kind = FailureKind.EXECUTION_ERROR

    def __init__(self, operation: str, cause: Optional[BaseException] = None, detail: Optional[str] = None):
        self.cause = cause
        text = detail if detail is not None else str(cause)
        super().__init__(operation, f"Execution error in operation '{operation}': {text}")
