"""Operation registry and single entry point for discovery and invocation."""

import logging
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel

from dispatch.operation import Operation, RawArguments
from handlers.calculator import handle_calculate
from handlers.datetime_now import handle_datetime
from handlers.greeting import handle_greeting
from models.arguments import CalculatorArguments, DateTimeArguments, GreetingArguments
from models.data_models import OperationDescriptor, ToolResult
from models.errors import ExecutionError, OperationFailure, UnknownOperationError

logger = logging.getLogger(__name__)


class Dispatcher:
    """Maps operation names to operations.

    Built once at startup and treated as read-only afterwards. Holds no
    per-call state, so invocations are independent of each other.
    """

    def __init__(self, operations: Iterable[Operation] = ()):
        self._operations: Dict[str, Operation] = {}
        for operation in operations:
            self.register(operation)

    def register(self, operation: Operation) -> None:
        """Add an operation.

        Raises:
            ValueError: If an operation with the same name is already registered
        """
        if operation.name in self._operations:
            raise ValueError(f"Operation '{operation.name}' is already registered")
        self._operations[operation.name] = operation
        logger.debug(f"Registered operation '{operation.name}'")

    @property
    def operation_names(self) -> List[str]:
        return list(self._operations)

    def list_operations(self) -> List[OperationDescriptor]:
        """Get descriptors for every operation, in registration order."""
        return [operation.describe() for operation in self._operations.values()]

    def get_operation_info(self, name: str) -> Optional[OperationDescriptor]:
        """Look up a descriptor; ``None`` if no such operation exists."""
        operation = self._operations.get(name)
        return operation.describe() if operation is not None else None

    def _lookup(self, name: str) -> Operation:
        try:
            return self._operations[name]
        except KeyError:
            logger.warning(f"Unknown operation requested: {name}")
            raise UnknownOperationError(name, self.operation_names) from None

    def validate(self, name: str, raw: RawArguments) -> BaseModel:
        """Validate arguments for ``name`` without executing it.

        Raises:
            UnknownOperationError: If ``name`` is not registered
            InvalidArgumentsError: If the arguments are invalid
        """
        return self._lookup(name).validate(raw)

    def invoke(self, name: str, raw: RawArguments) -> ToolResult:
        """Invoke an operation by name.

        Args:
            name: Registered operation name
            raw: Caller-supplied arguments

        Returns:
            The operation's result

        Raises:
            OperationFailure: UnknownOperationError, InvalidArgumentsError or ExecutionError
        """
        operation = self._lookup(name)
        logger.info(f"Invoking operation '{name}'")
        try:
            return operation.invoke(raw)
        except OperationFailure:
            raise
        except Exception as e:
            logger.error(f"Unexpected error in operation '{name}': {e}", exc_info=True)
            raise ExecutionError(name, e) from e

    def __contains__(self, name: str) -> bool:
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)


# name, description, arguments model, handler
DEFAULT_OPERATIONS = (
    (
        "greeting",
        "Generates a personalised greeting that adapts to the time of day. "
        "Useful for opening a conversation in a friendly or formal tone.",
        GreetingArguments,
        handle_greeting,
    ),
    (
        "calculate",
        "Performs basic arithmetic (add, subtract, multiply, divide) "
        "with safe handling of invalid input such as division by zero.",
        CalculatorArguments,
        handle_calculate,
    ),
    (
        "datetime",
        "Returns the current date and time in several formats and timezones.",
        DateTimeArguments,
        handle_datetime,
    ),
)


def build_default_dispatcher() -> Dispatcher:
    """Create a dispatcher with the greeting, calculate and datetime operations."""
    return Dispatcher(
        Operation(name, description, model, handler)
        for name, description, model, handler in DEFAULT_OPERATIONS
    )
