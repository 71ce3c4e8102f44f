"""Generic operation adapter: one argument schema bound to one handler."""

import logging
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from models.data_models import OperationDescriptor, ToolResult
from models.errors import ExecutionError, InvalidArgumentsError, OperationFailure, Violation

logger = logging.getLogger(__name__)

# Untrusted caller input; only ``Operation.validate`` turns it into a model instance
RawArguments = Optional[Mapping[str, Any]]

ArgsT = TypeVar("ArgsT", bound=BaseModel)


def _strip_titles(node: Any) -> Any:
    """Drop pydantic's auto-generated ``title`` keys from a JSON schema."""
    if isinstance(node, dict):
        return {
            key: _strip_titles(value)
            for key, value in node.items()
            if not (key == "title" and isinstance(value, str))
        }
    if isinstance(node, list):
        return [_strip_titles(item) for item in node]
    return node


def build_input_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    """Render a model as a discovery ``inputSchema`` object."""
    schema = _strip_titles(model.model_json_schema())
    return {
        "type": "object",
        "properties": schema.get("properties", {}),
        "required": schema.get("required", []),
        "additionalProperties": False,
    }


def violations_from(error: ValidationError) -> List[Violation]:
    """Flatten a pydantic ValidationError into ordered (path, message) pairs."""
    return [
        Violation(path=".".join(str(part) for part in err["loc"]), message=err["msg"])
        for err in error.errors()
    ]


class Operation(Generic[ArgsT]):
    """Binds an argument model and a handler behind validate/invoke.

    Handlers only ever see validated model instances. Failures leave this
    class as ``OperationFailure`` subclasses.
    """

    def __init__(
        self,
        name: str,
        description: str,
        arguments_model: Type[ArgsT],
        handler: Callable[[ArgsT], ToolResult],
    ):
        self.name = name
        self.description = description
        self.arguments_model = arguments_model
        self.handler = handler
        self._descriptor: Optional[OperationDescriptor] = None

    def describe(self) -> OperationDescriptor:
        """Get the discovery descriptor (built once)."""
        if self._descriptor is None:
            self._descriptor = OperationDescriptor.from_input_schema(
                self.name, self.description, build_input_schema(self.arguments_model)
            )
        return self._descriptor

    def validate(self, raw: RawArguments) -> ArgsT:
        """Validate raw arguments without running the handler.

        Args:
            raw: Caller-supplied arguments (``None`` is treated as empty)

        Returns:
            Model instance with defaults applied

        Raises:
            InvalidArgumentsError: Listing every violated constraint
        """
        try:
            return self.arguments_model.model_validate({} if raw is None else raw)
        except ValidationError as e:
            raise InvalidArgumentsError(self.name, violations_from(e)) from e

    def invoke(self, raw: RawArguments) -> ToolResult:
        """Validate, then run the handler.

        Raises:
            InvalidArgumentsError: If validation fails (handler is not called)
            ExecutionError: If the handler fails
        """
        try:
            arguments = self.validate(raw)
        except InvalidArgumentsError as e:
            logger.warning(e.message)
            raise

        try:
            result = self.handler(arguments)
        except OperationFailure:
            raise
        except Exception as e:
            logger.error(f"Operation '{self.name}' failed: {e}", exc_info=True)
            raise ExecutionError(self.name, e) from e

        logger.debug(f"Operation '{self.name}' completed")
        return result

    def __repr__(self) -> str:
        return f"Operation(name={self.name!r}, arguments_model={self.arguments_model.__name__})"
