"""Core data models for operation discovery and results."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

# Marker for a field with no declared default
NO_DEFAULT = object()

# JSON-schema keywords reported as field constraints
_CONSTRAINT_KEYS = ("minLength", "maxLength", "minimum", "maximum", "enum")


@dataclass(frozen=True)
class TextContent:
    """One text item of an operation result."""

    text: str
    type: str = "text"

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolResult:
    """Successful operation output: one or more content items."""

    content: List[TextContent]

    def __post_init__(self):
        """Validate the result is non-empty."""
        if not self.content:
            raise ValueError("ToolResult requires at least one content item")

    @classmethod
    def text(cls, text: str) -> "ToolResult":
        """Build a single-item text result."""
        return cls(content=[TextContent(text=text)])

    def to_dict(self) -> Dict[str, Any]:
        return {"content": [item.to_dict() for item in self.content]}

    def __str__(self) -> str:
        return "\n".join(item.text for item in self.content)


@dataclass(frozen=True)
class FieldSpec:
    """Declared shape of one operation argument."""

    name: str
    type: str  # "string", "number", "boolean", "enum"
    required: bool
    default: Any = NO_DEFAULT
    constraints: Mapping[str, Any] = field(default_factory=dict)
    description: Optional[str] = None
    examples: Optional[List[Any]] = None

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    @classmethod
    def from_json_schema(cls, name: str, prop: Mapping[str, Any], required: bool) -> "FieldSpec":
        """Build a field spec from a JSON-schema property definition.

        Args:
            name: Field name
            prop: JSON-schema property (``type``, ``enum``, ``default``, ...)
            required: Whether the field must be supplied

        Returns:
            FieldSpec describing the property
        """
        constraints = {key: prop[key] for key in _CONSTRAINT_KEYS if key in prop}
        if "enum" in prop:
            type_tag = "enum"
        else:
            type_tag = prop.get("type", "string")
        if type_tag == "number":
            constraints["finite"] = True

        return cls(
            name=name,
            type=type_tag,
            required=required,
            default=prop.get("default", NO_DEFAULT),
            constraints=MappingProxyType(constraints),
            description=prop.get("description"),
            examples=prop.get("examples"),
        )


@dataclass(frozen=True)
class OperationDescriptor:
    """Static, discoverable metadata for one operation."""

    name: str
    description: str
    input_schema: Mapping[str, Any]
    field_specs: Mapping[str, FieldSpec]

    @classmethod
    def from_input_schema(cls, name: str, description: str, input_schema: Dict[str, Any]) -> "OperationDescriptor":
        """Build a descriptor, deriving field specs from the input schema."""
        required = set(input_schema.get("required", []))
        specs = {
            field_name: FieldSpec.from_json_schema(field_name, prop, field_name in required)
            for field_name, prop in input_schema.get("properties", {}).items()
        }
        return cls(
            name=name,
            description=description,
            input_schema=MappingProxyType(input_schema),
            field_specs=MappingProxyType(specs),
        )

    @property
    def required_fields(self) -> List[str]:
        return [spec.name for spec in self.field_specs.values() if spec.required]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for discovery (``{name, description, inputSchema}``)."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": dict(self.input_schema),
        }

    def __str__(self) -> str:
        return f"{self.name} ({', '.join(self.field_specs)})"
