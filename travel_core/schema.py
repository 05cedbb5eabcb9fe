# =============================================================================
# travel_core/schema.py  —  Declarative Tool Contracts & Validation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Every tool declares its parameters as a pydantic model (a ToolArguments
#   subclass): types, bounds, enums, patterns and defaults all live on the
#   model's fields.  From that one declaration we get:
#
#     ToolDescriptor.input_schema() → the JSON schema clients see in
#                                     tools/list
#     validate_arguments()          → a validated model instance, or an
#                                     InvalidArgumentsError listing EVERY
#                                     bad field
#
# STRICT MODE:
#   Arguments arrive as decoded JSON, so nothing is coerced: a boolean is
#   never a number, a number is never a string.  Integers are accepted
#   where a number is expected.  Keys a tool does not declare are ignored.
# =============================================================================

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from travel_core.errors import InvalidArgumentsError


class ToolArguments(BaseModel):
    """Base class for every tool's argument model."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)


@dataclass(frozen=True)
class ToolDescriptor:
    """A named operation and its parameter contract."""

    name: str
    description: str
    arguments: type[ToolArguments] = ToolArguments

    def input_schema(self) -> dict:
        schema = _without_titles(self.arguments.model_json_schema(by_alias=True))
        schema.setdefault("properties", {})
        schema.setdefault("required", [])
        return schema

    def describe(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


def validate_arguments(descriptor: ToolDescriptor, arguments: Optional[dict]) -> ToolArguments:
    """Validate ``arguments`` against ``descriptor``.

    An explicit null is treated exactly like an omitted key, so optional
    parameters fall back to their declared default.

    Raises:
        InvalidArgumentsError: with one entry per violated field.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise InvalidArgumentsError(descriptor.name, ["arguments must be an object"])

    present = {key: value for key, value in arguments.items() if value is not None}
    try:
        return descriptor.arguments.model_validate(present)
    except ValidationError as exc:
        violations = [_describe_error(error) for error in exc.errors()]
        raise InvalidArgumentsError(descriptor.name, violations) from exc


def _describe_error(error: dict[str, Any]) -> str:
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {error['msg']}" if field else error["msg"]


def _without_titles(node: Any) -> Any:
    # pydantic adds a "title" to the model and every field; clients never use them.
    if isinstance(node, dict):
        return {key: _without_titles(value) for key, value in node.items() if key != "title"}
    if isinstance(node, list):
        return [_without_titles(value) for value in node]
    return node
