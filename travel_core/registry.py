# =============================================================================
# travel_core/registry.py  —  Tool Registry & Request Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the static table  name → ToolDescriptor → async handler  for one
#   server, and dispatches calls against it.
#
# THE DISPATCH CONTRACT:
#   dispatch() NEVER raises.  Every outcome is a ToolResponse carrying text
#   content blocks:
#     - success                → the handler's formatted text
#     - unknown tool           → "Error: Unknown tool: <name>"
#     - bad arguments          → "Error: Invalid arguments for <tool>: ..."
#     - anything the handler raises → "Error: <message>"
#   Callers tell success from failure by reading the text; the envelope
#   shape is identical either way.
# =============================================================================

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional

from travel_core.errors import ToolError, UnknownToolError
from travel_core.schema import ToolArguments, ToolDescriptor, validate_arguments


logger = logging.getLogger(__name__)

Handler = Callable[[ToolArguments], Awaitable[str]]


@dataclass(frozen=True)
class TextContent:
    text: str
    type: str = "text"


@dataclass
class ToolResponse:
    """A protocol response: an ordered list of text content blocks."""

    content: list[TextContent] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> "ToolResponse":
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    @property
    def is_error(self) -> bool:
        return self.text.startswith("Error: ")


class ToolRegistry:
    """Static operation table for one server."""

    def __init__(self, name: str):
        self.name = name
        self._tools: dict[str, tuple[ToolDescriptor, Handler]] = {}

    def register(self, descriptor: ToolDescriptor, handler: Handler) -> None:
        if descriptor.name in self._tools:
            raise ValueError(f"tool already registered: {descriptor.name}")
        self._tools[descriptor.name] = (descriptor, handler)

    def names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> Optional[ToolDescriptor]:
        entry = self._tools.get(name)
        return entry[0] if entry else None

    def describe(self) -> list[dict]:
        """List every operation with its input contract."""
        return [descriptor.describe() for descriptor, _ in self._tools.values()]

    async def dispatch(self, name: str, arguments: Optional[dict] = None) -> ToolResponse:
        try:
            entry = self._tools.get(name)
            if entry is None:
                raise UnknownToolError(name)
            descriptor, handler = entry
            clean = validate_arguments(descriptor, arguments)
            return ToolResponse.from_text(await handler(clean))
        except ToolError as exc:
            logger.info("%s failed: %s", name, exc)
            return ToolResponse.from_text(f"Error: {exc}")
        except Exception as exc:
            logger.exception("Unexpected failure in %s", name)
            message = str(exc) or "Unknown error occurred"
            return ToolResponse.from_text(f"Error: {message}")
