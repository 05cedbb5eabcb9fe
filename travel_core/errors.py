# =============================================================================
# travel_core/errors.py  —  Domain Errors
# =============================================================================
#
# Every failure a tool call can hit is one of these.  The dispatcher in
# travel_core/registry.py catches them and turns them into a normal text
# response of the form "Error: <message>", so the MCP caller never sees a
# protocol-level failure.
#
# Zero results (no listings, no matching places) are NOT errors and have no
# class here; handlers report them as ordinary responses.
# =============================================================================

from typing import Optional


class ToolError(Exception):
    """Base class for failures that are reported back to the caller."""


class UnknownToolError(ToolError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArgumentsError(ToolError):
    """The argument bag did not satisfy the operation's schema.

    ``violations`` holds one human-readable entry per offending field, so a
    caller can fix every problem in one round-trip.
    """

    def __init__(self, tool_name: str, violations: list[str]):
        self.tool_name = tool_name
        self.violations = list(violations)
        super().__init__(
            f"Invalid arguments for {tool_name}: " + "; ".join(self.violations)
        )


class MissingCredentialError(ToolError):
    """A required API key is not configured."""


class LocationNotFoundError(ToolError):
    def __init__(self, location: str):
        super().__init__(
            f'Location "{location}" not found. '
            "Please check the spelling and try again."
        )
        self.location = location


class ProviderError(ToolError):
    """The upstream provider failed or answered with a non-2xx status."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
