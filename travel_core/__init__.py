# =============================================================================
# travel_core/__init__.py
# =============================================================================
# Business logic for the weather and accommodation tool servers.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  Tool contracts, validation,
#   dispatch, upstream HTTP calls, data synthesis and formatting all live
#   here and can be exercised directly from tests.  travel_tools/ only wires
#   these pieces to the MCP protocol.
# =============================================================================
