# =============================================================================
# travel_tools/__init__.py
# =============================================================================
# FastMCP servers: weather_server.py and airbnb_server.py.
#
# Each tool function here is a thin wrapper that forwards its arguments to
# a travel_core ToolRegistry.  Tools do not contain business logic and never
# raise; every outcome comes back as text.
# =============================================================================
