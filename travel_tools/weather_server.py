# =============================================================================
# travel_tools/weather_server.py  —  Weather FastMCP Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the three weather tools over MCP:
#     - get_current_weather
#     - get_weather_forecast
#     - search_locations
#
#   The tools, their input schemas and their handlers are all declared in
#   travel_core.weather; this module only wires them onto a FastMCP server.
#   Every call goes through the weather ToolRegistry, which validates the
#   arguments and always answers with text.
#
# CONFIGURATION:
#   OPENWEATHER_API_KEY must be set (environment or .env).  Without it the
#   server still starts, and every tool answers with an error message.
#
# RUNNING THIS SERVER:
#   weather-mcp-server                 (console script, stdio)
#   python -m travel_tools.weather_server --list-tools
# =============================================================================

from dotenv import load_dotenv
from fastmcp import FastMCP

from travel_core.config import Settings
from travel_core.weather import WeatherService, build_registry
from travel_tools.common import configure_logging, main as run_main, register_tools

load_dotenv()

settings = Settings.from_env()
configure_logging(settings, "weather")

registry = build_registry(WeatherService(settings))

mcp = FastMCP("weather-mcp-server")
register_tools(mcp, registry)


def main() -> None:
    run_main(mcp, registry)


if __name__ == "__main__":
    main()
