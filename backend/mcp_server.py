"""Expose the weather tool to MCP hosts over stdio."""
from __future__ import annotations

import json
import os
from typing import Annotated, Optional

import anyio
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from clima.errors import WeatherError
from clima.tool import CITY_FIELD_DESCRIPTION, TOOL_DESCRIPTION, TOOL_NAME, WeatherTool


def register_weather_tools(mcp: FastMCP, tool: WeatherTool) -> None:
    @mcp.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    async def clima_api(city: Annotated[str, Field(description=CITY_FIELD_DESCRIPTION)]) -> CallToolResult:
        # Both HTTP calls block, so they run in a worker thread.
        try:
            payload = await anyio.to_thread.run_sync(tool.execute, city)
        except WeatherError as exc:
            return CallToolResult(isError=True, content=[TextContent(type="text", text=exc.user_message)])
        return CallToolResult(
            content=[TextContent(type="text", text=json.dumps(payload, ensure_ascii=False))],
            structuredContent=payload,
        )


def build_server(tool: Optional[WeatherTool] = None) -> FastMCP:
    mcp = FastMCP("clima-api")
    if tool is None:
        timeout = os.environ.get("WEATHER_HTTP_TIMEOUT")
        tool = WeatherTool.from_urls(
            geocoding_url=os.environ.get("OPEN_METEO_GEOCODING_URL"),
            forecast_url=os.environ.get("OPEN_METEO_FORECAST_URL"),
            timeout=float(timeout) if timeout else None,
        )
    register_weather_tools(mcp=mcp, tool=tool)
    return mcp


def main() -> None:
    mcp = build_server()
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
