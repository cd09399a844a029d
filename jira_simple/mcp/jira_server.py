import asyncio
from typing import Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from jira_simple.mcp.dispatcher import JiraToolDispatcher, list_operations
from jira_simple.mcp.jira_api import JiraGateway
from jira_simple.utils.config import Config
from jira_simple.utils.logger import get_logger

logger = get_logger("jira-mcp", "jira_mcp.log")

SERVER_NAME = "jira-simple-mcp"


def create_server(config: Config, gateway: Optional[JiraGateway] = None) -> Server:
    """
    Build the MCP server. Listing and invocation both go through the
    dispatcher, so argument checks and error text are the same for every tool.
    """
    dispatcher = JiraToolDispatcher(gateway or JiraGateway(config))
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [types.Tool(**op) for op in list_operations()]

    # arguments are checked by the dispatcher, not against the advertised schema
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Optional[dict]) -> list[types.TextContent]:
        result = dispatcher.invoke(name, arguments)
        return [types.TextContent(type="text", text=result.text)]

    logger.info(f"Jira tools ready for {config.base_url}")
    return server


async def serve_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def run_stdio(server: Server) -> None:
    asyncio.run(serve_stdio(server))
