"""
MCP Command Loader

Registers every command in a CommandRegistry as a FastMCP tool. The tool
advertises the command's JSON schema but forwards the raw arguments to the
Dispatcher, which owns validation and error reporting.

Usage:
    from vault_mcp.plugins.loader import register_commands

    register_commands(mcp, dispatcher)
"""

import logging
from typing import Any, Dict, List

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from .dispatcher import Dispatcher
from .plugin_base import Command

logger = logging.getLogger(__name__)


class DispatchedTool(Tool):
    """A FastMCP tool backed by a Dispatcher command."""

    dispatcher: Any = Field(exclude=True)

    @classmethod
    def from_command(cls, command: Command, dispatcher: Dispatcher) -> "DispatchedTool":
        return cls(
            name=command.name,
            description=command.description,
            parameters=command.schema.model_json_schema(),
            dispatcher=dispatcher,
        )

    async def run(self, arguments: Dict[str, Any]) -> ToolResult:
        response = await self.dispatcher.dispatch(self.name, arguments)
        if response.is_error:
            raise ToolError(response.text)
        return ToolResult(content=[TextContent(type="text", text=response.text)])


def register_commands(mcp: FastMCP, dispatcher: Dispatcher) -> List[str]:
    """
    Add one tool per registered command.

    Returns:
        Names of the registered tools
    """
    registered = []
    for command in dispatcher.registry:
        mcp.add_tool(DispatchedTool.from_command(command, dispatcher))
        registered.append(command.name)
        logger.debug(f"  Registered tool: {command.name}")

    logger.info(f"✅ Registered {len(registered)} commands")
    return registered
