"""
Vault MCP Commands

Each plugin declares a group of commands:
- secrets: secret/create, secret/read, secret/delete
- policies: policy/create

The registry collects them, the dispatcher runs them, and the loader
exposes them as MCP tools.
"""

from .dispatcher import Dispatcher, Response
from .plugin_base import Command, CommandPlugin, CommandResult
from .registry import CommandRegistry

__all__ = [
    "Command",
    "CommandPlugin",
    "CommandRegistry",
    "CommandResult",
    "Dispatcher",
    "Response",
]
