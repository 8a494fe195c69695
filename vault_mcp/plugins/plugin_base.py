"""
Command Plugin Base Class

A plugin groups related commands (e.g. everything under "secret/") and
declares them with their input schemas. Plugins are instantiated once with
the backend handle and never change afterwards.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Type

from pydantic import BaseModel

from ..core.secrets import VaultBackend


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a successful handler: a headline plus the raw backend result."""
    summary: str
    result: Any = None


Handler = Callable[[Any], Awaitable[CommandResult]]


@dataclass(frozen=True)
class Command:
    """A named, schema-validated operation."""
    name: str
    schema: Type[BaseModel]
    handler: Handler
    description: str = ""


class CommandPlugin(ABC):
    """Base class for command plugins."""

    def __init__(self, backend: VaultBackend):
        self.backend = backend
        self.commands: Dict[str, Command] = {}
        self.metadata: Dict[str, Any] = {}

    @abstractmethod
    def initialize(self) -> None:
        """
        Populate self.commands and self.metadata.

        Required metadata fields:
            - name: Plugin identifier
            - version: Semantic version
            - description: What this plugin does

        Example:
            self.metadata = {
                "name": "secrets",
                "version": "1.0.0",
                "description": "KV v2 secret management",
            }
            self.add_command("secret/read", SecretPathInput, self.secret_read)
        """
        pass

    def add_command(self, name: str, schema: Type[BaseModel], handler: Handler) -> None:
        """Declare a command. Description comes from the handler's docstring."""
        doc = (handler.__doc__ or f"{name} from {self.metadata.get('name', 'plugin')}").strip()
        self.commands[name] = Command(
            name=name,
            schema=schema,
            handler=handler,
            description=doc.split("\n")[0],
        )

    def get_commands(self) -> Dict[str, Command]:
        """Return all commands provided by this plugin."""
        return self.commands

    def get_metadata(self) -> Dict[str, Any]:
        """Return plugin metadata."""
        return self.metadata
