"""
Command Registry

Collects commands from plugins at construction. The set of commands is
fixed afterwards; lookups are by exact name.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Type

from ..core.secrets import VaultBackend
from .plugin_base import Command, CommandPlugin
from .policies import PolicyPlugin
from .secrets import SecretsPlugin

logger = logging.getLogger(__name__)

DEFAULT_PLUGINS: List[Type[CommandPlugin]] = [SecretsPlugin, PolicyPlugin]


class CommandRegistry:
    """Immutable name -> Command mapping."""

    def __init__(self, plugins: Iterable[CommandPlugin]):
        commands: Dict[str, Command] = {}
        metadata = {}

        for plugin in plugins:
            plugin.initialize()
            name = plugin.get_metadata().get("name", type(plugin).__name__)
            for command_name, command in plugin.get_commands().items():
                if command_name in commands:
                    raise ValueError(f"Duplicate command name: {command_name}")
                commands[command_name] = command
                logger.debug(f"  Registered command: {command_name}")
            metadata[name] = plugin.get_metadata()
            logger.info(f"✅ Loaded plugin: {name} ({len(plugin.get_commands())} commands)")

        self._commands = MappingProxyType(commands)
        self._metadata = MappingProxyType(metadata)

    @classmethod
    def default(cls, backend: VaultBackend) -> "CommandRegistry":
        """Registry with the stock secret and policy commands."""
        return cls(plugin_class(backend) for plugin_class in DEFAULT_PLUGINS)

    def get(self, name: str) -> Optional[Command]:
        return self._commands.get(name)

    def names(self) -> List[str]:
        return list(self._commands)

    @property
    def plugins(self):
        """Metadata of every loaded plugin, keyed by plugin name."""
        return self._metadata

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
