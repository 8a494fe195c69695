"""
Vault MCP Errors

Startup errors are fatal. Everything raised while handling a single
invocation is caught at the dispatcher and reported back to the caller.
"""

from typing import List, Optional, Tuple

# (field, message) pairs
Issue = Tuple[str, str]


class VaultMcpError(Exception):
    """Base class for all adapter errors."""

    code: str = "VaultMcpError"

    def __init__(self, message: str, issues: Optional[List[Issue]] = None):
        super().__init__(message)
        self.message = message
        self.issues: List[Issue] = list(issues or [])

    def render(self) -> str:
        """Render as caller-facing text, one line per issue."""
        lines = [f"❌ {self.code}: {self.message}"]
        for field, msg in self.issues:
            lines.append(f"- {field}: {msg}")
        return "\n".join(lines)


class ConfigurationError(VaultMcpError):
    """Connection parameters failed validation at startup."""

    code = "ConfigurationError"

    def __init__(self, issues: List[Issue]):
        super().__init__("Invalid Vault configuration", issues)

    def __str__(self) -> str:
        body = "\n".join(f"- {field}: {msg}" for field, msg in self.issues)
        return f"{self.message}:\n{body}"


class UnknownCommand(VaultMcpError):
    """No command is registered under the requested name."""

    code = "UnknownCommand"

    def __init__(self, name: str):
        super().__init__(f"Unknown command '{name}'")
        self.name = name


class InvalidPayload(VaultMcpError):
    """Payload does not conform to the command's input schema."""

    code = "InvalidPayload"

    def __init__(self, command: str, issues: List[Issue]):
        super().__init__(f"Invalid payload for '{command}'", issues)
        self.command = command


class CommandFailure(VaultMcpError):
    """A handler failed while talking to the backend."""

    code = "CommandFailure"

    def __init__(self, command: str, message: str, kind: str = "backend"):
        super().__init__(f"'{command}' failed: {message}")
        self.command = command
        self.kind = kind
        self.diagnostic = message
