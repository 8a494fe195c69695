"""
Secrets Plugin

KV v2 secret management: create, read and soft-delete secrets under the
"secret/" mount.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .plugin_base import CommandPlugin, CommandResult

KV_DATA_PREFIX = "secret/data"


def data_path(path: str) -> str:
    """Map a caller-facing secret path onto the KV v2 data endpoint."""
    return f"{KV_DATA_PREFIX}/{path}"


class SecretPathInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    path: StrictStr = Field(min_length=1, description="Secret path, e.g. apps/demo")


class SecretCreateInput(SecretPathInput):
    data: Dict[str, Any] = Field(strict=True, description="Key/value pairs to store")


class SecretsPlugin(CommandPlugin):
    """Secret create/read/delete against the KV v2 engine."""

    def initialize(self) -> None:
        self.metadata = {
            "name": "secrets",
            "version": "1.0.0",
            "description": "Create, read and soft-delete KV v2 secrets",
        }

        self.add_command("secret/create", SecretCreateInput, self.secret_create)
        self.add_command("secret/read", SecretPathInput, self.secret_read)
        self.add_command("secret/delete", SecretPathInput, self.secret_delete)

    async def secret_create(self, payload: SecretCreateInput) -> CommandResult:
        """
        Create or update a secret at the given path.

        Args:
            path: Secret path (e.g., "apps/demo")
            data: Key/value pairs to store
        """
        result = await self.backend.write(data_path(payload.path), {"data": payload.data})
        return CommandResult(f"✅ Secret written at: {payload.path}", result)

    async def secret_read(self, payload: SecretPathInput) -> CommandResult:
        """Read a secret from the given path (raw Vault response)."""
        result = await self.backend.read(data_path(payload.path))
        return CommandResult(f"🔐 Secret read at: {payload.path}", result)

    async def secret_delete(self, payload: SecretPathInput) -> CommandResult:
        """
        Soft-delete the latest version of a secret.

        Prior versions stay recoverable. Deleting a path that was never
        written is not an error.
        """
        result = await self.backend.delete(data_path(payload.path))
        return CommandResult(f"🗑️ Secret deleted at: {payload.path}", result)
