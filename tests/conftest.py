"""Pytest configuration and shared fixtures for vault_mcp tests."""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

import pytest

from vault_mcp.config import VaultConfig, validate_config
from vault_mcp.core.secrets import BackendError, VaultBackend

TEST_ADDR = "http://127.0.0.1:8200"
TEST_TOKEN = "hvs.test-token-123"


class FakeVaultBackend(VaultBackend):
    """
    In-memory stand-in for Vault.

    Mimics KV v2 response shapes for secret/data paths and records every
    call. Set fail[method] to a BackendError to make that method raise, or
    delay to make every call sleep first.
    """

    backend_type = "fake"

    def __init__(self):
        self.secrets: Dict[str, Dict[str, Any]] = {}
        self.versions: Dict[str, int] = {}
        self.policies: Dict[str, str] = {"default": "", "root": ""}
        self.calls: List[Tuple[str, tuple]] = []
        self.fail: Dict[str, Exception] = {}
        self.delay: float = 0.0

    async def _enter(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))
        if self.delay:
            await asyncio.sleep(self.delay)
        if method in self.fail:
            raise self.fail[method]

    async def write(self, path: str, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        await self._enter("write", path, payload)
        self.secrets[path] = payload.get("data", payload)
        self.versions[path] = self.versions.get(path, 0) + 1
        return {"data": {"version": self.versions[path], "destroyed": False}}

    async def read(self, path: str) -> Dict[str, Any]:
        await self._enter("read", path)
        if path not in self.secrets:
            raise BackendError(f"Path not found: {path}", kind="not_found")
        return {
            "data": {
                "data": dict(self.secrets[path]),
                "metadata": {"version": self.versions[path]},
            }
        }

    async def delete(self, path: str) -> Optional[Dict[str, Any]]:
        await self._enter("delete", path)
        self.secrets.pop(path, None)
        return None

    async def list(self, path: str) -> Dict[str, Any]:
        await self._enter("list", path)
        prefix = path.replace("secret/metadata", "secret/data").rstrip("/") + "/"
        keys = []
        for stored in self.secrets:
            if not stored.startswith(prefix):
                continue
            head, sep, _ = stored[len(prefix):].partition("/")
            key = head + sep
            if key not in keys:
                keys.append(key)
        if not keys:
            raise BackendError(f"Path not found: {path}", kind="not_found")
        return {"data": {"keys": keys}}

    async def add_policy(self, name: str, rules: str) -> Optional[Dict[str, Any]]:
        await self._enter("add_policy", name, rules)
        self.policies[name] = rules
        return None

    async def list_policies(self) -> Dict[str, Any]:
        await self._enter("list_policies")
        names = list(self.policies)
        return {"policies": names, "keys": names, "data": {"policies": names, "keys": names}}


@pytest.fixture
def config() -> VaultConfig:
    """Provide a valid test configuration."""
    return validate_config(TEST_ADDR, TEST_TOKEN)


@pytest.fixture
def backend() -> FakeVaultBackend:
    """Provide an empty in-memory backend."""
    return FakeVaultBackend()
