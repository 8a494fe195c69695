"""
Vault Secrets Backend Layer

Internal plumbing behind the MCP commands and resources.

Usage:
    from vault_mcp.core.secrets import create_backend

    backend = create_backend(config)
    await backend.write("secret/data/apps/demo", {"data": {"k": "v"}})
    result = await backend.read("secret/data/apps/demo")
"""

from .interface import BackendError, VaultBackend
from .backends import BACKENDS, create_backend

__all__ = [
    "BACKENDS",
    "BackendError",
    "VaultBackend",
    "create_backend",
]
