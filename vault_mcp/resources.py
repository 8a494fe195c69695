"""
Vault Resource Catalog

Read-only views exposed as MCP resources:
- vault://secrets: top-level KV secret paths (from secret/metadata)
- vault://policies: policy names

The two views deliberately differ on errors. Secret listing degrades to an
empty list, because Vault reports an empty mount as a 404. Policy listing
lets every error through.
"""

import json
import logging

from fastmcp import FastMCP

from .core.secrets import BackendError, VaultBackend

logger = logging.getLogger(__name__)

SECRETS_URI = "vault://secrets"
POLICIES_URI = "vault://policies"
SECRETS_METADATA_ROOT = "secret/metadata"


class ResourceCatalog:
    """Read-only queries against the backend."""

    def __init__(self, backend: VaultBackend):
        self.backend = backend

    async def list_secrets(self) -> str:
        """Lists top-level KV secret paths from Vault metadata."""
        try:
            result = await self.backend.list(SECRETS_METADATA_ROOT)
        except BackendError as e:
            logger.info(f"Secret listing unavailable ({e.kind}), returning empty list")
            return "[]"

        data = result.get("data") or {}
        return json.dumps(data.get("keys") or [])

    async def list_policies(self) -> str:
        """Lists current policy names from Vault."""
        result = await self.backend.list_policies()
        return json.dumps(result)

    def register(self, mcp: FastMCP) -> None:
        """Expose both views on the server."""
        mcp.resource(
            SECRETS_URI, name="vault-secrets", mime_type="application/json",
        )(self.list_secrets)
        mcp.resource(
            POLICIES_URI, name="vault-policies", mime_type="application/json",
        )(self.list_policies)
        logger.info(f"✅ Registered resources: {SECRETS_URI}, {POLICIES_URI}")
