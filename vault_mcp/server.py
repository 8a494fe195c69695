"""
Vault MCP Server

MCP interface to HashiCorp Vault:
- Tools: secret/create, secret/read, secret/delete, policy/create
- Resources: vault://secrets, vault://policies
- Prompts: generate-policy

Run with VAULT_ADDR and VAULT_TOKEN set. Serves over stdio by default,
or over http on MCP_PORT when MCP_TRANSPORT=http.
"""

import logging
import os
import sys
from typing import Optional

from fastmcp import FastMCP

from . import prompts
from .config import VaultConfig, load_config
from .core.secrets import VaultBackend, create_backend
from .errors import ConfigurationError
from .plugins import CommandRegistry, Dispatcher
from .plugins.loader import register_commands
from .resources import ResourceCatalog

logger = logging.getLogger(__name__)

SERVER_NAME = "vault-mcp"


def build_server(config: VaultConfig, backend: Optional[VaultBackend] = None) -> FastMCP:
    """
    Wire a FastMCP server around one backend handle.

    Args:
        config: Validated configuration
        backend: Backend to use (default: hvac backend built from config)
    """
    backend = backend or create_backend(config)

    mcp = FastMCP(SERVER_NAME, instructions="MCP Server for HashiCorp Vault secret management")

    dispatcher = Dispatcher(CommandRegistry.default(backend), timeout=config.request_timeout)
    register_commands(mcp, dispatcher)
    ResourceCatalog(backend).register(mcp)
    prompts.register(mcp)

    return mcp


def main() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        stream=sys.stderr,  # stdout carries the stdio transport
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting Vault MCP Server...")

    try:
        config = load_config()
    except ConfigurationError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)

    try:
        mcp = build_server(config)
        logger.info(f"Connecting to Vault at: {config.address}")
        if config.transport == "http":
            mcp.run(transport="http", host="0.0.0.0", port=config.port)
        else:
            mcp.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Vault MCP Server stopped")
    except Exception as e:
        logger.exception(f"❌ Failed to start server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
