"""
Vault MCP

Model Context Protocol server for HashiCorp Vault secret and policy
management.
"""

__version__ = "1.0.0"
