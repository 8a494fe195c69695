"""
Vault MCP Core

Core abstractions and interfaces.

Infrastructure:
- secrets: Vault backend interface and adapters (not exposed as tools)
"""
