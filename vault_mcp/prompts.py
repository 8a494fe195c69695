"""
Policy Prompt Generator

Turns a path and a comma-separated capability string into a Vault policy
document. Output is advisory: it is never written to Vault, and capability
names are not checked against Vault's vocabulary.
"""

import json
from typing import Any, Dict

from fastmcp import FastMCP

PROMPT_NAME = "generate-policy"


def generate_policy(path: str, capabilities: str) -> Dict[str, Any]:
    """
    Build a policy document.

    Capabilities are split on commas and trimmed. Order and duplicates
    are kept.

    Example:
        >>> generate_policy("secret/data/apps/*", "read, list")
        {'path': {'secret/data/apps/*': {'capabilities': ['read', 'list']}}}
    """
    caps = [cap.strip() for cap in capabilities.split(",")]
    return {"path": {path: {"capabilities": caps}}}


def policy_prompt(path: str, capabilities: str) -> str:
    """Generates a Vault policy object from a comma-separated capability string."""
    return json.dumps(generate_policy(path, capabilities), indent=2)


def register(mcp: FastMCP) -> None:
    mcp.prompt(name=PROMPT_NAME)(policy_prompt)
