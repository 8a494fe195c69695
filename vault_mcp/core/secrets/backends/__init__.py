"""
Vault Backends

Available backend adapters, keyed by name.
"""

from ....config import VaultConfig
from ..interface import VaultBackend
from .hashicorp import HvacBackend

# Registry of available backends
BACKENDS = {
    "hashicorp": HvacBackend,
    "vault": HvacBackend,  # Alias
}


def create_backend(config: VaultConfig, adapter: str = "hashicorp") -> VaultBackend:
    """Instantiate the named backend adapter for a validated config."""
    if adapter not in BACKENDS:
        raise ValueError(f"Unknown backend adapter type: {adapter}")
    return BACKENDS[adapter](config)


__all__ = ["BACKENDS", "HvacBackend", "create_backend"]
