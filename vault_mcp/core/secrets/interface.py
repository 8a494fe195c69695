"""
Vault Backend Interface

Defines the capability interface the command handlers talk to.
Implementations wrap a concrete client (hvac) or a test double.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class BackendError(Exception):
    """
    Error originating from the secret store.

    kind is one of: not_found, permission, connectivity, timeout, backend.
    The message carries the backend's own diagnostic text.
    """

    def __init__(self, message: str, kind: str = "backend"):
        super().__init__(message)
        self.message = message
        self.kind = kind


class VaultBackend(ABC):
    """
    Abstract base class for Vault backends.

    All paths are logical Vault paths (e.g. "secret/data/apps/demo").
    Results are the backend's JSON structures, passed through as-is.
    Every method raises BackendError on failure.
    """

    backend_type: str = "base"

    @abstractmethod
    async def write(self, path: str, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Write payload at path. Returns the backend's response body, if any."""
        pass

    @abstractmethod
    async def read(self, path: str) -> Dict[str, Any]:
        """
        Read the value at path.

        Raises:
            BackendError: kind "not_found" if nothing is stored at path
        """
        pass

    @abstractmethod
    async def delete(self, path: str) -> Optional[Dict[str, Any]]:
        """Delete at path. For KV v2 data paths this is a soft delete."""
        pass

    @abstractmethod
    async def list(self, path: str) -> Dict[str, Any]:
        """
        List keys under path.

        Raises:
            BackendError: kind "not_found" if the path has no children
        """
        pass

    @abstractmethod
    async def add_policy(self, name: str, rules: str) -> Optional[Dict[str, Any]]:
        """Create or overwrite a named policy."""
        pass

    @abstractmethod
    async def list_policies(self) -> Dict[str, Any]:
        """List policy names."""
        pass
