"""
HashiCorp Vault Backend

Implements VaultBackend over the hvac client. hvac is synchronous, so every
call is pushed onto the default thread pool to keep the event loop free.
"""

import asyncio
import functools
import logging
from typing import Any, Callable, Dict, Optional

import hvac
import hvac.exceptions
import requests

from ..interface import BackendError, VaultBackend
from ....config import VaultConfig

logger = logging.getLogger(__name__)


def _normalize(result: Any) -> Any:
    """hvac hands back the raw Response for bodyless (204) replies."""
    if isinstance(result, requests.Response):
        return None
    return result


class HvacBackend(VaultBackend):
    """
    Vault backend using hvac.

    Config:
        address: Vault base URL
        token: Vault token
        request_timeout: HTTP timeout passed to the hvac client
    """

    backend_type = "hashicorp"

    def __init__(self, config: VaultConfig, client: Optional[hvac.Client] = None):
        self.address = config.address
        self._client = client or hvac.Client(
            url=config.address,
            token=config.token.get_secret_value(),
            timeout=config.request_timeout,
        )

    async def _call(self, operation: str, target: str, func: Callable, *args, **kwargs) -> Any:
        """Run a blocking hvac call in the executor, translating its errors."""
        loop = asyncio.get_running_loop()
        try:
            result = await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))
        except hvac.exceptions.InvalidPath as e:
            raise BackendError(f"Path not found: {target}: {e}", kind="not_found") from e
        except (hvac.exceptions.Forbidden, hvac.exceptions.Unauthorized) as e:
            raise BackendError(f"Permission denied on {target}: {e}", kind="permission") from e
        except hvac.exceptions.VaultDown as e:
            raise BackendError(f"Vault is sealed or down: {e}", kind="connectivity") from e
        except hvac.exceptions.VaultError as e:
            raise BackendError(f"Vault error on {target}: {e}", kind="backend") from e
        except requests.exceptions.Timeout as e:
            raise BackendError(f"Timed out reaching Vault at {self.address}: {e}", kind="timeout") from e
        except requests.exceptions.RequestException as e:
            raise BackendError(f"Cannot reach Vault at {self.address}: {e}", kind="connectivity") from e

        logger.debug(f"{operation} {target} ok")
        return _normalize(result)

    async def write(self, path: str, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self._call("write", path, self._client.write_data, path, data=payload)

    async def read(self, path: str) -> Dict[str, Any]:
        result = await self._call("read", path, self._client.read, path)
        if result is None:
            raise BackendError(f"Path not found: {path}", kind="not_found")
        return result

    async def delete(self, path: str) -> Optional[Dict[str, Any]]:
        return await self._call("delete", path, self._client.delete, path)

    async def list(self, path: str) -> Dict[str, Any]:
        result = await self._call("list", path, self._client.list, path)
        if result is None:
            raise BackendError(f"Path not found: {path}", kind="not_found")
        return result

    async def add_policy(self, name: str, rules: str) -> Optional[Dict[str, Any]]:
        return await self._call(
            "add_policy", f"sys/policy/{name}",
            self._client.sys.create_or_update_policy, name=name, policy=rules,
        )

    async def list_policies(self) -> Dict[str, Any]:
        return await self._call("list_policies", "sys/policy", self._client.sys.list_policies)
