"""
Operation Dispatcher

Routes one invocation to its command: resolve the name, validate the
payload against the command's schema, run the handler under a timeout and
wrap the outcome in a response envelope.

Nothing raised by a single invocation escapes dispatch(); every failure
comes back as an error Response so the next invocation is unaffected.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from ..config import DEFAULT_TIMEOUT
from ..core.secrets import BackendError
from ..errors import CommandFailure, InvalidPayload, UnknownCommand, VaultMcpError
from .plugin_base import Command, CommandResult
from .registry import CommandRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Response:
    """Protocol response envelope: a single text content block."""
    content: List[Dict[str, str]]
    is_error: bool = False
    error: Optional[VaultMcpError] = None

    @property
    def text(self) -> str:
        return self.content[0]["text"]

    @classmethod
    def success(cls, text: str) -> "Response":
        return cls(content=[{"type": "text", "text": text}])

    @classmethod
    def failure(cls, error: VaultMcpError) -> "Response":
        return cls(content=[{"type": "text", "text": error.render()}], is_error=True, error=error)


def render(outcome: CommandResult) -> str:
    """Headline followed by the JSON rendering of the backend result."""
    return f"{outcome.summary}\n{json.dumps(outcome.result, indent=2, default=str)}"


class Dispatcher:
    """Dispatches invocations against a fixed CommandRegistry."""

    def __init__(self, registry: CommandRegistry, timeout: float = DEFAULT_TIMEOUT):
        self.registry = registry
        self.timeout = timeout

    async def dispatch(self, name: str, payload: Any) -> Response:
        """
        Run the named command with a raw payload.

        Returns:
            Response envelope; is_error is set and error holds an
            UnknownCommand, InvalidPayload or CommandFailure on failure.
        """
        try:
            command = self._resolve(name)
            args = self._validate(command, payload)
            outcome = await self._invoke(command, args)
        except VaultMcpError as e:
            logger.warning(f"❌ {name}: {e.code}: {e.message}")
            return Response.failure(e)

        logger.info(f"✅ {name} completed")
        return Response.success(render(outcome))

    def _resolve(self, name: str) -> Command:
        command = self.registry.get(name)
        if command is None:
            raise UnknownCommand(name)
        return command

    def _validate(self, command: Command, payload: Any) -> BaseModel:
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            raise InvalidPayload(command.name, [("payload", "must be an object")])

        try:
            return command.schema.model_validate(payload)
        except ValidationError as e:
            issues = [
                (".".join(str(part) for part in error["loc"]) or "payload", error["msg"])
                for error in e.errors()
            ]
            raise InvalidPayload(command.name, issues) from None

    async def _invoke(self, command: Command, args: BaseModel) -> CommandResult:
        try:
            return await asyncio.wait_for(command.handler(args), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise CommandFailure(
                command.name, f"Vault did not respond within {self.timeout}s", kind="timeout"
            ) from None
        except BackendError as e:
            raise CommandFailure(command.name, e.message, kind=e.kind) from e
        except Exception as e:
            logger.exception(f"Unhandled error in {command.name}")
            raise CommandFailure(command.name, f"{type(e).__name__}: {e}", kind="internal") from e
