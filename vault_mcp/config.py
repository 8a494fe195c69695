"""
Vault MCP Configuration

Connection parameters are validated once at startup and never looked up
again. Import defaults from here rather than re-reading the environment.

Environment:
    VAULT_ADDR      Vault base URL (required)
    VAULT_TOKEN     Vault token (required, hvs./hvb./hvr. or legacy s./b./r.)
    MCP_PORT        Port for the http transport (default: 3000)
    MCP_TRANSPORT   "stdio" (default) or "http"
    VAULT_TIMEOUT   Per-call backend timeout in seconds (default: 30)
"""

import os
from typing import Literal, Mapping, Optional

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from .errors import ConfigurationError

DEFAULT_PORT = 3000
DEFAULT_TIMEOUT = 30.0
DEFAULT_TRANSPORT = "stdio"

# Vault token prefixes: service, batch, recovery (current and legacy forms)
TOKEN_PREFIXES = ("hvs.", "hvb.", "hvr.", "s.", "b.", "r.")

_URL = TypeAdapter(AnyHttpUrl)


class VaultConfig(BaseModel):
    """Immutable connection settings for one adapter instance."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    address: str = Field(alias="VAULT_ADDR")
    token: SecretStr = Field(alias="VAULT_TOKEN")
    port: int = Field(DEFAULT_PORT, alias="MCP_PORT", ge=1, le=65535)
    transport: Literal["stdio", "http"] = Field(DEFAULT_TRANSPORT, alias="MCP_TRANSPORT")
    request_timeout: float = Field(DEFAULT_TIMEOUT, alias="VAULT_TIMEOUT", gt=0)

    @field_validator("address")
    @classmethod
    def _check_address(cls, value: str) -> str:
        try:
            _URL.validate_python(value)
        except ValidationError:
            raise ValueError(
                "VAULT_ADDR must be a valid URL (e.g., http://vault.example.com:8200)"
            ) from None
        return value

    @field_validator("token")
    @classmethod
    def _check_token(cls, value: SecretStr) -> SecretStr:
        raw = value.get_secret_value()
        if len(raw) < 3:
            raise ValueError("VAULT_TOKEN must be at least 3 characters")
        if not raw.startswith(TOKEN_PREFIXES):
            raise ValueError(
                f"VAULT_TOKEN must start with a Vault token prefix ({', '.join(TOKEN_PREFIXES)})"
            )
        return value


def _issue_message(error: dict) -> str:
    msg = error.get("msg", "invalid value")
    # pydantic prefixes messages raised from our own validators
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    return msg


def validate_config(
    address: Optional[str],
    token: Optional[str],
    port: Optional[str] = None,
    **extra: Optional[str],
) -> VaultConfig:
    """
    Validate raw connection parameters.

    Empty strings count as absent. Every violated field is reported in a
    single ConfigurationError, not just the first one found.

    Raises:
        ConfigurationError: If any field is missing or malformed
    """
    raw = {"VAULT_ADDR": address, "VAULT_TOKEN": token, "MCP_PORT": port, **extra}
    data = {key: value for key, value in raw.items() if value not in (None, "")}

    try:
        return VaultConfig.model_validate(data)
    except ValidationError as e:
        issues = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "config"
            issues.append((field, _issue_message(error)))
        raise ConfigurationError(issues) from None


def load_config(environ: Optional[Mapping[str, str]] = None) -> VaultConfig:
    """Build the configuration from environment variables."""
    env = os.environ if environ is None else environ
    return validate_config(
        env.get("VAULT_ADDR"),
        env.get("VAULT_TOKEN"),
        env.get("MCP_PORT"),
        MCP_TRANSPORT=env.get("MCP_TRANSPORT"),
        VAULT_TIMEOUT=env.get("VAULT_TIMEOUT"),
    )
