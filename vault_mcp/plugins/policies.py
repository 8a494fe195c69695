"""
Policy Plugin

Writes named ACL policies. Rule text is passed to Vault verbatim.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from .plugin_base import CommandPlugin, CommandResult


class PolicyCreateInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(min_length=1, description="Policy name")
    policy: StrictStr = Field(description="Policy rules in HCL or JSON")


class PolicyPlugin(CommandPlugin):
    """Vault policy management."""

    def initialize(self) -> None:
        self.metadata = {
            "name": "policies",
            "version": "1.0.0",
            "description": "Create or overwrite Vault ACL policies",
        }
        self.add_command("policy/create", PolicyCreateInput, self.policy_create)

    async def policy_create(self, payload: PolicyCreateInput) -> CommandResult:
        """
        Create a new Vault policy, overwriting any policy of the same name.

        Args:
            name: Policy name (e.g., "read-only")
            policy: Rules, e.g. 'path "secret/*" { capabilities = ["read", "list"] }'
        """
        result = await self.backend.add_policy(payload.name, payload.policy)
        return CommandResult(f"✅ Policy '{payload.name}' created.", result)
