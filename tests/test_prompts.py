"""Tests for the policy prompt generator."""

import json

from vault_mcp.prompts import generate_policy, policy_prompt


class TestGeneratePolicy:

    def test_document_shape(self):
        assert generate_policy("secret/data/apps/*", "read,list") == {
            "path": {"secret/data/apps/*": {"capabilities": ["read", "list"]}}
        }

    def test_whitespace_insensitive(self):
        assert generate_policy("p", "read, list") == generate_policy("p", "read,list")
        assert generate_policy("p", "  read ,\tlist  ")["path"]["p"]["capabilities"] == ["read", "list"]

    def test_order_and_duplicates_kept(self):
        caps = generate_policy("p", "update, read, update")["path"]["p"]["capabilities"]
        assert caps == ["update", "read", "update"]

    def test_unknown_capabilities_pass_through(self):
        caps = generate_policy("p", "read, teleport")["path"]["p"]["capabilities"]
        assert caps == ["read", "teleport"]

    def test_deterministic(self):
        assert policy_prompt("p", "read, list") == policy_prompt("p", "read, list")

    def test_prompt_text_is_json(self):
        assert json.loads(policy_prompt("p", "read")) == generate_policy("p", "read")
