"""Tests for the read-only resource catalog."""

import json

import pytest

from vault_mcp.core.secrets import BackendError
from vault_mcp.resources import SECRETS_METADATA_ROOT, ResourceCatalog


@pytest.fixture
def catalog(backend) -> ResourceCatalog:
    return ResourceCatalog(backend)


class TestSecretsListing:

    async def test_lists_top_level_keys_in_backend_order(self, catalog, backend):
        backend.secrets["secret/data/zeta"] = {"a": "1"}
        backend.secrets["secret/data/apps/demo"] = {"k": "v"}
        backend.secrets["secret/data/apps/other"] = {"k": "v"}

        assert json.loads(await catalog.list_secrets()) == ["zeta", "apps/"]
        assert backend.calls == [("list", (SECRETS_METADATA_ROOT,))]

    async def test_not_found_yields_empty_list(self, catalog):
        assert await catalog.list_secrets() == "[]"

    @pytest.mark.parametrize("kind", ["permission", "connectivity", "backend"])
    async def test_any_backend_error_yields_empty_list(self, catalog, backend, kind):
        backend.fail["list"] = BackendError("nope", kind=kind)

        assert await catalog.list_secrets() == "[]"

    async def test_missing_keys_field(self, catalog, backend):
        async def list_without_keys(path):
            return {"data": {}}

        backend.list = list_without_keys

        assert await catalog.list_secrets() == "[]"


class TestPoliciesListing:

    async def test_returns_raw_structure(self, catalog, backend):
        result = json.loads(await catalog.list_policies())

        assert result["policies"] == ["default", "root"]

    async def test_errors_propagate_unchanged(self, catalog, backend):
        error = BackendError("permission denied", kind="permission")
        backend.fail["list_policies"] = error

        with pytest.raises(BackendError) as exc_info:
            await catalog.list_policies()
        assert exc_info.value is error
