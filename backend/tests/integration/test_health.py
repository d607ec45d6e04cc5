"""Tests for the health check endpoint."""

import pytest

from records_api.domain.policies import DeletePolicy, UpdatePolicy


@pytest.mark.asyncio
async def test_health_reports_default_store_policies(client):
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert data["store"] == {
        "update_policy": "strict",
        "delete_policy": "strict",
        "write_success_status": 202,
    }


@pytest.mark.asyncio
async def test_health_follows_configured_policies(client, configure):
    configure(
        record_update_policy=UpdatePolicy.UPSERT,
        record_delete_policy=DeletePolicy.IDEMPOTENT,
        write_success_status=204,
    )

    data = (await client.get("/api/v1/health")).json()

    assert data["store"]["update_policy"] == "upsert"
    assert data["store"]["delete_policy"] == "idempotent"
    assert data["store"]["write_success_status"] == 204
