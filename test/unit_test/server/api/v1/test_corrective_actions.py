"""
Tests for the corrective action endpoints.
"""

from typing import Any, Dict

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _raise_action(client: AsyncClient, agency_id: str, headers, **extra: Any) -> Dict[str, Any]:
    response = await client.post(
        f"/api/v1/agencies/{agency_id}/corrective-actions",
        json={"title": "Replace expired body armor", "category": "equipment", **extra},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateCorrectiveAction:
    async def test_create_defaults(self, client: AsyncClient, agency, agency_headers):
        data = await _raise_action(client, agency.id, agency_headers)

        assert data["agency_id"] == agency.id
        assert data["status"] == "open"
        assert data["priority"] == "medium"
        assert data["progress"] == 0
        assert data["date_identified"] is not None

    async def test_keeps_given_identification_date(self, client: AsyncClient, agency, agency_headers):
        data = await _raise_action(client, agency.id, agency_headers, date_identified="2025-01-15T00:00:00")

        assert data["date_identified"].startswith("2025-01-15")

    async def test_progress_out_of_range(self, client: AsyncClient, agency, agency_headers):
        response = await client.post(
            f"/api/v1/agencies/{agency.id}/corrective-actions",
            json={"title": "Overdone", "progress": 120},
            headers=agency_headers,
        )

        assert response.status_code == 422

    async def test_list_oldest_finding_first(self, client: AsyncClient, agency, agency_headers):
        await _raise_action(client, agency.id, agency_headers, title="Newer", date_identified="2025-03-01T00:00:00")
        await _raise_action(client, agency.id, agency_headers, title="Older", date_identified="2025-01-01T00:00:00")

        response = await client.get(f"/api/v1/agencies/{agency.id}/corrective-actions", headers=agency_headers)

        assert [a["title"] for a in response.json()] == ["Older", "Newer"]


class TestChangeCorrectiveAction:
    async def test_record_progress(self, client: AsyncClient, agency, agency_headers):
        action = await _raise_action(client, agency.id, agency_headers)

        response = await client.patch(
            f"/api/v1/agencies/{agency.id}/corrective-actions/{action['id']}",
            json={"status": "in-progress", "progress": 40, "action_plan": ["Order vests", "Issue vests"]},
            headers=agency_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "in-progress"
        assert data["progress"] == 40
        assert data["action_plan"] == ["Order vests", "Issue vests"]
        assert data["title"] == action["title"]

    async def test_update_missing(self, client: AsyncClient, agency, agency_headers):
        response = await client.patch(
            f"/api/v1/agencies/{agency.id}/corrective-actions/missing", json={"progress": 10}, headers=agency_headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Corrective action not found"

    async def test_action_of_another_agency(self, client: AsyncClient, agency, other_agency, agency_headers, admin_headers):
        action = await _raise_action(client, other_agency.id, admin_headers)

        response = await client.patch(
            f"/api/v1/agencies/{agency.id}/corrective-actions/{action['id']}",
            json={"progress": 10},
            headers=agency_headers,
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied"

    async def test_delete(self, client: AsyncClient, agency, agency_headers):
        action = await _raise_action(client, agency.id, agency_headers)

        response = await client.delete(
            f"/api/v1/agencies/{agency.id}/corrective-actions/{action['id']}", headers=agency_headers
        )
        listing = await client.get(f"/api/v1/agencies/{agency.id}/corrective-actions", headers=agency_headers)

        assert response.status_code == 204
        assert listing.json() == []

    async def test_other_agency_cannot_delete(self, client: AsyncClient, agency, agency_headers, other_headers):
        action = await _raise_action(client, agency.id, agency_headers)

        response = await client.delete(
            f"/api/v1/agencies/{agency.id}/corrective-actions/{action['id']}", headers=other_headers
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied to this agency"
