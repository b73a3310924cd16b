"""
End-to-end assessment flow.

An administrator onboards an agency and its user; the agency user logs in,
answers the whole Tier Assessment and a Gap Analysis, generates both reports
and downloads them.
"""

from typing import Dict, List

import pytest_asyncio
from httpx import AsyncClient

from swat_manager.core.seed.data import SAMPLE_AGENCIES

PASSWORD = "patrol-ready-42"


async def _answer_all(client: AsyncClient, headers: Dict[str, str], assessment_id: str, sections: List[dict]) -> dict:
    for section in sections:
        for question in section["questions"]:
            body = {"assessment_id": assessment_id, "question_id": question["id"], "notes": "verified on site"}
            if question["question_type"] == "boolean":
                body["response"] = True
            elif question["question_type"] == "numeric":
                body["numeric_response"] = 4
            elif question["question_type"] == "select":
                body["select_response"] = "Quarterly"
            else:
                body["text_response"] = "Documented in the team SOP"
            response = await client.post("/api/v1/assessment-responses", json=body, headers=headers)
            assert response.status_code == 201, response.text

    response = await client.get(f"/api/v1/assessments/{assessment_id}", headers=headers)
    assert response.status_code == 200
    return response.json()


@pytest_asyncio.fixture
async def agency_headers(e2e_client: AsyncClient, admin_headers: Dict[str, str]) -> Dict[str, str]:
    agency = await e2e_client.post(
        "/api/v1/agencies",
        json={
            "name": "Phoenix Police Department",
            "jurisdiction": "Phoenix, AZ",
            "contact_name": "Sam Ortega",
            "contact_email": "sortega@phoenix.gov",
        },
        headers=admin_headers,
    )
    assert agency.status_code == 201, agency.text

    user = await e2e_client.post(
        "/api/v1/users",
        json={
            "first_name": "Sam",
            "last_name": "Ortega",
            "email": "sortega@phoenix.gov",
            "password": PASSWORD,
            "agency_id": agency.json()["id"],
        },
        headers=admin_headers,
    )
    assert user.status_code == 201, user.text

    login = await e2e_client.post("/api/v1/login", json={"email": "SOrtega@Phoenix.gov", "password": PASSWORD})
    assert login.status_code == 200, login.text
    body = login.json()
    assert body["user"]["agency_id"] == agency.json()["id"]
    return {"Authorization": f"Bearer {body['access_token']}"}


async def test_seeded_platform(e2e_client: AsyncClient, admin_headers: Dict[str, str]):
    agencies = await e2e_client.get("/api/v1/agencies", headers=admin_headers)
    assert {a["contact_email"] for a in agencies.json()} >= {a.contact_email for a in SAMPLE_AGENCIES}

    questionnaire = await e2e_client.get("/api/v1/questionnaire", headers=admin_headers)
    sections = questionnaire.json()
    assert len(sections) == 24
    assert [s["is_gap_analysis"] for s in sections] == [False] * 16 + [True] * 8


async def test_tier_assessment_to_download(e2e_client: AsyncClient, agency_headers: Dict[str, str], admin_headers):
    me = (await e2e_client.get("/api/v1/user", headers=agency_headers)).json()
    agency_id = me["agency_id"]

    created = await e2e_client.post(
        f"/api/v1/agencies/{agency_id}/assessments", json={"name": "2026 Annual Review"}, headers=agency_headers
    )
    assert created.status_code == 201, created.text
    assessment_id = created.json()["id"]

    early = await e2e_client.post(f"/api/v1/reports/{assessment_id}/generate-tier-report", headers=agency_headers)
    assert early.status_code == 400

    sections = (
        await e2e_client.get("/api/v1/questionnaire?assessment_type=tier-assessment", headers=agency_headers)
    ).json()
    assessment = await _answer_all(e2e_client, agency_headers, assessment_id, sections)
    assert assessment["progress_percentage"] == 100
    assert assessment["status"] == "completed"

    report = await e2e_client.post(f"/api/v1/reports/{assessment_id}/generate-tier-report", headers=agency_headers)
    assert report.status_code == 201, report.text
    report_body = report.json()
    assert report_body["tier_level"] == 1
    assert report_body["report_url"].startswith("/reports/tier_report_")

    agency = (await e2e_client.get(f"/api/v1/agencies/{agency_id}", headers=agency_headers)).json()
    assert agency["tier_level"] == 1
    assert agency["last_assessment_date"] is not None

    download = await e2e_client.get(f"/api/v1/reports/{report_body['id']}/download", headers=agency_headers)
    assert download.status_code == 200
    assert download.headers["content-type"] == "application/pdf"
    assert download.content.startswith(b"%PDF")

    listing = (await e2e_client.get("/api/v1/reports", headers=admin_headers)).json()
    assert [r["id"] for r in listing] == [report_body["id"]]
    assert listing[0]["agency_name"] == "Phoenix Police Department"
    assert listing[0]["tier_classification"] == 1


async def test_gap_analysis_report(e2e_client: AsyncClient, agency_headers: Dict[str, str]):
    agency_id = (await e2e_client.get("/api/v1/user", headers=agency_headers)).json()["agency_id"]
    created = await e2e_client.post(
        f"/api/v1/agencies/{agency_id}/assessments",
        json={"name": "Gap review", "assessment_type": "gap-analysis"},
        headers=agency_headers,
    )
    assessment_id = created.json()["id"]

    sections = (
        await e2e_client.get("/api/v1/questionnaire?assessment_type=gap-analysis", headers=agency_headers)
    ).json()
    assessment = await _answer_all(e2e_client, agency_headers, assessment_id, sections)
    assert assessment["progress_percentage"] == 100

    report = await e2e_client.post(f"/api/v1/reports/{assessment_id}/generate-gap-report", headers=agency_headers)
    assert report.status_code == 201, report.text
    assert report.json()["report_type"] == "gap-analysis"
    assert report.json()["tier_level"] is None

    download = await e2e_client.get(f"/api/v1/reports/{report.json()['id']}/download", headers=agency_headers)
    assert download.content.startswith(b"%PDF")


async def test_logout_is_stateless(e2e_client: AsyncClient, agency_headers: Dict[str, str]):
    response = await e2e_client.post("/api/v1/logout", headers=agency_headers)

    assert response.status_code == 200
    assert (await e2e_client.get("/api/v1/user", headers=agency_headers)).json() is not None
