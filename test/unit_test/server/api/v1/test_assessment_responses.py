"""
Tests for submitting and listing assessment responses.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient

from swat_manager.core.database.entities.assessments import Assessment
from swat_manager.server.services.scoring import questions_for

pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def tier_assessment(repos, agency):
    return await repos.assessments.create(Assessment(agency_id=agency.id, name="Tier 2026"))


@pytest_asyncio.fixture
async def gap_assessment(repos, agency):
    return await repos.assessments.create(
        Assessment(agency_id=agency.id, name="Gap 2026", assessment_type="gap-analysis")
    )


async def _questions(repos, assessment_type):
    return questions_for(await repos.categories.list_ordered(), await repos.questions.list(), assessment_type)


class TestSubmitResponse:
    async def test_submit_updates_progress(
        self, client: AsyncClient, repos, questionnaire, tier_assessment, agency_headers
    ):
        questions = await _questions(repos, "tier-assessment")

        response = await client.post(
            "/api/v1/assessment-responses",
            json={
                "assessment_id": tier_assessment.id,
                "question_id": questions[0].id,
                "response": True,
                "notes": "Verified on site",
            },
            headers=agency_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["response"] is True
        assert data["notes"] == "Verified on site"

        stored = await repos.assessments.get_by_id(tier_assessment.id)
        assert stored.progress_percentage == round(1 / len(questions) * 100)
        assert stored.status == "in_progress"

    async def test_resubmitting_replaces_answer(
        self, client: AsyncClient, repos, questionnaire, tier_assessment, agency_headers
    ):
        question = (await _questions(repos, "tier-assessment"))[0]
        body = {"assessment_id": tier_assessment.id, "question_id": question.id}

        first = await client.post("/api/v1/assessment-responses", json={**body, "response": True}, headers=agency_headers)
        second = await client.post(
            "/api/v1/assessment-responses", json={**body, "response": False}, headers=agency_headers
        )

        assert first.json()["id"] == second.json()["id"]
        stored = await repos.responses.list_by_assessment(tier_assessment.id)
        assert len(stored) == 1
        assert stored[0].response is False

    async def test_answering_every_question_completes_assessment(
        self, client: AsyncClient, repos, questionnaire, gap_assessment, agency_headers
    ):
        questions = await _questions(repos, "gap-analysis")

        for question in questions:
            body = {"assessment_id": gap_assessment.id, "question_id": question.id}
            if question.question_type == "text":
                body["text_response"] = "1:5"
            else:
                body["response"] = True
            response = await client.post("/api/v1/assessment-responses", json=body, headers=agency_headers)
            assert response.status_code == 201

        stored = await repos.assessments.get_by_id(gap_assessment.id)
        assert stored.progress_percentage == 100
        assert stored.status == "completed"
        assert stored.completed_at is not None

    async def test_answers_outside_assessment_type_do_not_count(
        self, client: AsyncClient, repos, questionnaire, gap_assessment, agency_headers
    ):
        tier_question = (await _questions(repos, "tier-assessment"))[0]

        await client.post(
            "/api/v1/assessment-responses",
            json={"assessment_id": gap_assessment.id, "question_id": tier_question.id, "response": True},
            headers=agency_headers,
        )

        stored = await repos.assessments.get_by_id(gap_assessment.id)
        assert stored.progress_percentage == 0

    async def test_unknown_question(self, client: AsyncClient, questionnaire, tier_assessment, agency_headers):
        response = await client.post(
            "/api/v1/assessment-responses",
            json={"assessment_id": tier_assessment.id, "question_id": "missing", "response": True},
            headers=agency_headers,
        )
        assert response.status_code == 404
        assert response.json()["detail"] == "Question not found"

    async def test_other_agency_forbidden(
        self, client: AsyncClient, repos, questionnaire, tier_assessment, other_headers
    ):
        question = (await _questions(repos, "tier-assessment"))[0]
        response = await client.post(
            "/api/v1/assessment-responses",
            json={"assessment_id": tier_assessment.id, "question_id": question.id, "response": True},
            headers=other_headers,
        )
        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied to this assessment"


class TestListResponses:
    async def test_list_for_assessment(self, client: AsyncClient, repos, questionnaire, tier_assessment, agency_headers):
        question = (await _questions(repos, "tier-assessment"))[0]
        await repos.responses.upsert(tier_assessment.id, question.id, {"response": True})

        response = await client.get(f"/api/v1/assessment-responses/{tier_assessment.id}", headers=agency_headers)

        assert response.status_code == 200
        assert [r["question_id"] for r in response.json()] == [question.id]

    async def test_list_for_other_agency(self, client: AsyncClient, tier_assessment, other_headers):
        response = await client.get(f"/api/v1/assessment-responses/{tier_assessment.id}", headers=other_headers)
        assert response.status_code == 403

    async def test_list_all_admin_only(self, client: AsyncClient, admin_headers, agency_headers):
        assert (await client.get("/api/v1/assessment-responses", headers=admin_headers)).status_code == 200
        assert (await client.get("/api/v1/assessment-responses", headers=agency_headers)).status_code == 403
