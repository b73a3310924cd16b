"""
API endpoints for assessment reports.

Reports are generated from an assessment's responses (Tier Assessment or Gap
Analysis), rendered to PDF and stored on disk; the database keeps a record
with the file's URL and a text summary. Administrators can also upload
reports produced outside the platform.
"""

from __future__ import annotations

import time
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import FileResponse

from swat_manager.core.database.base import utc_now
from swat_manager.core.database.entities.agencies import Agency
from swat_manager.core.database.entities.assessments import Assessment
from swat_manager.core.database.entities.reports import Report
from swat_manager.core.database.entities.users import User
from swat_manager.core.database.repositories import SqlRepoBundle
from swat_manager.core.logging_config import get_logger
from swat_manager.core.models.domain.enums import AssessmentStatus, AssessmentType
from swat_manager.core.models.io.reports import (
    ReportFileUpload,
    ReportRead,
    ReportSummaryRead,
    ReportUpdate,
    ReportUploadResult,
)
from swat_manager.core.monitoring import log_report_generated
from swat_manager.server.services.deps import (
    AdminUser,
    CurrentUser,
    ReposDep,
    ensure_agency_access,
    get_accessible_assessment,
)
from swat_manager.server.services.reports import (
    UPLOAD_EXTENSIONS,
    ReportStorage,
    answered_sections,
    decode_data_url,
    extension_for_file_type,
    gap_report_closing,
    gap_report_header,
    gap_report_text,
    get_report_storage,
    report_filename,
    report_url,
    text_filename,
    tier_summary,
)
from swat_manager.server.services.scoring import (
    build_questionnaire,
    ensure_report_ready,
    ensure_report_type,
    questions_for,
    score_tier,
)

logger = get_logger(__name__)

router = APIRouter(tags=["reports"])

TYPE_LABELS = {
    AssessmentType.tier_assessment.value: "Tier Assessment",
    AssessmentType.gap_analysis.value: "Gap Analysis",
}


async def _get_report_with_access(
    repos: SqlRepoBundle, user: User, report_id: str, action: str
) -> tuple[Report, Assessment]:
    report = await repos.reports.get_by_id(report_id)
    if not report:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Report not found")
    assessment = await repos.assessments.get_by_id(report.assessment_id)
    if not assessment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Associated assessment not found")
    ensure_agency_access(user, assessment.agency_id, detail=f"Not authorized to {action} this report")
    return report, assessment


@router.get(
    "/reports",
    response_model=list[ReportSummaryRead],
    summary="List Reports",
    description="List reports with their agency and assessment details.",
    responses={403: {"description": "Unauthorized access to reports"}},
)
async def list_reports(repos: ReposDep, user: CurrentUser) -> list[ReportSummaryRead]:
    """
    List reports.

    Administrators see every report; agency users see their agency's reports.
    Each report is enriched with its agency name, assessment name, type and
    date, and the tier classification (the report's tier, else the
    assessment's, else 0).
    """
    if user.is_admin:
        reports = await repos.reports.list_all()
    elif user.agency_id:
        reports = await repos.reports.list_by_agency(user.agency_id)
    else:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized access to reports")

    assessments: Dict[str, Optional[Assessment]] = {}
    agency_names: Dict[str, str] = {}
    enriched: List[ReportSummaryRead] = []
    for report in reports:
        if report.assessment_id not in assessments:
            assessments[report.assessment_id] = await repos.assessments.get_by_id(report.assessment_id)
        assessment = assessments[report.assessment_id]
        item = ReportSummaryRead.model_validate(report)
        item.assessment_type = report.report_type or item.assessment_type
        if assessment is not None:
            if assessment.agency_id not in agency_names:
                agency = await repos.agencies.get_by_id(assessment.agency_id)
                agency_names[assessment.agency_id] = agency.name if agency else "Unknown Agency"
            item.agency_id = assessment.agency_id
            item.agency_name = agency_names[assessment.agency_id]
            item.assessment_name = assessment.name
            item.assessment_type = assessment.assessment_type
            item.assessment_date = assessment.started_at
        item.tier_classification = report.tier_level or (assessment.tier_level if assessment else None) or 0
        enriched.append(item)
    logger.debug(f"Retrieved {len(enriched)} reports for user {user.id}")
    return enriched


@router.post(
    "/reports/{assessment_id}/generate-tier-report",
    response_model=ReportRead,
    status_code=status.HTTP_201_CREATED,
    summary="Generate Tier Report",
    description="Score a tier assessment, record the tier and produce a PDF report.",
    responses={
        201: {"description": "Report generated"},
        400: {"description": "Not a tier assessment, or less than 90% complete"},
        403: {"description": "Not authorized to generate reports for this assessment"},
        404: {"description": "Assessment not found"},
    },
)
async def generate_tier_report(
    assessment_id: str,
    repos: ReposDep,
    user: CurrentUser,
    storage: ReportStorage = Depends(get_report_storage),
) -> ReportRead:
    """
    Generate a Tier Assessment report.

    Only questions that impact the tier, in tier categories, are scored. A
    Yes rate of 90% or more gives Tier 1, 75% Tier 2, 50% Tier 3, and
    anything lower Tier 4. The tier is stored on the assessment and the
    agency, and the agency's last assessment date is set.
    """
    assessment = await get_accessible_assessment(
        repos, user, assessment_id, forbidden_detail="Not authorized to generate reports for this assessment"
    )
    ensure_report_type(assessment.assessment_type, AssessmentType.tier_assessment.value)
    ensure_report_ready(assessment.progress_percentage, AssessmentType.tier_assessment.value)

    categories = await repos.categories.list_ordered()
    questions = await repos.questions.list()
    responses = await repos.responses.list_by_assessment(assessment.id)
    tier_questions = questions_for(categories, questions, AssessmentType.tier_assessment.value)
    result = score_tier(tier_questions, responses)
    logger.info(
        f"Assessment {assessment.id} scored {result.positive}/{result.total} ({result.percent:.1f}%), tier {result.tier}"
    )

    assessment.tier_level = result.tier
    await repos.assessments.update(assessment)
    agency = await repos.agencies.get_by_id(assessment.agency_id)
    agency_name = agency.name if agency else "Unknown Agency"
    if agency is not None:
        agency.tier_level = result.tier
        agency.last_assessment_date = utc_now()
        await repos.agencies.update(agency)

    summary = tier_summary(agency_name, result, assessment.started_at, assessment.progress_percentage)
    sections = answered_sections(
        build_questionnaire(categories, questions, AssessmentType.tier_assessment.value), responses
    )
    filename = report_filename("tier", assessment.id)
    try:
        storage.write_pdf(
            filename,
            title="SWAT TIER LEVEL ASSESSMENT REPORT",
            header_lines=[
                f"Agency: {agency_name}",
                f"Assessment Date: {utc_now().strftime('%m/%d/%Y')}",
                f"Tier Level: {result.tier}",
            ],
            sections=sections,
            summary=summary,
        )
    except Exception as e:
        logger.error(f"Failed to render tier report for assessment {assessment.id}: {str(e)}", exc_info=True)
        raise

    report = await repos.reports.create(
        Report(
            assessment_id=assessment.id,
            report_type=AssessmentType.tier_assessment.value,
            tier_level=result.tier,
            report_url=report_url(filename),
            summary=summary,
        )
    )
    log_report_generated(report.id, assessment.id, report.report_type, result.tier)
    return ReportRead.model_validate(report)


@router.post(
    "/reports/{assessment_id}/generate-gap-report",
    response_model=ReportRead,
    status_code=status.HTTP_201_CREATED,
    summary="Generate Gap Analysis Report",
    description="Produce a PDF listing the answered Gap Analysis questions.",
    responses={
        201: {"description": "Report generated"},
        400: {"description": "Not a gap analysis, or less than 75% complete"},
        403: {"description": "Not authorized to generate gap reports for this assessment"},
        404: {"description": "Assessment not found"},
    },
)
async def generate_gap_report(
    assessment_id: str,
    repos: ReposDep,
    user: CurrentUser,
    storage: ReportStorage = Depends(get_report_storage),
) -> ReportRead:
    """
    Generate a Gap Analysis report.

    The report contains only the questions and answers of the gap analysis
    categories, grouped by category, with any notes. A plain-text copy is
    stored next to the PDF under the same name with a `.txt` extension.
    """
    assessment = await get_accessible_assessment(
        repos, user, assessment_id, forbidden_detail="Not authorized to generate gap reports for this assessment"
    )
    ensure_report_type(assessment.assessment_type, AssessmentType.gap_analysis.value)
    ensure_report_ready(assessment.progress_percentage, AssessmentType.gap_analysis.value)

    categories = await repos.categories.list_ordered()
    questions = await repos.questions.list()
    responses = await repos.responses.list_by_assessment(assessment.id)
    agency = await repos.agencies.get_by_id(assessment.agency_id)
    agency_name = agency.name if agency else "Unknown Agency"

    now = utc_now()
    sections = answered_sections(
        build_questionnaire(categories, questions, AssessmentType.gap_analysis.value), responses
    )
    logger.debug(f"Gap report for assessment {assessment.id} covers {len(sections)} categories")

    filename = report_filename("gap", assessment.id)
    try:
        storage.write_pdf(
            filename,
            title="SWAT GAP ANALYSIS REPORT",
            header_lines=gap_report_header(agency_name, now),
            sections=sections,
            closing=gap_report_closing(agency_name),
        )
        storage.write_bytes(text_filename(filename), gap_report_text(agency_name, sections, now).encode("utf-8"))
    except Exception as e:
        logger.error(f"Failed to render gap report for assessment {assessment.id}: {str(e)}", exc_info=True)
        raise

    report = await repos.reports.create(
        Report(
            assessment_id=assessment.id,
            report_type=AssessmentType.gap_analysis.value,
            report_url=report_url(filename),
            summary=f"Gap Analysis Report for {agency_name}",
        )
    )
    log_report_generated(report.id, assessment.id, report.report_type, None)
    return ReportRead.model_validate(report)


@router.get(
    "/reports/{report_id}/download",
    summary="Download Report",
    description="Stream a report file.",
    response_class=FileResponse,
    responses={
        403: {"description": "Not authorized to download this report"},
        404: {"description": "Report, assessment or file not found"},
    },
)
async def download_report(
    report_id: str,
    repos: ReposDep,
    user: CurrentUser,
    storage: ReportStorage = Depends(get_report_storage),
) -> FileResponse:
    report, _ = await _get_report_with_access(repos, user, report_id, "download")
    path = storage.resolve(report.report_url)
    return FileResponse(
        path,
        media_type=storage.content_type_for(path),
        filename=f"report_{report.id}{path.suffix}",
    )


@router.patch(
    "/reports/{report_id}",
    response_model=ReportRead,
    summary="Update Report",
    description="Edit a report's summary, tier level or type.",
    responses={
        400: {"description": "No update data provided"},
        403: {"description": "Not authorized to update this report"},
        404: {"description": "Report not found"},
    },
)
async def update_report(report_id: str, payload: ReportUpdate, repos: ReposDep, user: CurrentUser) -> ReportRead:
    report, _ = await _get_report_with_access(repos, user, report_id, "update")
    update_data = payload.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No update data provided")
    for key, value in update_data.items():
        setattr(report, key, value)
    report = await repos.reports.update(report)
    logger.info(f"Updated report {report.id}: {sorted(update_data)}")
    return ReportRead.model_validate(report)


@router.post(
    "/reports/{report_id}/upload",
    response_model=ReportRead,
    summary="Replace Report File",
    description="Replace a report's file with a base64 data URL.",
    responses={
        400: {"description": "No file data provided or invalid format"},
        403: {"description": "Not authorized to upload to this report"},
        404: {"description": "Report not found"},
    },
)
async def upload_report_file(
    report_id: str,
    payload: ReportFileUpload,
    repos: ReposDep,
    user: CurrentUser,
    storage: ReportStorage = Depends(get_report_storage),
) -> ReportRead:
    """
    Replace a report file.

    - **file_data**: `data:<mime>;base64,<payload>`.
    - **file_type**: MIME type deciding the stored extension (PDF, DOCX, DOC, otherwise TXT).
    """
    report, _ = await _get_report_with_access(repos, user, report_id, "upload to")
    if not payload.file_data:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file data provided")
    try:
        data = decode_data_url(payload.file_data)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid file data format")

    extension = extension_for_file_type(payload.file_type, default="txt")
    filename = f"{report.report_type or 'report'}_{report.assessment_id}_{int(time.time() * 1000)}.{extension}"
    storage.write_bytes(filename, data)
    report.report_url = report_url(filename)
    report = await repos.reports.update(report)
    logger.info(f"Replaced file of report {report.id} with {filename} ({len(data)} bytes)")
    return ReportRead.model_validate(report)


@router.post(
    "/agencies/{agency_id}/reports/upload",
    response_model=ReportUploadResult,
    status_code=status.HTTP_201_CREATED,
    summary="Upload Agency Report",
    description="Upload an externally produced report for an agency. Administrators only.",
    responses={
        201: {"description": "Report uploaded"},
        400: {"description": "Missing file, invalid type, missing fields or file too large"},
        404: {"description": "Agency not found"},
    },
)
async def upload_agency_report(
    agency_id: str,
    repos: ReposDep,
    user: AdminUser,
    storage: ReportStorage = Depends(get_report_storage),
    report_file: Optional[UploadFile] = File(default=None),
    assessment_type: Optional[str] = Form(default=None),
    tier_level: Optional[int] = Form(default=None, ge=1, le=4),
    assessment_id: Optional[str] = Form(default=None),
    assessment_name: Optional[str] = Form(default=None),
    summary: Optional[str] = Form(default=None),
) -> ReportUploadResult:
    """
    Upload a report for an agency.

    Accepts PDF, DOCX, DOC and TXT files up to the configured size limit
    (10 MB by default). When **assessment_id** is given that assessment is
    marked completed; otherwise a completed assessment is created for the
    upload. Tier reports also set the agency's tier level.

    - **report_file**: The file.
    - **assessment_type**: `tier-assessment` or `gap-analysis`.
    - **tier_level**: Required for tier assessments.
    """
    agency = await repos.agencies.get_by_id(agency_id)
    if not agency:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Agency not found")
    if report_file is None or not report_file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file was uploaded. Please select a file to upload.",
        )
    if report_file.content_type not in UPLOAD_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid file type. Only PDF, DOCX, DOC, and TXT files are allowed.",
        )
    if not assessment_type:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required field: assessmentType")
    if assessment_type not in TYPE_LABELS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid assessment type. Must be tier-assessment or gap-analysis",
        )
    is_tier = assessment_type == AssessmentType.tier_assessment.value
    if is_tier and not tier_level:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required field: tierLevel (required for tier assessments)",
        )

    data = await report_file.read()
    if len(data) > storage.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File too large. Maximum size is {storage.max_upload_bytes // (1024 * 1024)}MB.",
        )

    assessment = await repos.assessments.get_by_id(assessment_id) if assessment_id else None
    if assessment_id and (assessment is None or assessment.agency_id != agency_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Assessment not found")

    extension = UPLOAD_EXTENSIONS[report_file.content_type]
    filename = f"{assessment_type}_report_{agency_id}_{int(time.time() * 1000)}.{extension}"
    storage.write_bytes(filename, data)
    try:
        report = await _record_uploaded_report(
            repos, agency, assessment, assessment_type, tier_level, assessment_name, summary, filename
        )
    except Exception as e:
        logger.error(f"Failed to record uploaded report {filename}: {str(e)}", exc_info=True)
        storage.remove(filename)
        raise

    logger.info(f"Admin {user.id} uploaded report {report.id} for agency {agency_id} ({len(data)} bytes)")
    return ReportUploadResult(report=ReportRead.model_validate(report), message="Report uploaded successfully")


async def _record_uploaded_report(
    repos: SqlRepoBundle,
    agency: Agency,
    assessment: Optional[Assessment],
    assessment_type: str,
    tier_level: Optional[int],
    assessment_name: Optional[str],
    summary: Optional[str],
    filename: str,
) -> Report:
    is_tier = assessment_type == AssessmentType.tier_assessment.value
    label = TYPE_LABELS[assessment_type]
    now = utc_now()
    if assessment is None:
        assessment = await repos.assessments.create(
            Assessment(
                agency_id=agency.id,
                name=assessment_name or f"{agency.name} {label} {now.month}/{now.day}/{now.year}",
                assessment_type=assessment_type,
                status=AssessmentStatus.completed.value,
                progress_percentage=100,
                completed_at=now,
                tier_level=tier_level if is_tier else None,
            )
        )
    else:
        assessment.status = AssessmentStatus.completed.value
        assessment.completed_at = assessment.completed_at or now
        if is_tier:
            assessment.tier_level = tier_level
        assessment = await repos.assessments.update(assessment)

    report = await repos.reports.create(
        Report(
            assessment_id=assessment.id,
            report_type=assessment_type,
            tier_level=tier_level if is_tier else None,
            report_url=report_url(filename),
            summary=summary or f"Official {label} Report for {agency.name}",
        )
    )
    if is_tier:
        agency.tier_level = tier_level
        await repos.agencies.update(agency)
        logger.info(f"Agency {agency.id} tier level set to {tier_level} from uploaded report")

    return report
