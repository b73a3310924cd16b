"""Initial schema and seed data for SWAT Manager

Revision ID: 20260301_000000
Revises: None
Create Date: 2026-03-01 00:00:00.000000

This is the initial migration that creates all necessary tables and seeds default data
for the SWAT Manager service. This includes:
- Tenancy tables (agencies, users)
- Questionnaire tables (question categories, questions)
- Assessment tables (assessments, responses, reports)
- Tracking tables (personnel, equipment, events, trainings, certifications, missions,
  corrective actions, resources, messages)
- The official Tier Assessment and Gap Analysis questionnaires, the administrator
  account and the sample agencies

Revision format: YYYYMMDD_HHMMSS_description

"""

import uuid
from datetime import datetime, timezone
from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op
from swat_manager.core.security import hash_password
from swat_manager.core.seed.data import (
    ADMIN_FIRST_NAME,
    ADMIN_LAST_NAME,
    ADMIN_PERMISSIONS,
    CATEGORIES,
    SAMPLE_AGENCIES,
)
from swat_manager.server.core.config import settings

# revision identifiers, used by Alembic.
revision: str = "20260301_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _new_id() -> str:
    return str(uuid.uuid4())


def upgrade() -> None:
    """Create all tables and seed initial data."""

    # Create agencies table
    op.create_table(
        "agencies",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("jurisdiction", sa.String(255), nullable=False),
        sa.Column("population_served", sa.Integer(), nullable=True),
        sa.Column("operational_environment", sa.String(), nullable=True),
        sa.Column("swat_classification", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=True),
        sa.Column("contact_name", sa.String(255), nullable=False),
        sa.Column("contact_position", sa.String(), nullable=True),
        sa.Column("contact_email", sa.String(255), nullable=False),
        sa.Column("contact_phone", sa.String(), nullable=True),
        sa.Column("website", sa.String(), nullable=True),
        sa.Column("liaison_name", sa.String(), nullable=True),
        sa.Column("liaison_contact", sa.String(), nullable=True),
        sa.Column("sworn_officers", sa.Integer(), nullable=True),
        sa.Column("support_staff", sa.Integer(), nullable=True),
        sa.Column("total_swat_personnel", sa.Integer(), nullable=True),
        sa.Column("department_structure", sa.String(), nullable=True),
        sa.Column("personnel_gaps", sa.String(), nullable=True),
        sa.Column("mission_capabilities", sa.JSON(), nullable=True),
        sa.Column("equipment_status", sa.String(), nullable=True),
        sa.Column("required_equipment", sa.JSON(), nullable=True),
        sa.Column("training_status", sa.JSON(), nullable=True),
        sa.Column("training_gaps", sa.String(), nullable=True),
        sa.Column("access_status", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("last_assessment_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("evaluation_summary", sa.String(), nullable=True),
        sa.Column("paid_status", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("tier_level", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_agencies_contact_email", "agencies", ["contact_email"], unique=True)

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("first_name", sa.String(128), nullable=False),
        sa.Column("last_name", sa.String(128), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.String(16), nullable=False),
        sa.Column("agency_id", sa.String(64), nullable=True),
        sa.Column("permissions", sa.JSON(), nullable=False),
        sa.Column("interface_type", sa.String(16), nullable=False),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("preferences", sa.String(), nullable=True),
        sa.Column("profile_picture_url", sa.String(), nullable=True),
        sa.Column("premium_access", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["agency_id"], ["agencies.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_agency_id", "users", ["agency_id"])

    # Create question_categories table
    op.create_table(
        "question_categories",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    # Create questions table
    op.create_table(
        "questions",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("category_id", sa.String(64), nullable=False),
        sa.Column("text", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("order_index", sa.Integer(), nullable=False),
        sa.Column("impacts_tier", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("question_type", sa.String(16), nullable=False, server_default="boolean"),
        sa.Column("validation_rules", sa.JSON(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["category_id"], ["question_categories.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("category_id", "text", name="uq_questions_category_text"),
    )
    op.create_index("ix_questions_category_id", "questions", ["category_id"])

    # Create assessments table
    op.create_table(
        "assessments",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("agency_id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("assessment_type", sa.String(32), nullable=False, server_default="tier-assessment"),
        sa.Column("tier_level", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="in_progress"),
        sa.Column("progress_percentage", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("mission_profile", sa.String(), nullable=True),
        sa.Column("equipment_assessment", sa.JSON(), nullable=True),
        sa.Column("completion_status", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("gap_analysis", sa.String(), nullable=True),
        sa.Column("recommendations", sa.String(), nullable=True),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["agency_id"], ["agencies.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_assessments_agency_id", "assessments", ["agency_id"])

    # Create assessment_responses table
    op.create_table(
        "assessment_responses",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("assessment_id", sa.String(64), nullable=False),
        sa.Column("question_id", sa.String(64), nullable=False),
        sa.Column("response", sa.Boolean(), nullable=True),
        sa.Column("text_response", sa.String(), nullable=True),
        sa.Column("numeric_response", sa.Float(), nullable=True),
        sa.Column("select_response", sa.String(), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["assessment_id"], ["assessments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("assessment_id", "question_id", name="uq_assessment_responses_assessment_question"),
    )
    op.create_index("ix_assessment_responses_assessment_id", "assessment_responses", ["assessment_id"])

    # Create reports table
    op.create_table(
        "reports",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("assessment_id", sa.String(64), nullable=False),
        sa.Column("report_type", sa.String(32), nullable=False, server_default="tier-assessment"),
        sa.Column("tier_level", sa.Integer(), nullable=True),
        sa.Column("report_url", sa.String(), nullable=True),
        sa.Column("summary", sa.String(), nullable=True),
        sa.Column("generated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["assessment_id"], ["assessments.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_reports_assessment_id", "reports", ["assessment_id"])

    # Create personnel table
    op.create_table(
        "personnel",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("agency_id", sa.String(64), nullable=False),
        sa.Column("first_name", sa.String(128), nullable=False),
        sa.Column("last_name", sa.String(128), nullable=False),
        sa.Column("badge_number", sa.String(64), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("team", sa.String(), nullable=True),
        sa.Column("role", sa.String(), nullable=True),
        sa.Column("secondary_role", sa.String(), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="available"),
        sa.Column("certifications", sa.JSON(), nullable=False),
        sa.Column("specialties", sa.JSON(), nullable=False),
        sa.Column("fitness_score", sa.Integer(), nullable=True),
        sa.Column("last_evaluation", sa.DateTime(timezone=True), nullable=True),
        sa.Column("next_evaluation", sa.DateTime(timezone=True), nullable=True),
        sa.Column("assigned_equipment", sa.JSON(), nullable=False),
        sa.Column("emergency_contacts", sa.JSON(), nullable=False),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("active_status", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("team_leader", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["agency_id"], ["agencies.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("badge_number"),
    )
    op.create_index("ix_personnel_agency_id", "personnel", ["agency_id"])

    # Create equipment table
    op.create_table(
        "equipment",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("agency_id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("serial_number", sa.String(), nullable=True),
        sa.Column("category", sa.String(64), nullable=False),
        sa.Column("manufacturer", sa.String(), nullable=True),
        sa.Column("model", sa.String(), nullable=True),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("assigned_to_id", sa.String(64), nullable=True),
        sa.Column("purchase_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("condition", sa.String(16), nullable=False, server_default="good"),
        sa.Column("last_maintenance", sa.DateTime(timezone=True), nullable=True),
        sa.Column("next_maintenance", sa.DateTime(timezone=True), nullable=True),
        sa.Column("warranty_expiration", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="operational"),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("photo_url", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["agency_id"], ["agencies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["assigned_to_id"], ["personnel.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_equipment_agency_id", "equipment", ["agency_id"])

    # Create events table
    op.create_table(
        "events",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("start_time", sa.String(5), nullable=True),
        sa.Column("end_time", sa.String(5), nullable=True),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("event_type", sa.String(16), nullable=False, server_default="other"),
        sa.Column("priority", sa.String(8), nullable=False, server_default="medium"),
        sa.Column("status", sa.String(16), nullable=False, server_default="scheduled"),
        sa.Column("participants", sa.JSON(), nullable=False),
        sa.Column("required_equipment", sa.JSON(), nullable=False),
        sa.Column("training_objectives", sa.JSON(), nullable=False),
        sa.Column("agency_id", sa.String(64), nullable=True),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["agency_id"], ["agencies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_events_start_date", "events", ["start_date"])
    op.create_index("ix_events_agency_id", "events", ["agency_id"])
    op.create_index("ix_events_user_id", "events", ["user_id"])

    # Create trainings table
    op.create_table(
        "trainings",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("agency_id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("training_type", sa.String(16), nullable=False, server_default="tactical"),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("start_time", sa.String(5), nullable=True),
        sa.Column("end_time", sa.String(5), nullable=True),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("instructor", sa.String(), nullable=True),
        sa.Column("participants", sa.JSON(), nullable=False),
        sa.Column("required_equipment", sa.JSON(), nullable=False),
        sa.Column("training_objectives", sa.JSON(), nullable=False),
        sa.Column("prerequisites", sa.JSON(), nullable=False),
        sa.Column("priority", sa.String(8), nullable=False, server_default="medium"),
        sa.Column("status", sa.String(16), nullable=False, server_default="scheduled"),
        sa.Column("completion_status", sa.JSON(), nullable=False),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["agency_id"], ["agencies.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_trainings_agency_id", "trainings", ["agency_id"])

    # Create certifications table
    op.create_table(
        "certifications",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("issuing_authority", sa.String(), nullable=True),
        sa.Column("required_training", sa.JSON(), nullable=False),
        sa.Column("validity_period", sa.Integer(), nullable=True),
        sa.Column("renewal_requirements", sa.String(), nullable=True),
        sa.Column("agency_id", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["agency_id"], ["agencies.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_certifications_agency_id", "certifications", ["agency_id"])

    # Create personnel_certifications table
    op.create_table(
        "personnel_certifications",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("personnel_id", sa.String(64), nullable=False),
        sa.Column("certification_id", sa.String(64), nullable=False),
        sa.Column("issue_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expiry_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.String(24), nullable=False, server_default="active"),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["personnel_id"], ["personnel.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["certification_id"], ["certifications.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_personnel_certifications_personnel_id", "personnel_certifications", ["personnel_id"])

    # Create missions table
    op.create_table(
        "missions",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("agency_id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("mission_type", sa.String(24), nullable=False, server_default="other"),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("location", sa.String(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("priority", sa.String(8), nullable=False, server_default="medium"),
        sa.Column("risk_level", sa.String(16), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="planned"),
        sa.Column("team_size", sa.Integer(), nullable=True),
        sa.Column("team_lead", sa.String(64), nullable=True),
        sa.Column("team", sa.JSON(), nullable=False),
        sa.Column("equipment", sa.JSON(), nullable=False),
        sa.Column("objectives", sa.JSON(), nullable=False),
        sa.Column("tactical_plan", sa.String(), nullable=True),
        sa.Column("contingency_plans", sa.JSON(), nullable=False),
        sa.Column("attachments", sa.JSON(), nullable=False),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("after_action_report", sa.String(), nullable=True),
        sa.Column("response_time", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["agency_id"], ["agencies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["team_lead"], ["personnel.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_missions_agency_id", "missions", ["agency_id"])

    # Create corrective_actions table
    op.create_table(
        "corrective_actions",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("agency_id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("category", sa.String(16), nullable=False, server_default="other"),
        sa.Column("date_identified", sa.DateTime(timezone=True), nullable=False),
        sa.Column("target_completion_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("responsible_party", sa.String(64), nullable=True),
        sa.Column("priority", sa.String(8), nullable=False, server_default="medium"),
        sa.Column("status", sa.String(16), nullable=False, server_default="open"),
        sa.Column("action_plan", sa.JSON(), nullable=False),
        sa.Column("progress", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("completion_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("verification_method", sa.String(), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["agency_id"], ["agencies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["responsible_party"], ["personnel.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_corrective_actions_agency_id", "corrective_actions", ["agency_id"])

    # Create resources table
    op.create_table(
        "resources",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("agency_id", sa.String(64), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("category", sa.String(16), nullable=False, server_default="other"),
        sa.Column("file_url", sa.String(), nullable=True),
        sa.Column("file_type", sa.String(32), nullable=True),
        sa.Column("version", sa.String(32), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("uploaded_by", sa.String(64), nullable=True),
        sa.Column("upload_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("last_updated", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["agency_id"], ["agencies.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["uploaded_by"], ["users.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_resources_agency_id", "resources", ["agency_id"])

    # Create messages table
    op.create_table(
        "messages",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("subject", sa.String(255), nullable=False),
        sa.Column("content", sa.String(), nullable=False),
        sa.Column("recipient_id", sa.String(64), nullable=True),
        sa.Column("category", sa.String(16), nullable=False, server_default="general"),
        sa.Column("priority", sa.String(8), nullable=False, server_default="medium"),
        sa.Column("parent_message_id", sa.String(64), nullable=True),
        sa.Column("sender_id", sa.String(64), nullable=False),
        sa.Column("agency_id", sa.String(64), nullable=True),
        sa.Column("sent_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("read_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("archived", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["recipient_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["sender_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["agency_id"], ["agencies.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_messages_recipient_id", "messages", ["recipient_id"])
    op.create_index("ix_messages_sender_id", "messages", ["sender_id"])
    op.create_index("ix_messages_agency_id", "messages", ["agency_id"])

    # Seed the official questionnaires
    now = datetime.now(timezone.utc)
    category_table = sa.table(
        "question_categories",
        sa.column("id", sa.String),
        sa.column("name", sa.String),
        sa.column("description", sa.String),
        sa.column("order_index", sa.Integer),
        sa.column("created_at", sa.DateTime),
    )
    question_table = sa.table(
        "questions",
        sa.column("id", sa.String),
        sa.column("category_id", sa.String),
        sa.column("text", sa.String),
        sa.column("description", sa.String),
        sa.column("order_index", sa.Integer),
        sa.column("impacts_tier", sa.Boolean),
        sa.column("question_type", sa.String),
        sa.column("created_at", sa.DateTime),
    )
    category_rows = []
    question_rows = []
    for category in CATEGORIES:
        category_id = _new_id()
        category_rows.append(
            {
                "id": category_id,
                "name": category.name,
                "description": category.description,
                "order_index": category.order_index,
                "created_at": now,
            }
        )
        for order_index, question in enumerate(category.questions, start=1):
            question_rows.append(
                {
                    "id": _new_id(),
                    "category_id": category_id,
                    "text": question.text,
                    "description": question.description,
                    "order_index": order_index,
                    "impacts_tier": category.impacts_tier,
                    "question_type": question.question_type,
                    "created_at": now,
                }
            )
    op.bulk_insert(category_table, category_rows)
    op.bulk_insert(question_table, question_rows)

    # Seed the administrator account
    user_table = sa.table(
        "users",
        sa.column("id", sa.String),
        sa.column("first_name", sa.String),
        sa.column("last_name", sa.String),
        sa.column("email", sa.String),
        sa.column("role", sa.String),
        sa.column("permissions", sa.JSON),
        sa.column("interface_type", sa.String),
        sa.column("premium_access", sa.Boolean),
        sa.column("password_hash", sa.String),
        sa.column("created_at", sa.DateTime),
        sa.column("updated_at", sa.DateTime),
    )
    op.bulk_insert(
        user_table,
        [
            {
                "id": _new_id(),
                "first_name": ADMIN_FIRST_NAME,
                "last_name": ADMIN_LAST_NAME,
                "email": settings.admin_email,
                "role": "admin",
                "permissions": dict(ADMIN_PERMISSIONS),
                "interface_type": "assessment",
                "premium_access": False,
                "password_hash": hash_password(settings.admin_password),
                "created_at": now,
                "updated_at": now,
            }
        ],
    )

    # Seed the sample agencies
    agency_table = sa.table(
        "agencies",
        sa.column("id", sa.String),
        sa.column("name", sa.String),
        sa.column("jurisdiction", sa.String),
        sa.column("contact_name", sa.String),
        sa.column("contact_email", sa.String),
        sa.column("contact_phone", sa.String),
        sa.column("access_status", sa.Boolean),
        sa.column("paid_status", sa.Boolean),
        sa.column("created_at", sa.DateTime),
        sa.column("updated_at", sa.DateTime),
    )
    op.bulk_insert(
        agency_table,
        [
            {
                "id": _new_id(),
                "name": agency.name,
                "jurisdiction": agency.jurisdiction,
                "contact_name": agency.contact_name,
                "contact_email": agency.contact_email,
                "contact_phone": agency.contact_phone,
                "access_status": False,
                "paid_status": False,
                "created_at": now,
                "updated_at": now,
            }
            for agency in SAMPLE_AGENCIES
        ],
    )


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table("messages")
    op.drop_table("resources")
    op.drop_table("corrective_actions")
    op.drop_table("missions")
    op.drop_table("personnel_certifications")
    op.drop_table("certifications")
    op.drop_table("trainings")
    op.drop_table("events")
    op.drop_table("equipment")
    op.drop_table("personnel")
    op.drop_table("reports")
    op.drop_table("assessment_responses")
    op.drop_table("assessments")
    op.drop_table("questions")
    op.drop_table("question_categories")
    op.drop_table("users")
    op.drop_table("agencies")
