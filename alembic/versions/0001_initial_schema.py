"""initial schema: exams, sections, questions, sessions, scores

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 10:12:41.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0001_initial"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# created explicitly below so several tables can share one type
exam_code = postgresql.ENUM("PTE", "IELTS", name="exam_code", create_type=False)
user_role = postgresql.ENUM("student", "teacher", "admin", name="user_role", create_type=False)
session_mode = postgresql.ENUM("practice", "mock_test", name="session_mode", create_type=False)
session_status = postgresql.ENUM(
    "in_progress", "completed", "evaluated", name="session_status", create_type=False
)
evaluation_status = postgresql.ENUM(
    "pending", "processing", "evaluated", "failed", name="evaluation_status", create_type=False
)
ENUMS = (exam_code, user_role, session_mode, session_status, evaluation_status)

JSONType = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")
EMPTY_JSON = sa.text("'{}'")


def _ts(name: str, nullable: bool = True) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=nullable)


def upgrade() -> None:
    bind = op.get_bind()
    for enum_type in ENUMS:
        enum_type.create(bind, checkfirst=True)  # no-op without native enums (sqlite)

    op.create_table(
        "tenants",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("domain", sa.Text(), nullable=True, unique=True),
        sa.Column("settings", JSONType, server_default=EMPTY_JSON, nullable=False),
        _ts("created_at"),
    )
    op.create_table(
        "profiles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("tenant_id", sa.Uuid(), sa.ForeignKey("tenants.id"), nullable=True),
        sa.Column("role", user_role, server_default="student", nullable=False),
        sa.Column("full_name", sa.Text(), nullable=True),
        sa.Column("target_score", sa.Integer(), nullable=True),
        _ts("created_at"),
    )
    op.create_table(
        "exams",
        sa.Column("code", exam_code, primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
    )
    op.create_table(
        "sections",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("exam_code", exam_code, sa.ForeignKey("exams.code"), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.UniqueConstraint("exam_code", "order", name="uq_sections_exam_code_order"),
    )
    op.create_table(
        "questions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("exam_code", exam_code, sa.ForeignKey("exams.code"), nullable=False),
        sa.Column("section_id", sa.Uuid(), sa.ForeignKey("sections.id"), nullable=True),
        sa.Column("item_type", sa.Text(), nullable=False),
        sa.Column("content", JSONType, server_default=EMPTY_JSON, nullable=False),
        sa.Column("scoring_rubric", JSONType, server_default=EMPTY_JSON, nullable=False),
        sa.Column("difficulty", sa.Integer(), server_default="5", nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        _ts("created_at"),
    )
    op.create_index("ix_questions_exam_code_item_type", "questions", ["exam_code", "item_type"])

    # rubric-free projection for clients that read the database directly
    op.execute(
        "CREATE VIEW questions_public AS "
        "SELECT id, exam_code, section_id, item_type, content, difficulty, is_active, created_at "
        "FROM questions"
    )

    op.create_table(
        "attempt_sessions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("profiles.id"), nullable=True),
        sa.Column("exam_code", exam_code, sa.ForeignKey("exams.code"), nullable=True),
        sa.Column("mode", session_mode, server_default="practice", nullable=False),
        sa.Column("status", session_status, server_default="in_progress", nullable=False),
        _ts("started_at"),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_table(
        "responses",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("session_id", sa.Uuid(), sa.ForeignKey("attempt_sessions.id"), nullable=False),
        sa.Column("question_id", sa.Uuid(), sa.ForeignKey("questions.id"), nullable=False),
        sa.Column("question_order", sa.Integer(), nullable=False),
        sa.Column("user_answer", JSONType, nullable=False),
        sa.Column("ai_feedback", JSONType, nullable=True),
        sa.Column("evaluation_status", evaluation_status, server_default="pending", nullable=False),
        sa.Column("score_obtained", sa.Numeric(5, 2), nullable=True),
        _ts("created_at"),
    )
    op.create_table(
        "scores_pte",
        sa.Column("session_id", sa.Uuid(), sa.ForeignKey("attempt_sessions.id"), primary_key=True),
        sa.Column("overall_score", sa.Integer(), nullable=True),
        *[
            sa.Column(name, sa.Integer(), nullable=True)
            for name in (
                "speaking",
                "writing",
                "reading",
                "listening",
                "fluency",
                "pronunciation",
                "grammar",
                "vocabulary",
                "spelling",
                "discourse",
            )
        ],
        _ts("generated_at"),
    )
    op.create_table(
        "scores_ielts",
        sa.Column("session_id", sa.Uuid(), sa.ForeignKey("attempt_sessions.id"), primary_key=True),
        *[
            sa.Column(name, sa.Numeric(2, 1), nullable=True)
            for name in (
                "overall_band",
                "listening_band",
                "reading_band",
                "writing_band",
                "speaking_band",
            )
        ],
        sa.Column("examiner_comments", JSONType, nullable=True),
        _ts("generated_at"),
    )


def downgrade() -> None:
    op.drop_table("scores_ielts")
    op.drop_table("scores_pte")
    op.drop_table("responses")
    op.drop_table("attempt_sessions")
    op.execute("DROP VIEW IF EXISTS questions_public")
    op.drop_index("ix_questions_exam_code_item_type", table_name="questions")
    op.drop_table("questions")
    op.drop_table("sections")
    op.drop_table("exams")
    op.drop_table("profiles")
    op.drop_table("tenants")
    bind = op.get_bind()
    for enum_type in reversed(ENUMS):
        enum_type.drop(bind, checkfirst=True)
