from __future__ import annotations

import enum
import uuid
from datetime import UTC, datetime
from decimal import Decimal

import sqlalchemy as sa
from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, Numeric, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from db import Base

# JSONB on Postgres, plain JSON elsewhere (sqlite in dev/tests)
JSONType = JSON().with_variant(JSONB(), "postgresql")


def _now() -> datetime:
    return datetime.now(UTC)


def _pg_enum(enum_cls: type[enum.Enum], name: str) -> sa.Enum:
    return sa.Enum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e])


class ExamCode(str, enum.Enum):
    PTE = "PTE"
    IELTS = "IELTS"


class UserRole(str, enum.Enum):
    student = "student"
    teacher = "teacher"
    admin = "admin"


class SessionMode(str, enum.Enum):
    practice = "practice"
    mock_test = "mock_test"


class SessionStatus(str, enum.Enum):
    in_progress = "in_progress"
    completed = "completed"
    evaluated = "evaluated"


class EvaluationStatus(str, enum.Enum):
    pending = "pending"
    processing = "processing"
    evaluated = "evaluated"
    failed = "failed"


# ---------- Identity ----------


class Tenant(Base):
    __tablename__ = "tenants"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text)
    domain: Mapped[str | None] = mapped_column(Text, unique=True, nullable=True)
    settings: Mapped[dict] = mapped_column(JSONType, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)


class Profile(Base):
    __tablename__ = "profiles"
    # same id as the auth provider's user
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    tenant_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("tenants.id"), nullable=True)
    role: Mapped[UserRole] = mapped_column(_pg_enum(UserRole, "user_role"), default=UserRole.student)
    full_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    target_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)


# ---------- Content ----------


class Exam(Base):
    __tablename__ = "exams"
    code: Mapped[ExamCode] = mapped_column(_pg_enum(ExamCode, "exam_code"), primary_key=True)
    title: Mapped[str] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)


class Section(Base):
    __tablename__ = "sections"
    __table_args__ = (sa.UniqueConstraint("exam_code", "order", name="uq_sections_exam_code_order"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    exam_code: Mapped[ExamCode] = mapped_column(
        _pg_enum(ExamCode, "exam_code"), ForeignKey("exams.code")
    )
    title: Mapped[str] = mapped_column(Text)
    order: Mapped[int] = mapped_column(Integer)


class Question(Base):
    __tablename__ = "questions"
    __table_args__ = (sa.Index("ix_questions_exam_code_item_type", "exam_code", "item_type"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    exam_code: Mapped[ExamCode] = mapped_column(
        _pg_enum(ExamCode, "exam_code"), ForeignKey("exams.code")
    )
    section_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("sections.id"), nullable=True)
    # open-ended discriminator ("read_aloud", "fib_dropdown", ...), no enum on purpose
    item_type: Mapped[str] = mapped_column(Text)
    content: Mapped[dict] = mapped_column(JSONType, default=dict)  # public
    scoring_rubric: Mapped[dict] = mapped_column(JSONType, default=dict)  # private: never serve
    difficulty: Mapped[int] = mapped_column(Integer, default=5)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)


# ---------- Attempts & scoring (owned by the sessions service) ----------


class AttemptSession(Base):
    __tablename__ = "attempt_sessions"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID | None] = mapped_column(ForeignKey("profiles.id"), nullable=True)
    exam_code: Mapped[ExamCode | None] = mapped_column(
        _pg_enum(ExamCode, "exam_code"), ForeignKey("exams.code"), nullable=True
    )
    mode: Mapped[SessionMode] = mapped_column(
        _pg_enum(SessionMode, "session_mode"), default=SessionMode.practice
    )
    status: Mapped[SessionStatus] = mapped_column(
        _pg_enum(SessionStatus, "session_status"), default=SessionStatus.in_progress
    )
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)


class Response(Base):
    __tablename__ = "responses"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("attempt_sessions.id"))
    question_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("questions.id"))
    question_order: Mapped[int] = mapped_column(Integer)
    user_answer: Mapped[dict] = mapped_column(JSONType)
    ai_feedback: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    evaluation_status: Mapped[EvaluationStatus] = mapped_column(
        _pg_enum(EvaluationStatus, "evaluation_status"), default=EvaluationStatus.pending
    )
    score_obtained: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)


class ScorePte(Base):
    __tablename__ = "scores_pte"
    session_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("attempt_sessions.id"), primary_key=True
    )
    overall_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    # communicative skills
    speaking: Mapped[int | None] = mapped_column(Integer, nullable=True)
    writing: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reading: Mapped[int | None] = mapped_column(Integer, nullable=True)
    listening: Mapped[int | None] = mapped_column(Integer, nullable=True)
    # enabling skills
    fluency: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pronunciation: Mapped[int | None] = mapped_column(Integer, nullable=True)
    grammar: Mapped[int | None] = mapped_column(Integer, nullable=True)
    vocabulary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    spelling: Mapped[int | None] = mapped_column(Integer, nullable=True)
    discourse: Mapped[int | None] = mapped_column(Integer, nullable=True)
    generated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)


class ScoreIelts(Base):
    __tablename__ = "scores_ielts"
    session_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("attempt_sessions.id"), primary_key=True
    )
    overall_band: Mapped[Decimal | None] = mapped_column(Numeric(2, 1), nullable=True)
    listening_band: Mapped[Decimal | None] = mapped_column(Numeric(2, 1), nullable=True)
    reading_band: Mapped[Decimal | None] = mapped_column(Numeric(2, 1), nullable=True)
    writing_band: Mapped[Decimal | None] = mapped_column(Numeric(2, 1), nullable=True)
    speaking_band: Mapped[Decimal | None] = mapped_column(Numeric(2, 1), nullable=True)
    examiner_comments: Mapped[dict | None] = mapped_column(JSONType, nullable=True)
    generated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)
