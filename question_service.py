# services/practice/question_service.py
"""Read boundary between the questions table and the API.

Every public read selects the explicit column allow-list ``PUBLIC_COLUMNS``;
``scoring_rubric`` is never loaded on those paths, whatever the item type.
Storage errors are not caught here.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from models import ExamCode, Question
from registry import validate_payloads
from schemas.questions import QuestionCreate, QuestionUpdate

logger = logging.getLogger(__name__)

PUBLIC_COLUMNS = (
    Question.id,
    Question.exam_code,
    Question.section_id,
    Question.item_type,
    Question.content,
    Question.difficulty,
)


# ---------- Public reads ----------


def get_random_by_type(db: Session, item_type: str) -> Optional[Dict[str, Any]]:
    # ORDER BY random() LIMIT 1 scans every matching row; fine at question-bank scale
    stmt = (
        select(*PUBLIC_COLUMNS)
        .where(Question.item_type == item_type, Question.is_active.is_(True))
        .order_by(func.random())
        .limit(1)
    )
    row = db.execute(stmt).mappings().first()
    if row is None:
        logger.info("no active question for item_type=%r", item_type)
        return None
    return dict(row)


def get_question_types(db: Session, exam_code: ExamCode = ExamCode.PTE) -> List[str]:
    stmt = select(Question.item_type).where(Question.exam_code == exam_code).distinct()
    return list(db.execute(stmt).scalars().all())


# ---------- Authoring (admin only) ----------


def get_question(db: Session, question_id: uuid.UUID) -> Optional[Question]:
    """Full row, rubric included. Never hand this to a test-taker route."""
    return db.get(Question, question_id)


def create_question(db: Session, data: QuestionCreate) -> Question:
    # raises UnregisteredItemType / PayloadValidationError before anything is written
    content, rubric = validate_payloads(data.item_type, data.content, data.scoring_rubric)
    q = Question(
        exam_code=data.exam_code,
        section_id=data.section_id,
        item_type=data.item_type,
        content=content,
        scoring_rubric=rubric,
        difficulty=data.difficulty,
        is_active=data.is_active,
    )
    db.add(q)
    db.commit()
    db.refresh(q)
    logger.info("created question id=%s item_type=%s", q.id, q.item_type)
    return q


def update_question(db: Session, question_id: uuid.UUID, changes: QuestionUpdate) -> Optional[Question]:
    q = db.get(Question, question_id)
    if q is None:
        return None

    fields = changes.model_dump(exclude_unset=True)
    if "content" in fields or "scoring_rubric" in fields:
        # revalidate the pair together; a new content may not fit the old rubric
        content, rubric = validate_payloads(
            q.item_type,
            fields.get("content", q.content),
            fields.get("scoring_rubric", q.scoring_rubric),
        )
        q.content = content
        q.scoring_rubric = rubric

    if "section_id" in fields:
        q.section_id = fields["section_id"]
    for name in ("difficulty", "is_active"):
        if fields.get(name) is not None:
            setattr(q, name, fields[name])

    db.commit()
    db.refresh(q)
    logger.info("updated question id=%s fields=%s", q.id, sorted(fields))
    return q
