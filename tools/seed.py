#!/usr/bin/env python
"""Seed exams, PTE sections and the sample questions.

Run from the project root: ``python -m tools.seed``. Exams and sections are
upserted; a sample question is skipped when an identical one (same exam,
item type and content) already exists.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from db import SessionLocal
from models import Exam, ExamCode, Question, Section
from question_service import create_question
from questions import EXAMS, PTE_SECTIONS, SAMPLE_QUESTIONS
from registry import validate_payloads
from schemas.questions import QuestionCreate

logger = logging.getLogger("exam-practice.seed")


def _ensure_exams(db: Session) -> None:
    for e in EXAMS:
        if db.get(Exam, ExamCode(e["code"])) is None:
            logger.info("creating exam %s", e["code"])
            db.add(Exam(code=ExamCode(e["code"]), title=e["title"]))
    db.commit()


def _ensure_sections(db: Session) -> dict:
    by_title = {}
    for s in PTE_SECTIONS:
        sec = db.execute(
            select(Section).where(Section.exam_code == ExamCode.PTE, Section.title == s["title"])
        ).scalar_one_or_none()
        if sec is None:
            logger.info("creating PTE section %s", s["title"])
            sec = Section(exam_code=ExamCode.PTE, title=s["title"], order=s["order"])
            db.add(sec)
            db.flush()
        by_title[sec.title] = sec.id
    db.commit()
    return by_title


def _exists(db: Session, exam_code: ExamCode, item_type: str, content: dict) -> bool:
    rows = db.execute(
        select(Question.content).where(Question.exam_code == exam_code, Question.item_type == item_type)
    ).scalars()
    return any(c == content for c in rows)


def seed(db: Session) -> int:
    """Returns the number of questions inserted."""
    _ensure_exams(db)
    sections = _ensure_sections(db)

    inserted = 0
    for raw in SAMPLE_QUESTIONS:
        exam_code = ExamCode(raw["exam_code"])
        # compare normalized content so defaults do not defeat the duplicate check
        content, _ = validate_payloads(raw["item_type"], raw["content"], raw["scoring_rubric"])
        if _exists(db, exam_code, raw["item_type"], content):
            continue
        create_question(
            db,
            QuestionCreate(
                exam_code=exam_code,
                section_id=sections.get(raw["section"]),
                item_type=raw["item_type"],
                content=raw["content"],
                scoring_rubric=raw["scoring_rubric"],
                difficulty=raw["difficulty"],
            ),
        )
        inserted += 1
    return inserted


def main():
    logging.basicConfig(level=logging.INFO)
    with SessionLocal() as db:
        n = seed(db)
    print(f"Seed complete: {n} question(s) inserted")


if __name__ == "__main__":
    main()
