from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from db import get_db
from models import ExamCode
from question_service import get_question_types, get_random_by_type
from schemas.questions import QuestionPublic, QuestionTypesOut

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get("/random", response_model=QuestionPublic)
def random_question(
    item_type: Optional[str] = Query(default=None, alias="type", description="e.g. read_aloud"),
    db: Session = Depends(get_db),
):
    if not item_type or not item_type.strip():
        raise HTTPException(status_code=400, detail='Query param "type" is required')

    q = get_random_by_type(db, item_type)
    if q is None:
        raise HTTPException(status_code=404, detail=f"No questions found for type: {item_type}")
    # response_model re-projects: only QuestionPublic fields ever leave
    return q


@router.get("/types", response_model=QuestionTypesOut)
def question_types(
    exam: ExamCode = Query(default=ExamCode.PTE),
    db: Session = Depends(get_db),
):
    return {"types": get_question_types(db, exam)}
