from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from db import get_db
from deps.auth import require_admin
from question_service import create_question, get_question, update_question
from registry import PayloadValidationError, UnregisteredItemType, registered_item_types
from schemas.questions import QuestionAdminOut, QuestionCreate, QuestionUpdate

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def _unprocessable(e: Exception) -> HTTPException:
    if isinstance(e, PayloadValidationError):
        return HTTPException(status_code=422, detail=e.errors)
    return HTTPException(
        status_code=422,
        detail=[
            {
                "loc": ["body", "itemType"],
                "msg": f"{e}; known types: {registered_item_types()}",
                "type": "unregistered_item_type",
            }
        ],
    )


@router.post("/questions", response_model=QuestionAdminOut, status_code=201)
def admin_create_question(payload: QuestionCreate, db: Session = Depends(get_db)):
    try:
        return create_question(db, payload)
    except (PayloadValidationError, UnregisteredItemType) as e:
        raise _unprocessable(e)


@router.get("/questions/{question_id}", response_model=QuestionAdminOut)
def admin_get_question(question_id: uuid.UUID, db: Session = Depends(get_db)):
    q = get_question(db, question_id)
    if not q:
        raise HTTPException(status_code=404, detail="question not found")
    return q


@router.patch("/questions/{question_id}", response_model=QuestionAdminOut)
def admin_update_question(
    question_id: uuid.UUID, changes: QuestionUpdate, db: Session = Depends(get_db)
):
    try:
        q = update_question(db, question_id, changes)
    except (PayloadValidationError, UnregisteredItemType) as e:
        raise _unprocessable(e)
    if not q:
        raise HTTPException(status_code=404, detail="question not found")
    return q
