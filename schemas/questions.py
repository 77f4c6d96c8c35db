# services/practice/schemas/questions.py
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models import ExamCode

# camelCase on the wire, snake_case in Python
_WIRE = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class QuestionPublic(BaseModel):
    """What a test-taker may see. Deliberately has no rubric field."""

    model_config = _WIRE
    id: uuid.UUID
    exam_code: ExamCode
    section_id: Optional[uuid.UUID] = None
    item_type: str
    content: Dict[str, Any]
    difficulty: int


class QuestionTypesOut(BaseModel):
    types: List[str]


# ---------- Admin / authoring ----------


class QuestionCreate(BaseModel):
    model_config = _WIRE
    exam_code: ExamCode
    section_id: Optional[uuid.UUID] = None
    item_type: str = Field(min_length=1)
    content: Dict[str, Any]
    scoring_rubric: Dict[str, Any]
    difficulty: int = Field(default=5, ge=1, le=10)
    is_active: bool = True


class QuestionUpdate(BaseModel):
    model_config = _WIRE
    section_id: Optional[uuid.UUID] = None
    content: Optional[Dict[str, Any]] = None
    scoring_rubric: Optional[Dict[str, Any]] = None
    difficulty: Optional[int] = Field(default=None, ge=1, le=10)
    is_active: Optional[bool] = None


class QuestionAdminOut(QuestionPublic):
    scoring_rubric: Dict[str, Any]
    is_active: bool
    created_at: Optional[datetime] = None
