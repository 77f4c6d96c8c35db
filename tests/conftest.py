import os
import tempfile

# must be set before db.py is imported anywhere
_TMP_DIR = tempfile.mkdtemp(prefix="exam-practice-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR}/test.db"
os.environ["ADMIN_TOKEN"] = "test-admin-token"

import pytest  # noqa: E402

import models  # noqa: E402,F401
from db import Base, SessionLocal, engine  # noqa: E402
from models import Exam, ExamCode, Question  # noqa: E402

ADMIN_HEADERS = {"x-admin-token": "test-admin-token"}


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(engine)
    with SessionLocal() as db:
        db.add_all(
            [
                Exam(code=ExamCode.PTE, title="Pearson Test of English"),
                Exam(code=ExamCode.IELTS, title="IELTS"),
            ]
        )
        db.commit()
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture
def db():
    with SessionLocal() as session:
        yield session


@pytest.fixture
def add_question(db):
    """Insert a question row directly, bypassing the registry (store-level write)."""

    def _add(item_type="read_aloud", exam_code=ExamCode.PTE, is_active=True, **kw):
        q = Question(
            exam_code=exam_code,
            item_type=item_type,
            content=kw.pop("content", {"text": "Hello world", "time_limit": 40, "prep_time": 25}),
            scoring_rubric=kw.pop("scoring_rubric", {"transcript": "Hello world", "keywords": ["hello"]}),
            is_active=is_active,
            **kw,
        )
        db.add(q)
        db.commit()
        db.refresh(q)
        return q

    return _add


def find_key(obj, key):
    """True if `key` appears as a dict key anywhere inside `obj`."""
    if isinstance(obj, dict):
        return key in obj or any(find_key(v, key) for v in obj.values())
    if isinstance(obj, list):
        return any(find_key(v, key) for v in obj)
    return False
