from sqlalchemy import func, select

from models import ExamCode, Question, Section
from question_service import get_question_types
from questions import SAMPLE_QUESTIONS
from tools.seed import seed


def test_seed_inserts_samples_once(db):
    assert seed(db) == len(SAMPLE_QUESTIONS)
    assert seed(db) == 0

    n = db.execute(select(func.count()).select_from(Question)).scalar_one()
    assert n == len(SAMPLE_QUESTIONS)
    orders = db.execute(select(Section.order).where(Section.exam_code == ExamCode.PTE)).scalars()
    assert sorted(orders) == [1, 2, 3]


def test_seeded_questions_have_defaults_and_sections(db):
    seed(db)
    assert sorted(get_question_types(db, ExamCode.PTE)) == ["fib_dropdown", "read_aloud"]
    assert get_question_types(db, ExamCode.IELTS) == []
    for q in db.execute(select(Question).where(Question.item_type == "read_aloud")).scalars():
        assert q.content["time_limit"] == 40
        assert q.content["prep_time"] == 25
        assert q.section_id is not None
