from decimal import Decimal

from models import (
    AttemptSession,
    EvaluationStatus,
    ExamCode,
    Response,
    ScorePte,
    SessionMode,
    SessionStatus,
)


def test_response_references_question(db, add_question):
    q = add_question("read_aloud")
    session = AttemptSession(exam_code=ExamCode.PTE)
    db.add(session)
    db.flush()
    db.add(
        Response(
            session_id=session.id,
            question_id=q.id,
            question_order=1,
            user_answer={"audio_url": "s3://bucket/a.webm"},
            score_obtained=Decimal("72.50"),
        )
    )
    db.add(ScorePte(session_id=session.id, overall_score=72, speaking=70))
    db.commit()

    resp = db.query(Response).filter(Response.session_id == session.id).one()
    assert resp.question_id == q.id
    assert resp.evaluation_status is EvaluationStatus.pending
    assert session.mode is SessionMode.practice
    assert session.status is SessionStatus.in_progress
    assert db.get(ScorePte, session.id).overall_score == 72
