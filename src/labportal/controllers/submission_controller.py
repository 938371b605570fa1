# File: src/labportal/controllers/submission_controller.py

import logging
from typing import List, Optional

from sqlmodel import Session

from ..db import store
from ..models.assignment import Assignment
from ..models.enums import Role
from ..models.submission import Submission
from ..schemas.submission import SubmissionCreate, SubmissionDetail
from ..utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 10
UNKNOWN_QUESTION = "Unknown"


def submit(db: Session, payload: SubmissionCreate) -> Submission:
    """
    Append a new ungraded submission.

    The referenced assignment/question is not checked, and earlier submissions
    for the same question are kept.
    """
    submission = Submission(
        student_email=payload.student_email,
        subject_code=payload.subject_code,
        assignment_number=payload.assignment_number,
        question_id=payload.question_id,
        code=payload.code,
        language=payload.language.value,
        input=payload.input,
        output=payload.output,
        time_complexity=payload.time_complexity.value,
        space_complexity=payload.space_complexity.value,
        score=None,
    )
    submission = store.submissions.insert(db, submission)
    logger.info(
        f"Submission {submission.id} by {submission.student_email} for "
        f"{submission.subject_code} #{submission.assignment_number} / {submission.question_id}"
    )
    return submission


def list_submissions(
    db: Session, email: Optional[str] = None, role: Optional[str] = None
) -> List[Submission]:
    # Teachers see every submission; students only their own
    if role == Role.STUDENT.value:
        return store.submissions.all(db, Submission.student_email == email)
    return store.submissions.all(db)


def _validate_score(score) -> int:
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ValidationError(f"Score must be an integer between {MIN_SCORE} and {MAX_SCORE}")
    if isinstance(score, float):
        if not score.is_integer():
            raise ValidationError(f"Score must be an integer between {MIN_SCORE} and {MAX_SCORE}")
        score = int(score)
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise ValidationError(f"Score must be an integer between {MIN_SCORE} and {MAX_SCORE}")
    return score


def grade(db: Session, submission_id: str, score) -> Submission:
    """Set (or overwrite) the score of a submission."""
    store.submissions.get(db, submission_id)
    value = _validate_score(score)
    submission = store.submissions.update(db, submission_id, {"score": value})
    logger.info(f"Submission {submission_id} graded {value}/{MAX_SCORE}")
    return submission


# --- Lookups by natural key ---

def find_question(
    db: Session, subject_code: str, assignment_number: int, question_id: str
) -> Optional[dict]:
    candidates = store.assignments.all(
        db,
        Assignment.subject_code == subject_code,
        Assignment.assignment_number == assignment_number,
    )
    for assignment in candidates:
        for question in assignment.questions:
            if question.get("id") == question_id:
                return question
    return None


def question_title(db: Session, subject_code: str, assignment_number: int, question_id: str) -> str:
    question = find_question(db, subject_code, assignment_number, question_id)
    if question is None:
        return UNKNOWN_QUESTION
    return question.get("title") or UNKNOWN_QUESTION


def get_submission_detail(db: Session, submission_id: str) -> SubmissionDetail:
    submission = store.submissions.get(db, submission_id)
    title = question_title(db, submission.subject_code, submission.assignment_number, submission.question_id)
    if title == UNKNOWN_QUESTION:
        logger.warning(f"Submission {submission_id} refers to a missing question {submission.question_id}")
    return SubmissionDetail.model_validate({**submission.model_dump(), "question_title": title})


def latest_submission(
    db: Session, email: str, subject_code: str, assignment_number: int, question_id: str
) -> Submission:
    """
    The submission a student resumes from when reopening a question:
    the newest by timestamp, later insertion winning ties.
    """
    matches = store.submissions.all(
        db,
        Submission.student_email == email,
        Submission.subject_code == subject_code,
        Submission.assignment_number == assignment_number,
        Submission.question_id == question_id,
    )
    if not matches:
        raise NotFoundError("No previous submission for this question")
    return max(matches, key=lambda s: (s.timestamp, s.seq))


def submission_stats(db: Session, email: Optional[str] = None) -> dict:
    filters = [Submission.student_email == email] if email else []
    records = store.submissions.all(db, *filters)
    graded = sum(1 for s in records if s.score is not None)
    return {"total": len(records), "graded": graded, "ungraded": len(records) - graded}
