# File: src/labportal/routers/submission_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from ..db.session import get_db
from ..controllers import submission_controller
from ..schemas.submission import (
    SubmissionCreate,
    SubmissionDetail,
    SubmissionGrade,
    SubmissionRead,
    SubmissionStats,
)
from ..utils.dependencies import ensure_teacher, get_optional_identity

router = APIRouter(prefix="/submissions", tags=["Submissions"])


@router.get("", response_model=List[SubmissionRead])
def list_submissions(
    email: Optional[str] = None,
    role: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return submission_controller.list_submissions(db, email, role)


@router.get("/latest", response_model=SubmissionRead, summary="Submission to resume a question from")
def latest_submission(
    email: str,
    subject_code: str = Query(alias="subjectCode"),
    assignment_number: int = Query(alias="assignmentNumber"),
    question_id: str = Query(alias="questionId"),
    db: Session = Depends(get_db),
):
    return submission_controller.latest_submission(
        db, email, subject_code, assignment_number, question_id
    )


@router.get("/stats", response_model=SubmissionStats)
def submission_stats(email: Optional[str] = None, db: Session = Depends(get_db)):
    return submission_controller.submission_stats(db, email)


@router.get("/{submission_id}", response_model=SubmissionDetail)
def get_submission(submission_id: str, db: Session = Depends(get_db)):
    return submission_controller.get_submission_detail(db, submission_id)


@router.post("", response_model=SubmissionRead)
def create_submission(payload: SubmissionCreate, db: Session = Depends(get_db)):
    return submission_controller.submit(db, payload)


@router.put("/{submission_id}", response_model=SubmissionRead, summary="Grade a submission")
def grade_submission(
    submission_id: str,
    payload: SubmissionGrade,
    db: Session = Depends(get_db),
    identity=Depends(get_optional_identity),
):
    ensure_teacher(identity)
    return submission_controller.grade(db, submission_id, payload.score)
