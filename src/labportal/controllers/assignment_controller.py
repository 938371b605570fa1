# File: src/labportal/controllers/assignment_controller.py

import logging
from typing import List, Optional

from sqlmodel import Session

from ..db import store
from ..models.assignment import Assignment
from ..schemas.assignment import AssignmentCreate, AssignmentUpdate
from ..utils.dependencies import Identity, ensure_teacher
from ..utils.errors import PermissionDeniedError

logger = logging.getLogger(__name__)


def _ensure_owner(assignment: Assignment, identity: Optional[Identity]):
    """403 if a teacher token is present and belongs to someone else."""
    ensure_teacher(identity)
    if identity is not None and identity.email != assignment.created_by:
        raise PermissionDeniedError("🚫 Only the teacher who created this assignment can change it.")


def list_assignments(
    db: Session, batch: Optional[str] = None, created_by: Optional[str] = None
) -> List[Assignment]:
    filters = []
    if batch:
        filters.append(Assignment.batch == batch)
    if created_by:
        filters.append(Assignment.created_by == created_by)
    return store.assignments.all(db, *filters)


def get_assignment(db: Session, assignment_id: str) -> Assignment:
    return store.assignments.get(db, assignment_id)


def create_assignment(
    db: Session, payload: AssignmentCreate, identity: Optional[Identity] = None
) -> Assignment:
    ensure_teacher(identity)
    if identity is not None and identity.email != payload.created_by:
        raise PermissionDeniedError("🚫 Assignments can only be published under your own account.")
    assignment = Assignment(
        subject_code=payload.subject_code,
        batch=payload.batch.value,
        assignment_number=payload.assignment_number,
        questions=[q.model_dump(by_alias=True, mode="json") for q in payload.questions],
        created_by=payload.created_by,
    )
    assignment = store.assignments.insert(db, assignment)
    logger.info(
        f"Assignment {assignment.id} created: {assignment.subject_code} #{assignment.assignment_number} "
        f"for batch {assignment.batch} by {assignment.created_by}"
    )
    return assignment


def update_assignment(
    db: Session, assignment_id: str, payload: AssignmentUpdate, identity: Optional[Identity] = None
) -> Assignment:
    assignment = store.assignments.get(db, assignment_id)
    _ensure_owner(assignment, identity)

    changes = {}
    for key, value in payload.model_dump(exclude_unset=True).items():
        if value is None:
            continue
        if key == "questions":
            value = [q.model_dump(by_alias=True, mode="json") for q in payload.questions]
        elif key == "batch":
            value = payload.batch.value
        changes[key] = value

    assignment = store.assignments.update(db, assignment_id, changes)
    logger.info(f"Assignment {assignment_id} updated fields: {sorted(changes)}")
    return assignment


def delete_assignment(db: Session, assignment_id: str, identity: Optional[Identity] = None) -> None:
    # Submissions pointing at this assignment are left in place
    assignment = store.assignments.get(db, assignment_id)
    _ensure_owner(assignment, identity)
    store.assignments.delete(db, assignment_id)
    logger.info(f"Assignment {assignment_id} deleted")
