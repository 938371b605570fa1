# File: src/labportal/routers/assignment_router.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from ..db.session import get_db
from ..controllers import assignment_controller
from ..schemas.assignment import AssignmentCreate, AssignmentRead, AssignmentUpdate, DeleteResponse
from ..utils.dependencies import get_optional_identity

router = APIRouter(prefix="/assignments", tags=["Assignments"])


@router.get("", response_model=List[AssignmentRead])
def list_assignments(
    batch: Optional[str] = None,
    created_by: Optional[str] = Query(default=None, alias="createdBy"),
    db: Session = Depends(get_db),
):
    """All assignments, or only those of one batch (the student view)."""
    return assignment_controller.list_assignments(
        db, batch, created_by
    )


@router.get("/{assignment_id}", response_model=AssignmentRead)
def get_assignment(assignment_id: str, db: Session = Depends(get_db)):
    return assignment_controller.get_assignment(db, assignment_id)


@router.post("", response_model=AssignmentRead)
def create_assignment(
    payload: AssignmentCreate,
    db: Session = Depends(get_db),
    identity=Depends(get_optional_identity),
):
    return assignment_controller.create_assignment(db, payload, identity)


@router.put("/{assignment_id}", response_model=AssignmentRead)
def update_assignment(
    assignment_id: str,
    payload: AssignmentUpdate,
    db: Session = Depends(get_db),
    identity=Depends(get_optional_identity),
):
    """Merge the supplied fields over the stored assignment."""
    return assignment_controller.update_assignment(db, assignment_id, payload, identity)


@router.delete("/{assignment_id}", response_model=DeleteResponse)
def delete_assignment(
    assignment_id: str,
    db: Session = Depends(get_db),
    identity=Depends(get_optional_identity),
):
    assignment_controller.delete_assignment(db, assignment_id, identity)
    return {"success": True}
