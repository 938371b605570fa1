import pytest

from src.labportal.db import store
from src.labportal.models import Assignment, Submission
from src.labportal.utils.errors import NotFoundError


def make_submission(email="s@example.com", question_id="q1"):
    return Submission(
        student_email=email,
        subject_code="CS501",
        assignment_number=1,
        question_id=question_id,
        code="print(1)",
        language="Python",
        time_complexity="O(1)",
        space_complexity="O(1)",
    )


def test_collections_registry():
    assert set(store.COLLECTIONS) == {"students", "teachers", "assignments", "submissions"}


def test_insert_keeps_insertion_order(db):
    first = store.submissions.insert(db, make_submission(question_id="a"))
    second = store.submissions.insert(db, make_submission(question_id="b"))
    third = store.submissions.insert(db, make_submission(question_id="c"))

    assert first.seq < second.seq < third.seq
    assert [s.question_id for s in store.submissions.all(db)] == ["a", "b", "c"]


def test_ids_are_unique_strings(db):
    a = store.submissions.insert(db, make_submission())
    b = store.submissions.insert(db, make_submission())
    assert isinstance(a.id, str) and a.id != b.id


def test_all_with_filter(db):
    store.submissions.insert(db, make_submission(email="one@example.com"))
    store.submissions.insert(db, make_submission(email="two@example.com"))
    found = store.submissions.all(db, Submission.student_email == "two@example.com")
    assert [s.student_email for s in found] == ["two@example.com"]


def test_update_changes_only_given_fields(db):
    sub = store.submissions.insert(db, make_submission())
    updated = store.submissions.update(db, sub.id, {"score": 4})
    assert updated.score == 4
    assert updated.code == "print(1)"


def test_get_unknown_id(db):
    with pytest.raises(NotFoundError, match="Submission not found"):
        store.submissions.get(db, "missing")


def test_delete_unknown_id_leaves_collection_unchanged(db):
    store.assignments.insert(
        db, Assignment(subject_code="CS501", batch="X", assignment_number=1, questions=[], created_by="t@example.com")
    )
    with pytest.raises(NotFoundError):
        store.assignments.delete(db, "nope")
    assert len(store.assignments.all(db)) == 1
