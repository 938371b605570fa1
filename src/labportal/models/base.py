# base.py
import uuid
from sqlmodel import SQLModel, Field


def new_id() -> str:
    return uuid.uuid4().hex


class Record(SQLModel):
    """Columns shared by every stored collection."""

    id: str = Field(default_factory=new_id, primary_key=True)
    # Insertion order, assigned by the record store
    seq: int = Field(default=0, index=True)
