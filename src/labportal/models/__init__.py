# src/labportal/models/__init__.py

# Centralizes model imports so SQLModel's metadata knows every table
# before create_all() runs.

from .account import Student, Teacher
from .assignment import Assignment
from .submission import Submission
from .enums import Role, Batch, Language, TimeComplexity, SpaceComplexity

__all__ = [
    "Student",
    "Teacher",
    "Assignment",
    "Submission",
    "Role",
    "Batch",
    "Language",
    "TimeComplexity",
    "SpaceComplexity",
]
