# src/labportal/schemas/__init__.py

from .user import RegisterRequest, LoginRequest, UserRead, AuthResponse
from .assignment import (
    QuestionSchema, AssignmentCreate, AssignmentUpdate, AssignmentRead, DeleteResponse
)
from .submission import (
    SubmissionCreate, SubmissionRead, SubmissionDetail, SubmissionGrade, SubmissionStats
)
from .execution import ExecuteRequest, ExecuteResponse, LanguageRead
