# File location: src/labportal/schemas/user.py
from pydantic import EmailStr
from typing import Optional

from ..models.enums import Batch, Role
from .base import CamelModel


class RegisterRequest(CamelModel):
    # Optional so a missing field is reported as 400 by the controller
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[Role] = None
    name: Optional[str] = None
    batch: Optional[Batch] = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str
    role: Role


class UserRead(CamelModel):
    id: str
    email: EmailStr
    role: Role
    name: Optional[str] = None
    batch: Optional[Batch] = None


class AuthResponse(CamelModel):
    user: UserRead
    token: str
    token_type: str = "bearer"
