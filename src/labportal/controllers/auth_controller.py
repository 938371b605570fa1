# File: src/labportal/controllers/auth_controller.py

import logging

from sqlmodel import Session

from ..db import store
from ..models.account import Student, Teacher
from ..models.enums import Batch, Role
from ..schemas.user import LoginRequest, RegisterRequest
from ..utils.errors import AuthError, DuplicateAccountError, ValidationError
from ..utils.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


def _collection(role: Role):
    return store.students if role == Role.STUDENT else store.teachers


def _auth_response(account, role: Role) -> dict:
    user = {
        "id": account.id,
        "email": account.email,
        "role": role,
        "name": getattr(account, "name", None),
        "batch": getattr(account, "batch", None),
    }
    token = create_access_token({"sub": account.email, "role": role.value})
    return {"user": user, "token": token}


def register(db: Session, payload: RegisterRequest) -> dict:
    if not payload.email or not payload.password or not payload.role:
        raise ValidationError("Missing fields")

    collection = _collection(payload.role)
    if collection.first(db, collection.model.email == payload.email):
        raise DuplicateAccountError("User already exists")

    if payload.role == Role.STUDENT:
        account = Student(
            email=payload.email,
            password_hash=hash_password(payload.password),
            batch=(payload.batch or Batch.X).value,
        )
    else:
        account = Teacher(
            email=payload.email,
            password_hash=hash_password(payload.password),
            name=payload.name,
        )
    account = collection.insert(db, account)
    logger.info(f"Registered {payload.role.value} {account.email}")
    return _auth_response(account, payload.role)


def login(db: Session, payload: LoginRequest) -> dict:
    collection = _collection(payload.role)
    account = collection.first(db, collection.model.email == payload.email)
    if not account or not verify_password(payload.password, account.password_hash):
        logger.warning(f"Failed login for {payload.role.value} {payload.email}")
        raise AuthError("Invalid credentials")
    return _auth_response(account, payload.role)
