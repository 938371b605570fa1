# File: src/labportal/routers/auth_router.py

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..db.session import get_db
from ..controllers import auth_controller
from ..schemas.user import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter(tags=["Authentication"])


@router.post("/register", response_model=AuthResponse, summary="Create a student or teacher account")
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    return auth_controller.register(db, payload)


@router.post("/login", response_model=AuthResponse, summary="Log in and receive a bearer token")
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    return auth_controller.login(db, payload)
