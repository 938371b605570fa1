# File location: src/labportal/utils/dependencies.py
from dataclasses import dataclass
from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from ..models.enums import Role
from .errors import AuthError, PermissionDeniedError
from .security import decode_access_token

# Tokens are optional: requests without one keep the open contract
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login", auto_error=False)


@dataclass
class Identity:
    email: str
    role: Role


async def get_optional_identity(
    token: Annotated[Optional[str], Depends(oauth2_scheme)],
) -> Optional[Identity]:
    """
    Identity from a bearer token in the Authorization header, or None
    when the request carries no token.
    """
    if not token:
        return None
    payload = decode_access_token(token)
    email = payload.get("sub")
    role = payload.get("role")
    if not email or role not in (Role.STUDENT.value, Role.TEACHER.value):
        raise AuthError("Could not validate credentials")
    return Identity(email=email, role=Role(role))


def ensure_teacher(identity: Optional[Identity]) -> None:
    """Reject student tokens on teacher-only actions."""
    if identity is not None and identity.role != Role.TEACHER:
        raise PermissionDeniedError("Teacher access required.")
