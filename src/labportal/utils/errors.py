# File location: src/labportal/utils/errors.py
from fastapi import status


class PortalError(Exception):
    """Base class for errors the API layer turns into JSON responses."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PortalError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthError(PortalError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class PermissionDeniedError(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You are not allowed to perform this action"


class DuplicateAccountError(AuthError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "User already exists"


class NotFoundError(PortalError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StorageError(PortalError):
    default_message = "Storage failure"


# --- Execution gateway ---

class ExecutionError(PortalError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Execution failed"


class UnsupportedLanguageError(ExecutionError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported language: {language}")


class RuntimeNotFoundError(ExecutionError):
    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Runtime not found for {language}")
