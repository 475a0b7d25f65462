import enum
from typing import Dict, Optional


class ErrorKind(str, enum.Enum):
    """Every failure an API operation can report."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    INTERNAL = "internal"


STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.INTERNAL: 500,
}

# Messages sent back to the caller. Validation errors carry their own message,
# the other kinds never echo internal detail.
PUBLIC_MESSAGES: Dict[ErrorKind, Optional[str]] = {
    ErrorKind.VALIDATION: None,
    ErrorKind.NOT_FOUND: "task not found",
    ErrorKind.UNAUTHORIZED: "invalid or missing token",
    ErrorKind.FORBIDDEN: "wrong credentials",
    ErrorKind.INTERNAL: "internal error",
}


class TodoAPIError(Exception):
    """Base class for errors raised by the store and the auth gate."""
    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)
        self.message = message or self.kind.value

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    @property
    def public_message(self) -> str:
        return PUBLIC_MESSAGES[self.kind] or self.message


class ValidationError(TodoAPIError):
    kind = ErrorKind.VALIDATION


class NotFoundError(TodoAPIError):
    kind = ErrorKind.NOT_FOUND


class UnauthorizedError(TodoAPIError):
    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(TodoAPIError):
    kind = ErrorKind.FORBIDDEN


class InternalError(TodoAPIError):
    kind = ErrorKind.INTERNAL
