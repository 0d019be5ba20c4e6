"""
API error types.

Every error is an HTTPException so FastAPI can raise it from dependencies and
services alike; the handlers in main.py render them as the failure envelope.
"""

from typing import Any, Optional

from fastapi import HTTPException


class UnauthorizedError(HTTPException):
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


class ValidationError(HTTPException):
    """Schema violation; details is a list of {path, message} entries"""

    def __init__(
        self,
        details: Optional[list[dict[str, Any]]] = None,
        detail: str = "Validation error",
    ):
        super().__init__(status_code=400, detail=detail)
        self.details = details or []

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(details=[{"path": [field], "message": message}])


class NotFoundError(HTTPException):
    """Missing resource, or one owned by another user (deliberately indistinguishable)"""

    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=404, detail=detail)


class UnexpectedError(HTTPException):
    def __init__(self, detail: str = "Internal server error"):
        super().__init__(status_code=500, detail=detail)
