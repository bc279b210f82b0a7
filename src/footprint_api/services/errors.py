"""Error taxonomy shared by the service layer.

Services raise these instead of ``HTTPException``; the application renders
them as ``{"error": ..., "kind": ...}`` with the matching status code.
"""

from __future__ import annotations

from fastapi import status


class FootprintError(RuntimeError):
    """Base exception for every reported service failure."""

    kind = "error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "kind": self.kind}


class ValidationError(FootprintError):
    """A required field is missing or malformed."""

    kind = "validation"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(FootprintError):
    """A slug or tile id does not resolve within the given scope."""

    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class ForbiddenError(FootprintError):
    """The caller's scope or ownership does not match the target."""

    kind = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class ConflictError(FootprintError):
    """A uniqueness constraint was violated."""

    kind = "conflict"
    status_code = status.HTTP_409_CONFLICT


class SerialConflictError(ConflictError):
    """Two registrations raced for the same serial or email.

    Raised instead of retrying so the registration path can decide whether to
    rerun the whole allocation.
    """


class UnavailableError(FootprintError):
    """The backing store could not be reached."""

    kind = "unavailable"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
