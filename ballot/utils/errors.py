"""Custom exception hierarchy for the election engine."""

from __future__ import annotations


class AppError(Exception):
    """Base application error with a stable machine-readable code."""

    def __init__(self, message: str, code: str, status_code: int = 400) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        """Serialize the error in the API standard shape."""
        return {"error": self.message, "code": self.code}


class InvalidInputError(AppError):
    """Raised for malformed arguments or request payloads."""

    def __init__(self, reason: str) -> None:
        super().__init__(message=reason, code="INVALID_INPUT", status_code=422)


class NotFoundError(AppError):
    """Raised when a requested election does not exist."""

    def __init__(self, resource: str) -> None:
        super().__init__(message=f"{resource} not found", code="NOT_FOUND", status_code=404)


class UnauthorizedError(AppError):
    """Raised when the caller did not identify itself."""

    def __init__(self, reason: str = "Unauthorized") -> None:
        super().__init__(message=reason, code="UNAUTHORIZED", status_code=401)


class AccessDeniedError(AppError):
    """Raised when a non-admin attempts an admin-only action."""

    def __init__(self, reason: str = "Only the election admin can do this") -> None:
        super().__init__(message=reason, code="ACCESS_DENIED", status_code=403)


class InvalidPhaseError(AppError):
    """Raised when an operation is not valid in the current phase."""

    def __init__(self, action: str, phase: str) -> None:
        super().__init__(
            message=f"Cannot {action} while election is in phase {phase}",
            code="INVALID_PHASE",
            status_code=409,
        )


class WindowClosedError(AppError):
    """Raised when a time-gated operation happens outside its window."""

    def __init__(self, window: str) -> None:
        super().__init__(
            message=f"The {window} window is closed",
            code="WINDOW_CLOSED",
            status_code=409,
        )


class AlreadyRegisteredError(AppError):
    """Raised when a participant registers twice."""

    def __init__(self) -> None:
        super().__init__(
            message="You are already registered",
            code="ALREADY_REGISTERED",
            status_code=409,
        )


class AlreadyVotedError(AppError):
    """Raised when a participant votes twice."""

    def __init__(self) -> None:
        super().__init__(message="You have already voted", code="ALREADY_VOTED", status_code=409)


class NotRegisteredError(AppError):
    """Raised when an unregistered participant tries to vote."""

    def __init__(self) -> None:
        super().__init__(
            message="You are not registered for this election",
            code="NOT_REGISTERED",
            status_code=403,
        )


class InvalidCandidateError(AppError):
    """Raised for candidate ids outside the allocated range."""

    def __init__(self, candidate_id: int) -> None:
        super().__init__(
            message=f"Candidate {candidate_id} does not exist",
            code="INVALID_CANDIDATE",
            status_code=404,
        )


class NoCandidatesError(AppError):
    """Raised when voting would start with an empty ballot."""

    def __init__(self) -> None:
        super().__init__(
            message="Cannot start voting without candidates",
            code="NO_CANDIDATES",
            status_code=409,
        )
