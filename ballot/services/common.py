"""Shared guards used by the election services."""

from __future__ import annotations

from datetime import datetime

from ballot.schemas.election import Phase
from ballot.utils.errors import (
    AccessDeniedError,
    InvalidInputError,
    InvalidPhaseError,
    WindowClosedError,
)
from ballot.utils.time import within

Principal = str


def ensure_text(value: str, field: str) -> None:
    """Raise InvalidInputError when ``value`` is missing or blank."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(f"{field} cannot be empty")


def ensure_admin(caller: Principal, admin: Principal, reason: str | None = None) -> None:
    """Raise AccessDeniedError unless ``caller`` is the election admin."""
    if caller != admin:
        if reason is None:
            raise AccessDeniedError()
        raise AccessDeniedError(reason)


def ensure_phase(current: Phase, required: Phase, action: str) -> None:
    """Raise InvalidPhaseError unless the election sits in ``required``."""
    if current != required:
        raise InvalidPhaseError(action, current.label)


def ensure_within(moment: datetime, start: datetime, end: datetime, window: str) -> None:
    """Raise WindowClosedError when ``moment`` falls outside [start, end]."""
    if not within(moment, start, end):
        raise WindowClosedError(window)
