"""Service package exports with lazy loading."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS = {
    "CandidateRegistry": "ballot.services.candidate_registry",
    "Election": "ballot.services.election_service",
    "ElectionRegistry": "ballot.services.registry_service",
    "NotificationService": "ballot.services.notification_service",
    "VoterRegistry": "ballot.services.voter_registry",
}

__all__ = sorted(_EXPORTS.keys())


def __getattr__(name: str) -> Any:
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module = import_module(_EXPORTS[name])
    return getattr(module, name)
