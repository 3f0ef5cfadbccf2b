"""Notification schemas."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class NotificationType(str, Enum):
    """Kinds of events emitted on successful state changes."""

    ELECTION_CREATED = "ElectionCreated"
    CANDIDATE_ADDED = "CandidateAdded"
    PHASE_CHANGED = "PhaseChanged"
    VOTER_REGISTERED = "VoterRegistered"
    VOTE_CAST = "VoteCast"
    ELECTION_ENDED = "ElectionEnded"


class Notification(BaseModel):
    """A single emitted event."""

    seq: int
    type: NotificationType
    election_id: int
    payload: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
