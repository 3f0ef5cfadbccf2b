"""Election schemas."""

from datetime import datetime
from enum import IntEnum

from pydantic import BaseModel, Field


class Phase(IntEnum):
    """Election lifecycle phase, in the only order it may advance."""

    CREATED = 0
    REGISTRATION = 1
    VOTING = 2
    ENDED = 3

    @property
    def label(self) -> str:
        return self.name.title()


class Candidate(BaseModel):
    """A candidate on the ballot together with its running tally."""

    id: int
    name: str
    vote_count: int = 0


class VoterRecord(BaseModel):
    """Registration and voting status of one principal."""

    principal: str
    is_registered: bool = False
    has_voted: bool = False


class TimeWindows(BaseModel):
    """Registration and voting windows, both closed intervals."""

    registration_start: datetime
    registration_end: datetime
    voting_start: datetime
    voting_end: datetime


class ElectionSummary(BaseModel):
    """Read-only view of an election."""

    id: int
    title: str
    description: str
    admin: str
    phase: Phase
    phase_name: str
    windows: TimeWindows
    candidate_count: int
    total_votes: int
    registered_voters: int
    voters_voted: int
    created_at: datetime


class ElectionCreate(BaseModel):
    """Request body for creating an election.

    Durations are in seconds.
    """

    title: str
    description: str
    registration_duration: int
    voting_duration: int


class CandidateCreate(BaseModel):
    """Request body for adding a candidate."""

    name: str


class VoteCreate(BaseModel):
    """Request body for casting a vote."""

    candidate_id: int = Field(..., description="Id of the chosen candidate")
