"""Election endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from ballot.config import settings
from ballot.dependencies import (
    get_clock,
    get_current_principal,
    get_election,
    get_notifications,
    get_registry,
)
from ballot.schemas.election import CandidateCreate, ElectionCreate, VoteCreate
from ballot.services.common import Principal
from ballot.services.election_service import Election
from ballot.services.notification_service import NotificationService
from ballot.services.registry_service import ElectionRegistry
from ballot.utils.time import Clock

router = APIRouter()


def _phase_payload(election: Election) -> dict:
    phase = election.get_phase()
    return {"phase": phase, "phase_name": phase.label}


@router.post("")
def create_election(
    payload: ElectionCreate,
    principal: Principal = Depends(get_current_principal),
    registry: ElectionRegistry = Depends(get_registry),
    clock: Clock = Depends(get_clock),
) -> dict:
    """Create a new election administered by the caller."""
    election_id, election = registry.create(
        creator=principal,
        title=payload.title,
        description=payload.description,
        registration_duration=payload.registration_duration,
        voting_duration=payload.voting_duration,
        now=clock.now(),
    )
    return {"id": election_id, "election": election.summary()}


@router.get("")
def list_elections(registry: ElectionRegistry = Depends(get_registry)) -> dict:
    """Return every election in creation order."""
    elections = [election.summary() for election in registry.all()]
    return {"elections": elections, "count": registry.count()}


@router.get("/{election_id}")
def get_election_summary(election: Election = Depends(get_election)) -> dict:
    """Return title, admin, phase, windows and totals for one election."""
    return {"election": election.summary()}


@router.get("/{election_id}/phase")
def get_phase(election: Election = Depends(get_election)) -> dict:
    """Return the current phase."""
    return _phase_payload(election)


@router.get("/{election_id}/windows")
def get_time_windows(election: Election = Depends(get_election)) -> dict:
    """Return registration and voting windows."""
    return {"windows": election.get_time_windows()}


@router.post("/{election_id}/candidates")
def add_candidate(
    payload: CandidateCreate,
    election: Election = Depends(get_election),
    principal: Principal = Depends(get_current_principal),
) -> dict:
    """Add a candidate (admin only, before registration opens)."""
    candidate = election.add_candidate(principal, payload.name)
    return {"candidate": candidate}


@router.get("/{election_id}/candidates")
def list_candidates(election: Election = Depends(get_election)) -> dict:
    """Return all candidates with tallies, ordered by id."""
    return {"candidates": election.get_all_candidates()}


@router.get("/{election_id}/candidates/{candidate_id}")
def get_candidate(candidate_id: int, election: Election = Depends(get_election)) -> dict:
    """Return one candidate with its tally."""
    return {"candidate": election.get_candidate(candidate_id)}


@router.post("/{election_id}/registration")
def start_registration(
    election: Election = Depends(get_election),
    principal: Principal = Depends(get_current_principal),
) -> dict:
    """Move the election from Created to Registration."""
    election.start_registration(principal)
    return _phase_payload(election)


@router.post("/{election_id}/voting")
def start_voting(
    election: Election = Depends(get_election),
    principal: Principal = Depends(get_current_principal),
) -> dict:
    """Move the election from Registration to Voting."""
    election.start_voting(principal)
    return _phase_payload(election)


@router.post("/{election_id}/end")
def end_election(
    election: Election = Depends(get_election),
    principal: Principal = Depends(get_current_principal),
) -> dict:
    """Close the election and freeze its tallies."""
    election.end_election(principal)
    return _phase_payload(election)


@router.post("/{election_id}/voters")
def register_voter(
    election: Election = Depends(get_election),
    principal: Principal = Depends(get_current_principal),
    clock: Clock = Depends(get_clock),
) -> dict:
    """Register the caller as a voter."""
    voter = election.register_voter(principal, clock.now())
    return {"voter": voter}


@router.get("/{election_id}/voters/me")
def get_own_voter_record(
    election: Election = Depends(get_election),
    principal: Principal = Depends(get_current_principal),
) -> dict:
    """Return the caller's registration and voting status."""
    return {"voter": election.get_voter(principal)}


@router.post("/{election_id}/votes")
def cast_vote(
    payload: VoteCreate,
    election: Election = Depends(get_election),
    principal: Principal = Depends(get_current_principal),
    clock: Clock = Depends(get_clock),
) -> dict:
    """Cast the caller's vote."""
    candidate = election.vote(principal, payload.candidate_id, clock.now())
    return {"candidate": candidate}


@router.get("/{election_id}/notifications")
def list_election_notifications(
    after: int = Query(default=0, ge=0),
    limit: int = Query(default=50, ge=1),
    election: Election = Depends(get_election),
    service: NotificationService = Depends(get_notifications),
) -> dict:
    """Return this election's events with ``seq`` greater than ``after``."""
    notifications = service.list_notifications(
        election_id=election.id,
        after=after,
        limit=min(limit, settings.notification_page_max_limit),
    )
    return {"notifications": notifications}
