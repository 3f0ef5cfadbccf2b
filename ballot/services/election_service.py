"""Election phase state machine."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import Any

from ballot.schemas.election import Candidate, ElectionSummary, Phase, TimeWindows, VoterRecord
from ballot.schemas.notification import NotificationType
from ballot.services.candidate_registry import CandidateRegistry
from ballot.services.common import (
    Principal,
    ensure_admin,
    ensure_phase,
    ensure_text,
    ensure_within,
)
from ballot.services.notification_service import NotificationService
from ballot.services.voter_registry import VoterRegistry
from ballot.utils.errors import InvalidCandidateError, InvalidInputError, NoCandidatesError
from ballot.utils.time import as_duration

logger = logging.getLogger(__name__)


def compute_windows(
    now: datetime,
    registration_duration: timedelta | int | float,
    voting_duration: timedelta | int | float,
) -> TimeWindows:
    """Lay out back-to-back registration and voting windows starting at ``now``.

    Raises:
        InvalidInputError: if either duration is zero or negative, or the
            windows would run past the largest representable date.
    """
    try:
        registration = as_duration(registration_duration)
        voting = as_duration(voting_duration)
    except OverflowError as exc:
        raise InvalidInputError("Duration is too large") from exc
    if registration <= timedelta(0):
        raise InvalidInputError("Registration duration must be positive")
    if voting <= timedelta(0):
        raise InvalidInputError("Voting duration must be positive")

    try:
        registration_end = now + registration
        voting_end = registration_end + voting
    except OverflowError as exc:
        raise InvalidInputError("Election windows run past the supported date range") from exc
    return TimeWindows(
        registration_start=now,
        registration_end=registration_end,
        voting_start=registration_end,
        voting_end=voting_end,
    )


class Election:
    """One election and everything it owns.

    Every mutating call runs under the instance lock: checks happen first
    (authorization, then phase, then window, then business rules) and state is
    only touched once all of them pass, so a rejected call changes nothing.
    Reads take the same lock and return copies. ``lock`` is re-entrant, so
    subscribers may read the election from inside a delivery.
    """

    def __init__(
        self,
        election_id: int,
        admin: Principal,
        title: str,
        description: str,
        windows: TimeWindows,
        notifications: NotificationService,
        created_at: datetime,
    ) -> None:
        self.id = election_id
        self.admin = admin
        self.title = title
        self.description = description
        self.created_at = created_at
        self.notifications = notifications
        self._windows = windows
        self._phase = Phase.CREATED
        self._candidates = CandidateRegistry()
        self._voters = VoterRegistry()
        self.lock = threading.RLock()

    # -- admin actions -----------------------------------------------------

    def add_candidate(self, caller: Principal, name: str) -> Candidate:
        """Put a new candidate on the ballot (admin, Created only)."""
        with self.lock:
            ensure_admin(caller, self.admin, "Only the election admin can add candidates")
            ensure_phase(self._phase, Phase.CREATED, "add candidates")
            ensure_text(name, "Candidate name")

            candidate = self._candidates.add(name)
            self._emit(
                NotificationType.CANDIDATE_ADDED,
                {"candidate_id": candidate.id, "name": candidate.name},
            )
            logger.info("Election %s: candidate %s added (%s)", self.id, candidate.id, name)
            return candidate

    def start_registration(self, caller: Principal) -> Phase:
        """Open registration. Not tied to the wall clock."""
        with self.lock:
            ensure_admin(caller, self.admin, "Only the election admin can start registration")
            ensure_phase(self._phase, Phase.CREATED, "start registration")
            return self._transition(caller, Phase.REGISTRATION)

    def start_voting(self, caller: Principal) -> Phase:
        """Open voting.

        The registration window is intentionally not checked: the admin may
        move on before it elapses.
        """
        with self.lock:
            ensure_admin(caller, self.admin, "Only the election admin can start voting")
            ensure_phase(self._phase, Phase.REGISTRATION, "start voting")
            if not len(self._candidates):
                raise NoCandidatesError()
            return self._transition(caller, Phase.VOTING)

    def end_election(self, caller: Principal) -> Phase:
        """Close the election for good. The voting window is not checked."""
        with self.lock:
            ensure_admin(caller, self.admin, "Only the election admin can end the election")
            ensure_phase(self._phase, Phase.VOTING, "end the election")
            phase = self._transition(caller, Phase.ENDED)
            self._emit(
                NotificationType.ELECTION_ENDED,
                {
                    "tallies": {str(key): value for key, value in self._candidates.tallies().items()},
                    "total_votes": self._candidates.total_votes(),
                },
            )
            return phase

    # -- participant actions ----------------------------------------------

    def register_voter(self, caller: Principal, now: datetime) -> VoterRecord:
        """Register ``caller`` as a voter during the registration window."""
        with self.lock:
            ensure_phase(self._phase, Phase.REGISTRATION, "register")
            ensure_within(
                now,
                self._windows.registration_start,
                self._windows.registration_end,
                "registration",
            )
            record = self._voters.register(caller)
            self._emit(NotificationType.VOTER_REGISTERED, {"voter": caller})
            logger.info("Election %s: voter %s registered", self.id, caller)
            return record

    def vote(self, caller: Principal, candidate_id: int, now: datetime) -> Candidate:
        """Cast ``caller``'s single vote and return the updated candidate."""
        with self.lock:
            ensure_phase(self._phase, Phase.VOTING, "vote")
            ensure_within(now, self._windows.voting_start, self._windows.voting_end, "voting")
            self._voters.ensure_can_vote(caller)
            if candidate_id not in self._candidates:
                raise InvalidCandidateError(candidate_id)

            self._voters.mark_voted(caller)
            vote_count = self._candidates.increment(candidate_id)
            self._emit(
                NotificationType.VOTE_CAST,
                {"voter": caller, "candidate_id": candidate_id, "vote_count": vote_count},
            )
            logger.info("Election %s: vote cast for candidate %s", self.id, candidate_id)
            return self._candidates.get(candidate_id)

    # -- reads ---------------------------------------------------------------

    def get_phase(self) -> Phase:
        with self.lock:
            return self._phase

    def get_all_candidates(self) -> list[Candidate]:
        with self.lock:
            return self._candidates.all()

    def get_candidate(self, candidate_id: int) -> Candidate:
        with self.lock:
            return self._candidates.get(candidate_id)

    def get_time_windows(self) -> TimeWindows:
        return self._windows.model_copy()

    def get_voter(self, principal: Principal) -> VoterRecord:
        with self.lock:
            return self._voters.get(principal)

    def summary(self) -> ElectionSummary:
        """Return a consistent snapshot of the election's public state."""
        with self.lock:
            return ElectionSummary(
                id=self.id,
                title=self.title,
                description=self.description,
                admin=self.admin,
                phase=self._phase,
                phase_name=self._phase.label,
                windows=self._windows.model_copy(),
                candidate_count=len(self._candidates),
                total_votes=self._candidates.total_votes(),
                registered_voters=self._voters.registered_count(),
                voters_voted=self._voters.voted_count(),
                created_at=self.created_at,
            )

    # -- internals -----------------------------------------------------------

    def _transition(self, caller: Principal, target: Phase) -> Phase:
        previous = self._phase
        self._phase = target
        self._emit(
            NotificationType.PHASE_CHANGED,
            {"from": previous.label, "to": target.label, "by": caller},
        )
        logger.info("Election %s: %s -> %s", self.id, previous.label, target.label)
        return target

    def _emit(self, notification_type: NotificationType, payload: dict[str, Any]) -> None:
        self.notifications.create_notification(self.id, notification_type, payload)
