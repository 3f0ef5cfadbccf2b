"""Election registry: id allocation, creation and lookup."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta

from ballot.schemas.notification import NotificationType
from ballot.services.common import Principal, ensure_text
from ballot.services.election_service import Election, compute_windows
from ballot.services.notification_service import NotificationService
from ballot.utils.errors import NotFoundError

logger = logging.getLogger(__name__)


class ElectionRegistry:
    """Own every election created in this process.

    Ids start at 1 and are handed out densely. The registry lock only covers
    id allocation and insertion; elections guard their own state.
    """

    def __init__(self, notifications: NotificationService | None = None) -> None:
        self.notifications = notifications or NotificationService()
        self._elections: dict[int, Election] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create(
        self,
        creator: Principal,
        title: str,
        description: str,
        registration_duration: timedelta | int | float,
        voting_duration: timedelta | int | float,
        now: datetime,
    ) -> tuple[int, Election]:
        """Create an election administered by ``creator``.

        Raises:
            InvalidInputError: for an empty title/description or a
                non-positive duration.
        """
        ensure_text(title, "Title")
        ensure_text(description, "Description")
        windows = compute_windows(now, registration_duration, voting_duration)

        with self._lock:
            election_id = self._next_id
            election = Election(
                election_id=election_id,
                admin=creator,
                title=title,
                description=description,
                windows=windows,
                notifications=self.notifications,
                created_at=now,
            )
            self._elections[election_id] = election
            self._next_id += 1
            # Held across the hand-off so ElectionCreated precedes every other
            # event of this election.
            election.lock.acquire()

        try:
            self.notifications.create_notification(
                election_id,
                NotificationType.ELECTION_CREATED,
                {"admin": creator, "title": title},
            )
        finally:
            election.lock.release()

        logger.info("Election %s created by %s", election_id, creator)
        return election_id, election

    def get(self, election_id: int) -> Election:
        """Return the election with ``election_id``."""
        with self._lock:
            election = self._elections.get(election_id)
        if election is None:
            raise NotFoundError("Election")
        return election

    def count(self) -> int:
        with self._lock:
            return self._next_id - 1

    def all(self) -> list[Election]:
        """Return every election in ascending id order."""
        with self._lock:
            return [self._elections[key] for key in sorted(self._elections)]

    def close(self) -> None:
        """Release subscribers at shutdown."""
        self.notifications.close()
