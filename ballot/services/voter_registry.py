"""Per-election participant registration and voting status."""

from __future__ import annotations

from ballot.schemas.election import VoterRecord
from ballot.services.common import Principal
from ballot.utils.errors import AlreadyRegisteredError, AlreadyVotedError, NotRegisteredError


class VoterRegistry:
    """Registration/voting flags per principal.

    Both flags only ever move from False to True. Records are created on the
    first successful registration; unknown principals read as unregistered.
    Not thread-safe on its own; the owning election serializes access.
    """

    def __init__(self) -> None:
        self._records: dict[Principal, VoterRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def get(self, principal: Principal) -> VoterRecord:
        """Return a snapshot of the principal's record."""
        record = self._records.get(principal)
        if record is None:
            return VoterRecord(principal=principal)
        return record.model_copy()

    def ensure_can_register(self, principal: Principal) -> None:
        record = self._records.get(principal)
        if record is not None and record.is_registered:
            raise AlreadyRegisteredError()

    def register(self, principal: Principal) -> VoterRecord:
        """Mark ``principal`` as registered."""
        self.ensure_can_register(principal)
        record = VoterRecord(principal=principal, is_registered=True)
        self._records[principal] = record
        return record.model_copy()

    def ensure_can_vote(self, principal: Principal) -> None:
        """Raise unless ``principal`` is registered and has not voted yet."""
        record = self._records.get(principal)
        if record is None or not record.is_registered:
            raise NotRegisteredError()
        if record.has_voted:
            raise AlreadyVotedError()

    def mark_voted(self, principal: Principal) -> VoterRecord:
        self.ensure_can_vote(principal)
        record = self._records[principal]
        record.has_voted = True
        return record.model_copy()

    def registered_count(self) -> int:
        return sum(1 for record in self._records.values() if record.is_registered)

    def voted_count(self) -> int:
        return sum(1 for record in self._records.values() if record.has_voted)
