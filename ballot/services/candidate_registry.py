"""Ordered candidate collection with tallies."""

from __future__ import annotations

from ballot.schemas.election import Candidate
from ballot.utils.errors import InvalidCandidateError


class CandidateRegistry:
    """Candidates of a single election, keyed by sequential id.

    Not thread-safe on its own; the owning election serializes access.
    """

    def __init__(self) -> None:
        self._candidates: list[Candidate] = []

    def __len__(self) -> int:
        return len(self._candidates)

    def __contains__(self, candidate_id: object) -> bool:
        return isinstance(candidate_id, int) and 1 <= candidate_id <= len(self._candidates)

    def add(self, name: str) -> Candidate:
        """Append a candidate with the next id and a zero tally."""
        candidate = Candidate(id=len(self._candidates) + 1, name=name, vote_count=0)
        self._candidates.append(candidate)
        return candidate.model_copy()

    def get(self, candidate_id: int) -> Candidate:
        """Return a snapshot of one candidate."""
        return self._entry(candidate_id).model_copy()

    def all(self) -> list[Candidate]:
        """Return snapshots of every candidate in ascending id order."""
        return [candidate.model_copy() for candidate in self._candidates]

    def increment(self, candidate_id: int) -> int:
        """Add one vote to a candidate and return its new tally."""
        candidate = self._entry(candidate_id)
        candidate.vote_count += 1
        return candidate.vote_count

    def total_votes(self) -> int:
        return sum(candidate.vote_count for candidate in self._candidates)

    def tallies(self) -> dict[int, int]:
        """Return ``{candidate_id: vote_count}``."""
        return {candidate.id: candidate.vote_count for candidate in self._candidates}

    def _entry(self, candidate_id: int) -> Candidate:
        if candidate_id not in self:
            raise InvalidCandidateError(candidate_id)
        return self._candidates[candidate_id - 1]
