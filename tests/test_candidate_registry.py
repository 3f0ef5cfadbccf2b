"""Candidate registry tests."""

from __future__ import annotations

import pytest

from ballot.services.candidate_registry import CandidateRegistry
from ballot.utils.errors import InvalidCandidateError


def test_ids_are_sequential_from_one() -> None:
    """Ids should follow call order with no gaps."""
    registry = CandidateRegistry()
    names = ["Alice", "Bob", "Carol"]
    ids = [registry.add(name).id for name in names]

    assert ids == [1, 2, 3]
    assert [candidate.name for candidate in registry.all()] == names
    assert all(candidate.vote_count == 0 for candidate in registry.all())


def test_snapshots_do_not_alias_internal_state() -> None:
    """Mutating a returned candidate must not change the registry."""
    registry = CandidateRegistry()
    registry.add("Alice")

    snapshot = registry.get(1)
    snapshot.vote_count = 99
    registry.all()[0].vote_count = 42

    assert registry.get(1).vote_count == 0


def test_increment_updates_tallies() -> None:
    """Each increment should add exactly one vote."""
    registry = CandidateRegistry()
    registry.add("Alice")
    registry.add("Bob")

    registry.increment(2)
    assert registry.increment(2) == 2
    assert registry.tallies() == {1: 0, 2: 2}
    assert registry.total_votes() == 2


@pytest.mark.parametrize("candidate_id", [0, -1, 3, 99])
def test_unknown_ids_are_rejected(candidate_id: int) -> None:
    """Ids outside 1..count should raise InvalidCandidateError."""
    registry = CandidateRegistry()
    registry.add("Alice")
    registry.add("Bob")

    assert candidate_id not in registry
    with pytest.raises(InvalidCandidateError):
        registry.get(candidate_id)
    with pytest.raises(InvalidCandidateError):
        registry.increment(candidate_id)
    assert registry.total_votes() == 0
