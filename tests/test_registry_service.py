"""Election registry tests."""

from __future__ import annotations

import threading
from datetime import UTC, datetime, timedelta

import pytest

from ballot.schemas.election import Phase
from ballot.schemas.notification import Notification, NotificationType
from ballot.services.registry_service import ElectionRegistry
from ballot.utils.errors import InvalidInputError, NotFoundError

NOW = datetime(2026, 1, 1, tzinfo=UTC)


def test_create_allocates_sequential_ids(registry: ElectionRegistry) -> None:
    """Ids start at 1 and increase densely."""
    first_id, first = registry.create("alice", "A", "first", 10, 10, NOW)
    second_id, second = registry.create("bob", "B", "second", 10, 10, NOW)

    assert (first_id, second_id) == (1, 2)
    assert registry.count() == 2
    assert registry.get(1) is first
    assert registry.get(2) is second
    assert [election.id for election in registry.all()] == [1, 2]


def test_creator_becomes_admin(registry: ElectionRegistry) -> None:
    """The creating principal administers the new election."""
    _, election = registry.create("alice", "Title", "Desc", 10, 10, NOW)
    assert election.admin == "alice"
    assert election.get_phase() is Phase.CREATED


def test_durations_accept_timedelta(registry: ElectionRegistry) -> None:
    """Durations may be given as timedelta."""
    _, election = registry.create(
        "alice", "Title", "Desc", timedelta(hours=1), timedelta(hours=2), NOW
    )
    windows = election.get_time_windows()
    assert windows.voting_start == NOW + timedelta(hours=1)
    assert windows.voting_end == NOW + timedelta(hours=3)


@pytest.mark.parametrize(
    ("title", "description", "registration", "voting"),
    [
        ("", "desc", 10, 10),
        ("  ", "desc", 10, 10),
        ("title", "", 10, 10),
        ("title", "desc", 0, 10),
        ("title", "desc", 10, 0),
        ("title", "desc", -5, 10),
        ("title", "desc", 10, timedelta(seconds=-1)),
    ],
)
def test_create_rejects_invalid_input(
    registry: ElectionRegistry,
    title: str,
    description: str,
    registration: int,
    voting: int,
) -> None:
    """Invalid input must not consume an id or emit an event."""
    with pytest.raises(InvalidInputError):
        registry.create("alice", title, description, registration, voting, NOW)

    assert registry.count() == 0
    assert registry.notifications.list_notifications() == []

    election_id, _ = registry.create("alice", "ok", "ok", 1, 1, NOW)
    assert election_id == 1


@pytest.mark.parametrize("election_id", [0, -1, 2, 100])
def test_get_unknown_id(registry: ElectionRegistry, election_id: int) -> None:
    """Unknown or out-of-range ids raise NotFoundError."""
    registry.create("alice", "A", "first", 10, 10, NOW)
    with pytest.raises(NotFoundError):
        registry.get(election_id)


def test_create_emits_election_created(registry: ElectionRegistry) -> None:
    """Creation should be observable."""
    registry.create("alice", "A", "first", 10, 10, NOW)
    (notification,) = registry.notifications.list_notifications()

    assert notification.type is NotificationType.ELECTION_CREATED
    assert notification.election_id == 1
    assert notification.payload == {"admin": "alice", "title": "A"}


def test_elections_are_isolated(registry: ElectionRegistry) -> None:
    """Work in one election never shows up in another."""
    _, first = registry.create("alice", "A", "first", 100, 100, NOW)
    _, second = registry.create("alice", "B", "second", 100, 100, NOW)

    first.add_candidate("alice", "X")
    first.start_registration("alice")

    assert second.get_phase() is Phase.CREATED
    assert second.get_all_candidates() == []


def test_service_package_exports_lazily() -> None:
    """The services package should re-export classes on attribute access."""
    import ballot.services as services

    assert services.ElectionRegistry is ElectionRegistry
    assert "Election" in services.__all__
    with pytest.raises(AttributeError):
        services.NoSuchService  # noqa: B018


def test_subscribers_may_read_the_registry(registry: ElectionRegistry) -> None:
    """Reacting to ElectionCreated by reading the registry must not block."""
    seen: list[tuple[int, str, int, Phase]] = []

    def refresh(notification: Notification) -> None:
        election = registry.get(notification.election_id)
        seen.append(
            (election.id, election.title, registry.count(), election.get_phase())
        )
        registry.all()

    registry.notifications.subscribe(refresh)
    worker = threading.Thread(
        target=registry.create, args=("alice", "A", "first", 10, 10, NOW), daemon=True
    )
    worker.start()
    worker.join(timeout=3)

    assert not worker.is_alive()
    assert seen == [(1, "A", 1, Phase.CREATED)]
    registry.create("bob", "B", "second", 10, 10, NOW)
    assert [entry[0] for entry in seen] == [1, 2]


@pytest.mark.parametrize(
    ("registration", "voting"),
    [
        (10**12, 10),
        (10, 10**12),
        (10**20, 10),
        (timedelta.max, 10),
    ],
)
def test_create_rejects_durations_past_the_date_range(
    registry: ElectionRegistry, registration: int, voting: int
) -> None:
    """Windows that cannot be represented are invalid input."""
    with pytest.raises(InvalidInputError):
        registry.create("alice", "title", "desc", registration, voting, NOW)
    assert registry.count() == 0
