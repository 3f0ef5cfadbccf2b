"""Notification service."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable
from typing import Any

from ballot.config import settings
from ballot.schemas.notification import Notification, NotificationType
from ballot.utils.time import Clock, SystemClock

logger = logging.getLogger(__name__)

Subscriber = Callable[[Notification], None]


class NotificationService:
    """Record emitted events and fan them out to subscribers.

    Every notification gets a global, strictly increasing ``seq``. Callers
    publish while holding their election lock, so notifications for one
    election are recorded and delivered in mutation order.
    """

    def __init__(self, clock: Clock | None = None, max_entries: int | None = None) -> None:
        self.clock = clock or SystemClock()
        limit = settings.notification_history_max_entries if max_entries is None else max_entries
        self._history: deque[Notification] = deque(maxlen=max(1, limit))
        self._subscribers: dict[int, Subscriber] = {}
        self._next_seq = 1
        self._next_token = 1
        self._lock = threading.RLock()

    def create_notification(
        self,
        election_id: int,
        notification_type: NotificationType,
        payload: dict[str, Any] | None = None,
    ) -> Notification:
        """Record a notification and deliver it to every subscriber."""
        with self._lock:
            notification = Notification(
                seq=self._next_seq,
                type=notification_type,
                election_id=election_id,
                payload=payload or {},
                created_at=self.clock.now(),
            )
            self._next_seq += 1
            self._history.append(notification)
            subscribers = list(self._subscribers.values())

        for callback in subscribers:
            self._deliver(callback, notification)
        return notification

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` and return a function that unsubscribes it."""
        with self._lock:
            token = self._next_token
            self._next_token += 1
            self._subscribers[token] = callback

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers.pop(token, None)

        return unsubscribe

    def list_notifications(
        self,
        election_id: int | None = None,
        after: int = 0,
        limit: int = 50,
    ) -> list[Notification]:
        """Return retained notifications with ``seq > after`` in emission order."""
        with self._lock:
            rows = [
                notification
                for notification in self._history
                if notification.seq > after
                and (election_id is None or notification.election_id == election_id)
            ]
        return rows[: max(0, limit)]

    @property
    def last_seq(self) -> int:
        with self._lock:
            return self._next_seq - 1

    def close(self) -> None:
        """Drop all subscribers."""
        with self._lock:
            dropped = len(self._subscribers)
            self._subscribers.clear()
        logger.info("Notification service closed (%d subscribers dropped)", dropped)

    @staticmethod
    def _deliver(callback: Subscriber, notification: Notification) -> None:
        try:
            callback(notification)
        except Exception:
            logger.exception(
                "Subscriber failed on notification %s (%s)",
                notification.seq,
                notification.type.value,
            )
