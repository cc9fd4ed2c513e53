import logging
import threading
import uuid
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, NamedTuple

from django.conf import settings
from django.utils.module_loading import import_string

from tasklist.constants.task_list import TASK_LIST_ROOM_PREFIX

logger = logging.getLogger(__name__)

Subscriber = Callable[[str, Dict[str, Any]], None]


class Subscription(NamedTuple):
    user_id: str
    callback: Subscriber


def room_for_task_list(task_list_id: str) -> str:
    return f"{TASK_LIST_ROOM_PREFIX}{task_list_id}"


class NotificationChannel(ABC):
    """
    Fire-and-forget broadcast to the subscribers of a room.

    Every subscription belongs to a user, so a room can be narrowed to the users who
    may still see it. Delivery is best effort: ``publish`` never raises because a
    subscriber failed, and events carry no version, so a late subscriber cannot
    detect missed updates.
    """

    @abstractmethod
    def subscribe(self, room: str, user_id: str, callback: Subscriber) -> str:
        """Register ``callback`` of ``user_id`` for events published to ``room`` and return a subscription id."""

    @abstractmethod
    def unsubscribe(self, room: str, subscription_id: str) -> None:
        pass

    @abstractmethod
    def publish(
        self, event_name: str, payload: Dict[str, Any], room: str, recipients: Iterable[str] | None = None
    ) -> int:
        """
        Deliver the event to the room; returns how many subscribers received it.

        When ``recipients`` is given, only subscriptions of those users are called.
        """

    @abstractmethod
    def retain(self, room: str, user_ids: Iterable[str]) -> int:
        """Drop the room's subscriptions of anyone not in ``user_ids``; returns how many were dropped."""


class InMemoryNotificationChannel(NotificationChannel):
    def __init__(self):
        self._rooms: Dict[str, Dict[str, Subscription]] = {}
        self._lock = threading.Lock()

    def subscribe(self, room: str, user_id: str, callback: Subscriber) -> str:
        subscription_id = uuid.uuid4().hex
        with self._lock:
            self._rooms.setdefault(room, {})[subscription_id] = Subscription(user_id, callback)
        logger.debug(f"Subscription {subscription_id} of user {user_id} joined room {room}")
        return subscription_id

    def unsubscribe(self, room: str, subscription_id: str) -> None:
        with self._lock:
            subscriptions = self._rooms.get(room)
            if not subscriptions:
                return
            subscriptions.pop(subscription_id, None)
            if not subscriptions:
                del self._rooms[room]

    def retain(self, room: str, user_ids: Iterable[str]) -> int:
        allowed = set(user_ids)
        with self._lock:
            subscriptions = self._rooms.get(room)
            if not subscriptions:
                return 0
            dropped = [sid for sid, subscription in subscriptions.items() if subscription.user_id not in allowed]
            for subscription_id in dropped:
                del subscriptions[subscription_id]
            if not subscriptions:
                del self._rooms[room]
        if dropped:
            logger.info(f"Dropped {len(dropped)} subscription(s) from room {room}")
        return len(dropped)

    def subscriber_count(self, room: str) -> int:
        with self._lock:
            return len(self._rooms.get(room, {}))

    def publish(
        self, event_name: str, payload: Dict[str, Any], room: str, recipients: Iterable[str] | None = None
    ) -> int:
        allowed = set(recipients) if recipients is not None else None
        with self._lock:
            subscriptions = [
                (subscription_id, subscription)
                for subscription_id, subscription in self._rooms.get(room, {}).items()
                if allowed is None or subscription.user_id in allowed
            ]

        delivered = 0
        for subscription_id, subscription in subscriptions:
            try:
                subscription.callback(event_name, payload)
                delivered += 1
            except Exception:
                logger.exception(f"Subscriber {subscription_id} in room {room} failed to handle '{event_name}'")
        logger.info(f"Published '{event_name}' to room {room} ({delivered}/{len(subscriptions)} delivered)")
        return delivered


_channel: NotificationChannel | None = None
_channel_lock = threading.Lock()


def get_notification_channel() -> NotificationChannel:
    global _channel
    if _channel is None:
        with _channel_lock:
            if _channel is None:
                channel_class = import_string(settings.NOTIFICATION_CHANNEL["BACKEND"])
                _channel = channel_class()
    return _channel


def reset_notification_channel() -> None:
    global _channel
    with _channel_lock:
        _channel = None
