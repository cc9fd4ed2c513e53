from unittest import TestCase
from unittest.mock import Mock

from django.test import override_settings

from tasklist.services.notification_service import (
    InMemoryNotificationChannel,
    get_notification_channel,
    reset_notification_channel,
    room_for_task_list,
)

OWNER_ID = "6879298277d79dd472916a41"
WATCHER_ID = "6879298277d79dd472916a42"


class InMemoryNotificationChannelTests(TestCase):
    def setUp(self):
        self.channel = InMemoryNotificationChannel()
        self.room = room_for_task_list("6879298277d79dd472916a41")

    def test_room_for_task_list(self):
        self.assertEqual(self.room, "task-list:6879298277d79dd472916a41")

    def test_publish_delivers_to_room_subscribers_only(self):
        in_room = Mock()
        other_room = Mock()
        self.channel.subscribe(self.room, OWNER_ID, in_room)
        self.channel.subscribe(room_for_task_list("other"), OWNER_ID, other_room)

        delivered = self.channel.publish("task update", {"taskListId": "x"}, room=self.room)

        self.assertEqual(delivered, 1)
        in_room.assert_called_once_with("task update", {"taskListId": "x"})
        other_room.assert_not_called()

    def test_publish_only_reaches_listed_recipients(self):
        owner_listener = Mock()
        watcher_listener = Mock()
        self.channel.subscribe(self.room, OWNER_ID, owner_listener)
        self.channel.subscribe(self.room, WATCHER_ID, watcher_listener)

        delivered = self.channel.publish("task update", {}, room=self.room, recipients=[OWNER_ID])

        self.assertEqual(delivered, 1)
        owner_listener.assert_called_once()
        watcher_listener.assert_not_called()

    def test_publish_to_empty_room_delivers_nothing(self):
        self.assertEqual(self.channel.publish("task update", {}, room=self.room), 0)

    def test_failing_subscriber_does_not_block_others(self):
        failing = Mock(side_effect=RuntimeError("socket closed"))
        healthy = Mock()
        self.channel.subscribe(self.room, OWNER_ID, failing)
        self.channel.subscribe(self.room, WATCHER_ID, healthy)

        delivered = self.channel.publish("task update", {}, room=self.room)

        self.assertEqual(delivered, 1)
        healthy.assert_called_once()

    def test_unsubscribe_removes_subscriber(self):
        callback = Mock()
        subscription_id = self.channel.subscribe(self.room, OWNER_ID, callback)

        self.channel.unsubscribe(self.room, subscription_id)
        self.channel.publish("task update", {}, room=self.room)

        callback.assert_not_called()
        self.assertEqual(self.channel.subscriber_count(self.room), 0)

    def test_unsubscribe_unknown_subscription_is_ignored(self):
        self.channel.unsubscribe(self.room, "missing")
        self.assertEqual(self.channel.subscriber_count(self.room), 0)

    def test_retain_drops_subscriptions_of_other_users(self):
        owner_listener = Mock()
        watcher_listener = Mock()
        self.channel.subscribe(self.room, OWNER_ID, owner_listener)
        self.channel.subscribe(self.room, WATCHER_ID, watcher_listener)
        self.channel.subscribe(self.room, WATCHER_ID, watcher_listener)

        dropped = self.channel.retain(self.room, [OWNER_ID])
        self.channel.publish("task update", {}, room=self.room)

        self.assertEqual(dropped, 2)
        self.assertEqual(self.channel.subscriber_count(self.room), 1)
        owner_listener.assert_called_once()
        watcher_listener.assert_not_called()

    def test_retain_nobody_empties_the_room(self):
        self.channel.subscribe(self.room, OWNER_ID, Mock())

        self.assertEqual(self.channel.retain(self.room, []), 1)
        self.assertEqual(self.channel.subscriber_count(self.room), 0)

    def test_retain_on_unknown_room(self):
        self.assertEqual(self.channel.retain(self.room, [OWNER_ID]), 0)


class GetNotificationChannelTests(TestCase):
    def setUp(self):
        reset_notification_channel()

    def tearDown(self):
        reset_notification_channel()

    def test_returns_same_instance(self):
        self.assertIs(get_notification_channel(), get_notification_channel())

    def test_uses_configured_backend(self):
        self.assertIsInstance(get_notification_channel(), InMemoryNotificationChannel)

    @override_settings(NOTIFICATION_CHANNEL={"BACKEND": "unittest.mock.MagicMock"})
    def test_backend_is_loaded_from_settings(self):
        from unittest.mock import MagicMock

        self.assertIsInstance(get_notification_channel(), MagicMock)
