from unittest import TestCase

from tasklist.constants.task_list import ShareMode, TaskListOperation
from tasklist.models.task_list import TaskListModel
from tasklist.tests.fixtures.task_list import OWNER_ID, STRANGER_ID, WATCHER_ID
from tasklist.utils.task_list_access import can_mutate, can_view, is_member, is_owner, members


class TaskListAccessTests(TestCase):
    def setUp(self):
        self.private_list = TaskListModel(owner=OWNER_ID, title="Private")
        self.shared_list = TaskListModel(
            owner=OWNER_ID, title="Shared", shareMode=ShareMode.READ, watcher=[WATCHER_ID]
        )

    def test_is_owner(self):
        self.assertTrue(is_owner(OWNER_ID, self.private_list))
        self.assertFalse(is_owner(WATCHER_ID, self.shared_list))

    def test_is_member_includes_watchers(self):
        self.assertTrue(is_member(OWNER_ID, self.shared_list))
        self.assertTrue(is_member(WATCHER_ID, self.shared_list))
        self.assertFalse(is_member(STRANGER_ID, self.shared_list))

    def test_can_view_private_list_only_as_member(self):
        self.assertTrue(can_view(OWNER_ID, self.private_list))
        self.assertFalse(can_view(STRANGER_ID, self.private_list))

    def test_can_view_shared_list_as_anyone(self):
        self.assertTrue(can_view(STRANGER_ID, self.shared_list))

    def test_update_and_delete_are_owner_only(self):
        for operation in (TaskListOperation.UPDATE, TaskListOperation.DELETE):
            self.assertTrue(can_mutate(OWNER_ID, self.shared_list, operation))
            self.assertFalse(can_mutate(WATCHER_ID, self.shared_list, operation))
            self.assertFalse(can_mutate(STRANGER_ID, self.shared_list, operation))

    def test_save_tasks_allowed_for_owner_and_watchers(self):
        self.assertTrue(can_mutate(OWNER_ID, self.shared_list, TaskListOperation.SAVE_TASKS))
        self.assertTrue(can_mutate(WATCHER_ID, self.shared_list, TaskListOperation.SAVE_TASKS))
        self.assertFalse(can_mutate(STRANGER_ID, self.shared_list, TaskListOperation.SAVE_TASKS))

    def test_read_only_watcher_may_still_save_tasks(self):
        self.assertEqual(self.shared_list.shareMode, ShareMode.READ.value)
        self.assertTrue(can_mutate(WATCHER_ID, self.shared_list, TaskListOperation.SAVE_TASKS))

    def test_members_are_owner_then_watchers_without_duplicates(self):
        task_list = TaskListModel(owner=OWNER_ID, title="Shared", shareMode="write", watcher=[WATCHER_ID, OWNER_ID])

        self.assertEqual(members(task_list), [OWNER_ID, WATCHER_ID])
        self.assertEqual(members(self.private_list), [OWNER_ID])
