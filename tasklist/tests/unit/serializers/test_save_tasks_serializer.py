from unittest import TestCase

from bson import ObjectId

from tasklist.constants.messages import ValidationErrors
from tasklist.serializers.save_tasks_serializer import SaveTasksSerializer
from tasklist.serializers.task_list_id_serializer import TaskListIdSerializer, TaskListQueryParamsSerializer


class SaveTasksSerializerTests(TestCase):
    def test_valid_payload(self):
        task_list_id = str(ObjectId())
        serializer = SaveTasksSerializer(
            data={
                "taskListId": task_list_id,
                "tasks": [{"uuid": "a", "title": "Pay rent", "dueDate": "2026-11-01T09:00:00Z", "done": True}],
            }
        )

        self.assertTrue(serializer.is_valid(), serializer.errors)
        task = serializer.validated_data["tasks"][0]
        self.assertEqual(task["dueDate"].year, 2026)
        self.assertTrue(task["done"])

    def test_task_defaults(self):
        serializer = SaveTasksSerializer(data={"taskListId": str(ObjectId()), "tasks": [{"uuid": "a", "title": ""}]})

        self.assertTrue(serializer.is_valid(), serializer.errors)
        task = serializer.validated_data["tasks"][0]
        self.assertIsNone(task["dueDate"])
        self.assertFalse(task["done"])

    def test_requires_tasks(self):
        serializer = SaveTasksSerializer(data={"taskListId": str(ObjectId())})

        self.assertFalse(serializer.is_valid())
        self.assertIn("tasks", serializer.errors)

    def test_rejects_invalid_task_list_id(self):
        serializer = SaveTasksSerializer(data={"taskListId": "abc", "tasks": []})

        self.assertFalse(serializer.is_valid())
        self.assertEqual(str(serializer.errors["taskListId"][0]), ValidationErrors.INVALID_TASK_LIST_ID_FORMAT)


class TaskListIdSerializerTests(TestCase):
    def test_body_id(self):
        task_list_id = str(ObjectId())
        serializer = TaskListIdSerializer(data={"taskListId": task_list_id})

        self.assertTrue(serializer.is_valid())
        self.assertEqual(serializer.validated_data["taskListId"], task_list_id)

    def test_query_param_id(self):
        serializer = TaskListQueryParamsSerializer(data={"tl": "zzz"})

        self.assertFalse(serializer.is_valid())
        self.assertIn("tl", serializer.errors)
