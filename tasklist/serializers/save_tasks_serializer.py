from rest_framework import serializers

from tasklist.serializers.task_list_id_serializer import validate_object_id
from tasklist.serializers.task_serializer import TaskSerializer


class SaveTasksSerializer(serializers.Serializer):
    taskListId = serializers.CharField(required=True)
    tasks = TaskSerializer(many=True, required=True, allow_empty=True)

    def validate_taskListId(self, value):
        return validate_object_id(value)
