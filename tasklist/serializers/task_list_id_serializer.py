from rest_framework import serializers
from bson import ObjectId
from bson.errors import InvalidId

from tasklist.constants.messages import ValidationErrors


def validate_object_id(value: str) -> str:
    try:
        ObjectId(value)
    except (InvalidId, TypeError):
        raise serializers.ValidationError(ValidationErrors.INVALID_TASK_LIST_ID_FORMAT)
    return value


class TaskListIdSerializer(serializers.Serializer):
    taskListId = serializers.CharField(required=True)

    def validate_taskListId(self, value):
        return validate_object_id(value)


class TaskListQueryParamsSerializer(serializers.Serializer):
    tl = serializers.CharField(required=True, help_text="Task list ID")

    def validate_tl(self, value):
        return validate_object_id(value)
