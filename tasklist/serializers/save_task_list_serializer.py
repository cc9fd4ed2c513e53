from rest_framework import serializers

from tasklist.constants.messages import ValidationErrors
from tasklist.constants.task_list import ShareMode
from tasklist.serializers.task_list_id_serializer import validate_object_id
from tasklist.serializers.task_serializer import TaskSerializer


class TaskListSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_null=True, help_text="Present when updating an existing list")
    _id = serializers.CharField(required=False, allow_null=True, help_text="Alias of id")
    title = serializers.CharField(required=True, allow_blank=False, help_text="Title of the task list")
    tasks = TaskSerializer(many=True, required=False, default=list)
    shareMode = serializers.ChoiceField(
        required=False,
        choices=[share_mode.value for share_mode in ShareMode],
        default=ShareMode.NONE.value,
        error_messages={
            "invalid_choice": ValidationErrors.INVALID_SHARE_MODE.format(
                ", ".join(share_mode.value for share_mode in ShareMode)
            )
        },
        help_text="Who besides the owner may see the list (none, read, write)",
    )
    watcher = serializers.ListField(child=serializers.CharField(), required=False, default=list)

    def validate_id(self, value):
        if value is None:
            return value
        return validate_object_id(value)

    def validate__id(self, value):
        return self.validate_id(value)

    def validate_title(self, value):
        if not value.strip():
            raise serializers.ValidationError(ValidationErrors.BLANK_TITLE)
        return value

    def validate(self, data):
        legacy_id = data.pop("_id", None)
        if not data.get("id") and legacy_id:
            data["id"] = legacy_id
        return data


class SaveTaskListSerializer(serializers.Serializer):
    taskList = TaskListSerializer(required=True)
