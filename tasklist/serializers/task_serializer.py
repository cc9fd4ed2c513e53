from rest_framework import serializers


class TaskSerializer(serializers.Serializer):
    uuid = serializers.CharField(required=True, allow_blank=False, help_text="Client-assigned task identifier")
    title = serializers.CharField(required=True, allow_blank=True, help_text="Title of the task")
    dueDate = serializers.DateTimeField(required=False, allow_null=True, default=None, help_text="Due date (ISO 8601)")
    done = serializers.BooleanField(required=False, default=False, help_text="Whether the task is completed")
