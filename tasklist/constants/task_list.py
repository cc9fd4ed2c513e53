from enum import Enum


class ShareMode(Enum):
    NONE = "none"
    READ = "read"
    WRITE = "write"

    @classmethod
    def shared_values(cls) -> list[str]:
        return [cls.READ.value, cls.WRITE.value]

    @classmethod
    def is_shared(cls, share_mode) -> bool:
        value = share_mode.value if isinstance(share_mode, ShareMode) else share_mode
        return value in cls.shared_values()


class TaskListOperation(Enum):
    UPDATE = "update"
    SAVE_TASKS = "save tasks"
    DELETE = "delete"


TASK_LIST_ROOM_PREFIX = "task-list:"
