from tasklist.constants.messages import PermissionErrors


class PermissionDeniedError(Exception):
    """Base permission error"""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TaskListAccessDeniedError(PermissionDeniedError):
    """Task list access denied"""

    def __init__(self, task_list_id: str, action: str):
        self.task_list_id = task_list_id
        self.action = action
        super().__init__(PermissionErrors.TASK_LIST_ACCESS_DENIED.format(action, task_list_id))


class TaskListNotSharedError(PermissionDeniedError):
    """Watchers can only join lists shared for reading or writing"""

    def __init__(self, task_list_id: str):
        self.task_list_id = task_list_id
        super().__init__(PermissionErrors.TASK_LIST_NOT_SHARED.format(task_list_id))
