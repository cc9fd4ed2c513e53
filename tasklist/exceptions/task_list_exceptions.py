from tasklist.constants.messages import ApiErrors


class TaskListNotFoundException(Exception):
    def __init__(self, task_list_id: str | None = None, message_template: str = ApiErrors.TASK_LIST_NOT_FOUND):
        if task_list_id:
            self.message = message_template.format(task_list_id)
        else:
            self.message = ApiErrors.TASK_LIST_NOT_FOUND_GENERIC
        super().__init__(self.message)


class TaskListRepositoryException(Exception):
    """Any failure reported by the document store."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
