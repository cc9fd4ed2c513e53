from typing import List

from pydantic import BaseModel

from tasklist.dto.task_list_dto import TaskDTO


class TaskUpdateEvent(BaseModel):
    """Payload broadcast to a task list's room after its tasks were replaced."""

    taskListId: str
    tasks: List[TaskDTO]
