from datetime import datetime
from typing import List

from pydantic import BaseModel, field_validator

from tasklist.constants.task_list import ShareMode
from tasklist.dto.user_dto import UserDTO
from tasklist.utils.datetime_utils import as_utc


class TaskDTO(BaseModel):
    uuid: str
    title: str
    dueDate: datetime | None = None
    done: bool = False

    @field_validator("dueDate")
    @classmethod
    def validate_due_date(cls, value):
        # stored and broadcast as UTC
        return as_utc(value)


class TaskListDTO(BaseModel):
    id: str
    owner: str
    title: str
    tasks: List[TaskDTO] = []
    shareMode: ShareMode = ShareMode.NONE
    watcher: List[str] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SharedTaskListDTO(TaskListDTO):
    """A joinable task list; owner is resolved to the user record for display."""

    owner: UserDTO | None = None


class SaveTaskListDTO(BaseModel):
    id: str | None = None
    title: str
    tasks: List[TaskDTO] = []
    shareMode: ShareMode = ShareMode.NONE
    watcher: List[str] = []
