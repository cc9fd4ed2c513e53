from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import ClassVar, List
from datetime import datetime, timezone

from tasklist.constants.task_list import ShareMode
from tasklist.models.common.document import Document
from tasklist.utils.datetime_utils import as_utc


class TaskModel(BaseModel):
    """A task embedded in a task list; it has no identity of its own in the store."""

    uuid: str
    title: str
    dueDate: datetime | None = None
    done: bool = False

    model_config = ConfigDict(from_attributes=True)

    @field_validator("dueDate")
    @classmethod
    def validate_due_date(cls, value):
        return as_utc(value)


class TaskListModel(Document):
    collection_name: ClassVar[str] = "tasklists"

    owner: str
    title: str
    tasks: List[TaskModel] = []
    shareMode: ShareMode = Field(default=ShareMode.NONE, validate_default=True)
    watcher: List[str] = []
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)

    @field_validator("created_at", "updated_at")
    @classmethod
    def validate_timestamps(cls, value):
        return as_utc(value)
