from typing import List

from tasklist.constants.task_list import ShareMode, TaskListOperation
from tasklist.models.task_list import TaskListModel

OWNER_ONLY_OPERATIONS = {TaskListOperation.UPDATE, TaskListOperation.DELETE}
MEMBER_OPERATIONS = {TaskListOperation.SAVE_TASKS}


def is_owner(user_id: str, task_list: TaskListModel) -> bool:
    return task_list.owner == user_id


def is_member(user_id: str, task_list: TaskListModel) -> bool:
    """Owner or watcher: the users who see the list in their own listing."""
    return is_owner(user_id, task_list) or user_id in task_list.watcher


def can_view(user_id: str, task_list: TaskListModel) -> bool:
    """
    Members can always read a list. Lists shared for reading or writing are
    readable by anyone, the same set listShared exposes.
    """
    return is_member(user_id, task_list) or ShareMode.is_shared(task_list.shareMode)


def can_mutate(user_id: str, task_list: TaskListModel, operation: TaskListOperation) -> bool:
    """
    Renaming, re-sharing and deleting stay with the owner; watchers may edit tasks.
    Watchers are not told apart by share mode.
    """
    if operation in OWNER_ONLY_OPERATIONS:
        return is_owner(user_id, task_list)
    if operation in MEMBER_OPERATIONS:
        return is_member(user_id, task_list)
    return False


def members(task_list: TaskListModel) -> List[str]:
    """Users allowed to follow the list's live updates."""
    return list(dict.fromkeys([task_list.owner, *task_list.watcher]))
