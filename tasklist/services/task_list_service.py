import logging
from typing import Callable, List

from django.conf import settings

from tasklist.constants.task_list import ShareMode, TaskListOperation
from tasklist.dto.responses.task_update_event import TaskUpdateEvent
from tasklist.dto.task_list_dto import SaveTaskListDTO, SharedTaskListDTO, TaskDTO, TaskListDTO
from tasklist.dto.user_dto import UserDTO
from tasklist.exceptions.permission_exceptions import TaskListAccessDeniedError, TaskListNotSharedError
from tasklist.exceptions.task_list_exceptions import TaskListNotFoundException
from tasklist.models.task_list import TaskListModel, TaskModel
from tasklist.repositories.task_list_repository import TaskListRepository
from tasklist.repositories.user_repository import UserRepository
from tasklist.services.notification_service import get_notification_channel, room_for_task_list
from tasklist.utils.csv_utils import tasks_to_csv
from tasklist.utils.task_list_access import can_mutate, can_view, is_member, members

logger = logging.getLogger(__name__)


class TaskListService:
    @classmethod
    def list(cls, user_id: str) -> List[TaskListDTO]:
        task_lists = TaskListRepository.list_for_user(user_id)
        return [cls.prepare_task_list_dto(task_list) for task_list in task_lists]

    @classmethod
    def list_shared(cls, user_id: str) -> List[SharedTaskListDTO]:
        task_lists = TaskListRepository.list_shared_for_user(user_id)
        if not task_lists:
            return []

        owners = UserRepository.get_by_ids([task_list.owner for task_list in task_lists])
        owners_by_id = {str(owner.id): UserDTO(id=str(owner.id), name=owner.name) for owner in owners}

        return [
            SharedTaskListDTO(
                **cls.prepare_task_list_dto(task_list).model_dump(exclude={"owner"}),
                owner=owners_by_id.get(task_list.owner),
            )
            for task_list in task_lists
        ]

    @classmethod
    def save(cls, user_id: str, dto: SaveTaskListDTO) -> TaskListDTO | None:
        """
        Update the list when ``dto.id`` is set, otherwise create it owned by the caller.

        Only creation returns the persisted list. Watchers are kept only for lists
        shared for reading or writing.
        """
        watcher = cls._watchers_for(dto.shareMode, dto.watcher)
        tasks = [TaskModel(**task.model_dump()) for task in dto.tasks]

        if dto.id:
            task_list = cls._get_task_list(dto.id)
            cls._authorize(user_id, task_list, TaskListOperation.UPDATE)

            updated = TaskListRepository.update(
                task_list_id=dto.id,
                title=dto.title,
                tasks=tasks,
                share_mode=dto.shareMode.value,
                watcher=watcher,
            )
            if not updated:
                raise TaskListNotFoundException(dto.id)

            cls._retain_subscribers(dto.id, [task_list.owner, *watcher])
            return None

        task_list = TaskListModel(
            owner=user_id,
            title=dto.title,
            tasks=tasks,
            shareMode=dto.shareMode,
            watcher=watcher,
        )
        created = TaskListRepository.create(task_list)
        logger.info(f"User {user_id} created task list {created.id}")
        return cls.prepare_task_list_dto(created)

    @classmethod
    def save_tasks(cls, user_id: str, task_list_id: str, tasks: List[TaskDTO]) -> None:
        task_list = cls._get_task_list(task_list_id)
        cls._authorize(user_id, task_list, TaskListOperation.SAVE_TASKS)

        updated = TaskListRepository.update_tasks(task_list_id, [TaskModel(**task.model_dump()) for task in tasks])
        if not updated:
            raise TaskListNotFoundException(task_list_id)

        cls._broadcast_task_update(task_list_id, tasks, recipients=members(task_list))

    @classmethod
    def remove(cls, user_id: str, task_list_id: str) -> None:
        task_list = cls._get_task_list(task_list_id)
        cls._authorize(user_id, task_list, TaskListOperation.DELETE)

        if not TaskListRepository.delete(task_list_id):
            raise TaskListNotFoundException(task_list_id)
        logger.info(f"User {user_id} deleted task list {task_list_id}")
        cls._retain_subscribers(task_list_id, [])

    @classmethod
    def export_tasks(cls, user_id: str, task_list_id: str) -> str:
        task_list = cls._get_task_list(task_list_id)
        if not can_view(user_id, task_list):
            logger.warning(f"User {user_id} denied export of task list {task_list_id}")
            raise TaskListAccessDeniedError(task_list_id, "export")

        export_settings = settings.TASK_LIST_SETTINGS
        return tasks_to_csv(
            [task.model_dump() for task in task_list.tasks],
            fields=export_settings["CSV_FIELDS"],
            delimiter=export_settings["CSV_DELIMITER"],
        )

    @classmethod
    def add_watcher(cls, user_id: str, task_list_id: str) -> bool:
        """Join a shared list. Returns False when the caller was already watching."""
        task_list = cls._get_task_list(task_list_id)
        if not ShareMode.is_shared(task_list.shareMode):
            raise TaskListNotSharedError(task_list_id)

        added = TaskListRepository.add_watcher(task_list_id, user_id)
        if added:
            logger.info(f"User {user_id} started watching task list {task_list_id}")
        return added

    @classmethod
    def remove_watcher(cls, user_id: str, task_list_id: str) -> None:
        task_list = TaskListRepository.remove_watcher(task_list_id, user_id)
        if task_list is None:
            return
        logger.info(f"User {user_id} stopped watching task list {task_list_id}")
        cls._retain_subscribers(task_list_id, members(task_list))

    @classmethod
    def subscribe(cls, user_id: str, task_list_id: str, callback: Callable) -> str:
        """Listen for task updates of a list the user owns or watches."""
        task_list = cls._get_task_list(task_list_id)
        if not is_member(user_id, task_list):
            raise TaskListAccessDeniedError(task_list_id, "subscribe to")
        return get_notification_channel().subscribe(room_for_task_list(task_list_id), user_id, callback)

    @classmethod
    def unsubscribe(cls, task_list_id: str, subscription_id: str) -> None:
        get_notification_channel().unsubscribe(room_for_task_list(task_list_id), subscription_id)

    @classmethod
    def prepare_task_list_dto(cls, task_list: TaskListModel) -> TaskListDTO:
        return TaskListDTO(
            id=str(task_list.id),
            owner=task_list.owner,
            title=task_list.title,
            tasks=[TaskDTO(**task.model_dump()) for task in task_list.tasks],
            shareMode=task_list.shareMode,
            watcher=list(task_list.watcher),
            created_at=task_list.created_at,
            updated_at=task_list.updated_at,
        )

    @classmethod
    def _watchers_for(cls, share_mode: ShareMode, watcher: List[str]) -> List[str]:
        if not ShareMode.is_shared(share_mode):
            return []
        return list(dict.fromkeys(watcher))

    @classmethod
    def _get_task_list(cls, task_list_id: str) -> TaskListModel:
        task_list = TaskListRepository.get_by_id(task_list_id)
        if not task_list:
            raise TaskListNotFoundException(task_list_id)
        return task_list

    @classmethod
    def _authorize(cls, user_id: str, task_list: TaskListModel, operation: TaskListOperation) -> None:
        if not can_mutate(user_id, task_list, operation):
            logger.warning(f"User {user_id} denied '{operation.value}' on task list {task_list.id}")
            raise TaskListAccessDeniedError(str(task_list.id), operation.value)

    @classmethod
    def _broadcast_task_update(cls, task_list_id: str, tasks: List[TaskDTO], recipients: List[str]) -> None:
        event = TaskUpdateEvent(taskListId=task_list_id, tasks=tasks)
        try:
            get_notification_channel().publish(
                settings.TASK_LIST_SETTINGS["TASK_UPDATE_EVENT"],
                event.model_dump(mode="json"),
                room=room_for_task_list(task_list_id),
                recipients=recipients,
            )
        except Exception:
            # tasks are already persisted at this point
            logger.exception(f"Failed to broadcast task update for task list {task_list_id}")

    @classmethod
    def _retain_subscribers(cls, task_list_id: str, user_ids: List[str]) -> None:
        try:
            get_notification_channel().retain(room_for_task_list(task_list_id), user_ids)
        except Exception:
            # publish still filters by current members
            logger.exception(f"Failed to prune subscriptions of task list {task_list_id}")
