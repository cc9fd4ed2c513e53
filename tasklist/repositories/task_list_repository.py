import logging
from datetime import datetime, timezone
from functools import wraps
from typing import List

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from tasklist.constants.messages import RepositoryErrors
from tasklist.constants.task_list import ShareMode
from tasklist.exceptions.task_list_exceptions import TaskListRepositoryException
from tasklist.models.task_list import TaskListModel, TaskModel
from tasklist.repositories.common.mongo_repository import MongoRepository

logger = logging.getLogger(__name__)


def store_operation(message_template: str):
    """Log a failed store call and surface it as TaskListRepositoryException."""

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except PyMongoError as e:
                message = message_template.format(str(e))
                logger.error(message)
                raise TaskListRepositoryException(message) from e

        return wrapper

    return decorator


def _dump_tasks(tasks: List[TaskModel]) -> List[dict]:
    return [task.model_dump() for task in tasks]


class TaskListRepository(MongoRepository):
    collection_name = TaskListModel.collection_name

    @classmethod
    @store_operation(RepositoryErrors.TASK_LIST_QUERY_FAILED)
    def list_for_user(cls, user_id: str) -> List[TaskListModel]:
        """Every list the user owns or watches, whatever its share mode."""
        cursor = cls.get_collection().find({"$or": [{"owner": user_id}, {"watcher": user_id}]})
        return [TaskListModel(**doc) for doc in cursor]

    @classmethod
    @store_operation(RepositoryErrors.TASK_LIST_QUERY_FAILED)
    def list_shared_for_user(cls, user_id: str) -> List[TaskListModel]:
        """Lists shared for reading or writing that the user has not joined yet."""
        cursor = cls.get_collection().find(
            {
                "shareMode": {"$in": ShareMode.shared_values()},
                "watcher": {"$ne": user_id},
            }
        )
        return [TaskListModel(**doc) for doc in cursor]

    @classmethod
    @store_operation(RepositoryErrors.TASK_LIST_QUERY_FAILED)
    def get_by_id(cls, task_list_id: str) -> TaskListModel | None:
        doc = cls.get_collection().find_one({"_id": ObjectId(task_list_id)})
        if doc:
            return TaskListModel(**doc)
        return None

    @classmethod
    @store_operation(RepositoryErrors.TASK_LIST_CREATION_FAILED)
    def create(cls, task_list: TaskListModel) -> TaskListModel:
        now = datetime.now(timezone.utc)
        task_list.created_at = now
        task_list.updated_at = now

        doc = task_list.model_dump(by_alias=True)
        doc.pop("_id", None)
        insert_result = cls.get_collection().insert_one(doc)
        task_list.id = insert_result.inserted_id
        return task_list

    @classmethod
    @store_operation(RepositoryErrors.TASK_LIST_UPDATE_FAILED)
    def update(
        cls, task_list_id: str, title: str, tasks: List[TaskModel], share_mode: str, watcher: List[str]
    ) -> bool:
        update_result = cls.get_collection().update_one(
            {"_id": ObjectId(task_list_id)},
            {
                "$set": {
                    "title": title,
                    "tasks": _dump_tasks(tasks),
                    "shareMode": share_mode,
                    "watcher": watcher,
                    "updated_at": datetime.now(timezone.utc),
                }
            },
        )
        return update_result.matched_count > 0

    @classmethod
    @store_operation(RepositoryErrors.TASK_LIST_UPDATE_FAILED)
    def update_tasks(cls, task_list_id: str, tasks: List[TaskModel]) -> bool:
        update_result = cls.get_collection().update_one(
            {"_id": ObjectId(task_list_id)},
            {"$set": {"tasks": _dump_tasks(tasks), "updated_at": datetime.now(timezone.utc)}},
        )
        return update_result.matched_count > 0

    @classmethod
    @store_operation(RepositoryErrors.TASK_LIST_DELETION_FAILED)
    def delete(cls, task_list_id: str) -> bool:
        delete_result = cls.get_collection().delete_one({"_id": ObjectId(task_list_id)})
        return delete_result.deleted_count > 0

    @classmethod
    @store_operation(RepositoryErrors.TASK_LIST_UPDATE_FAILED)
    def add_watcher(cls, task_list_id: str, user_id: str) -> bool:
        """
        Atomically add the user to the watchers of a shared list.

        Returns False when nothing changed: the user was already watching, or the list
        is missing or no longer shared.
        """
        update_result = cls.get_collection().update_one(
            {
                "_id": ObjectId(task_list_id),
                "shareMode": {"$in": ShareMode.shared_values()},
                "watcher": {"$ne": user_id},
            },
            {
                "$addToSet": {"watcher": user_id},
                "$set": {"updated_at": datetime.now(timezone.utc)},
            },
        )
        return update_result.modified_count > 0

    @classmethod
    @store_operation(RepositoryErrors.TASK_LIST_UPDATE_FAILED)
    def remove_watcher(cls, task_list_id: str, user_id: str) -> TaskListModel | None:
        """Pull the user from the watchers; returns the list as it is afterwards, or None if nothing changed."""
        doc = cls.get_collection().find_one_and_update(
            {"_id": ObjectId(task_list_id), "watcher": user_id},
            {
                "$pull": {"watcher": user_id},
                "$set": {"updated_at": datetime.now(timezone.utc)},
            },
            return_document=ReturnDocument.AFTER,
        )
        return TaskListModel(**doc) if doc else None
