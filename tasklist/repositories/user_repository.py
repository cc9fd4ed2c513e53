import logging
from typing import List, Optional

from bson import ObjectId
from pymongo.errors import PyMongoError

from tasklist.models.user import UserModel
from tasklist.repositories.common.mongo_repository import MongoRepository
from tasklist.exceptions.auth_exceptions import UserNotFoundException

logger = logging.getLogger(__name__)


class UserRepository(MongoRepository):
    collection_name = UserModel.collection_name

    @classmethod
    def get_by_id(cls, user_id: str) -> Optional[UserModel]:
        try:
            doc = cls.get_collection().find_one({"_id": ObjectId(user_id)})
            return UserModel(**doc) if doc else None
        except Exception as e:
            raise UserNotFoundException() from e

    @classmethod
    def get_by_ids(cls, user_ids: List[str]) -> List[UserModel]:
        """
        Get multiple users by their IDs in a single database query.
        Returns only the users that exist; malformed ids are skipped.
        """
        object_ids = [ObjectId(user_id) for user_id in set(user_ids) if ObjectId.is_valid(user_id)]
        if not object_ids:
            return []
        try:
            cursor = cls.get_collection().find({"_id": {"$in": object_ids}})
            return [UserModel(**doc) for doc in cursor]
        except PyMongoError as e:
            logger.error(f"Failed to load users {user_ids}: {str(e)}")
            raise
