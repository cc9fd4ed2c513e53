from pymongo.collection import Collection

from tasklist_project.db.config import DatabaseManager


class MongoRepository:
    collection_name: str

    @classmethod
    def get_collection(cls) -> Collection:
        return DatabaseManager().get_collection(cls.collection_name)
