import logging
import time

from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from tasklist_project.db.config import DatabaseManager
from tasklist.models.task_list import TaskListModel

logger = logging.getLogger(__name__)


def initialize_database(max_retries=5, retry_delay=2):
    """
    Wait for MongoDB and create the indexes used by the task list queries.
    """
    db_manager = DatabaseManager()

    for attempt in range(max_retries):
        if db_manager.check_database_health():
            break
        if attempt < max_retries - 1:
            logger.warning(f"Database health check failed, attempt {attempt + 1}. Retrying in {retry_delay} seconds...")
            time.sleep(retry_delay)
        else:
            logger.error("All database connection attempts failed")
            return False

    try:
        task_lists_collection = db_manager.get_collection(TaskListModel.collection_name)
        # list() filters on owner or watcher, listShared() on shareMode
        task_lists_collection.create_index([("owner", ASCENDING)])
        task_lists_collection.create_index([("watcher", ASCENDING)])
        task_lists_collection.create_index([("shareMode", ASCENDING)])
        logger.info("Database initialization completed successfully")
        return True
    except PyMongoError as e:
        logger.error(f"Error initializing database: {str(e)}")
        return False
