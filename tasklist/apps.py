from django.apps import AppConfig
from django.conf import settings
import logging

logger = logging.getLogger(__name__)


class TaskListConfig(AppConfig):
    name = "tasklist"

    def ready(self):
        """Initialize application components when Django starts"""

        if settings.TESTING:
            logger.info("Test mode detected - skipping database initialization")
            return

        from tasklist_project.db.init import initialize_database

        if not initialize_database():
            logger.warning("Database initialization failed; requests will fail until MongoDB is reachable")
