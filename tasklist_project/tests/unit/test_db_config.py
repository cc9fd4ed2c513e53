from unittest import TestCase
from unittest.mock import patch

from django.test import override_settings
from pymongo.errors import PyMongoError

from tasklist_project.db.config import DatabaseManager


class DatabaseManagerTests(TestCase):
    def setUp(self):
        DatabaseManager.reset()
        self.addCleanup(DatabaseManager.reset)

    @override_settings(MONGODB_URI="mongodb://db.example:27017", DB_NAME="tasks")
    @patch("tasklist_project.db.config.MongoClient")
    def test_client_returns_timezone_aware_datetimes(self, mock_client_class):
        DatabaseManager().get_database()

        mock_client_class.assert_called_once_with("mongodb://db.example:27017", tz_aware=True)
        mock_client_class.return_value.__getitem__.assert_called_once_with("tasks")

    @patch("tasklist_project.db.config.MongoClient")
    def test_client_is_created_once(self, mock_client_class):
        DatabaseManager().get_collection("tasklists")
        DatabaseManager().get_collection("users")

        mock_client_class.assert_called_once()

    @patch("tasklist_project.db.config.MongoClient")
    def test_health_check_reports_ping_failure(self, mock_client_class):
        mock_client_class.return_value.admin.command.side_effect = PyMongoError("no primary")

        self.assertFalse(DatabaseManager().check_database_health())
