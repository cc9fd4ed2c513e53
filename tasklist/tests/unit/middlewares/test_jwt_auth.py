import json
from unittest import TestCase
from unittest.mock import Mock, patch

from bson import ObjectId
from django.conf import settings
from django.http import HttpRequest, JsonResponse
from rest_framework import status

from tasklist.constants.messages import AuthErrorMessages
from tasklist.exceptions.auth_exceptions import TokenExpiredError, UserNotFoundException
from tasklist.middlewares.jwt_auth import JWTAuthenticationMiddleware, get_current_user_info
from tasklist.models.user import UserModel
from tasklist.utils.jwt_utils import generate_access_token, generate_token_pair

USER_ID = "6879298277d79dd472916a41"


class JWTAuthenticationMiddlewareTests(TestCase):
    def setUp(self):
        self.get_response = Mock(return_value=JsonResponse({"data": "test"}))
        self.middleware = JWTAuthenticationMiddleware(self.get_response)
        self.request = Mock(spec=HttpRequest)
        self.request.path = "/v1/tasklists"
        self.request.COOKIES = {}
        self.user = UserModel(_id=ObjectId(USER_ID), email_id="owner@example.com", name="Owner User")

    def test_public_path_authentication_bypass(self):
        self.request.path = "/v1/health"

        response = self.middleware(self.request)

        self.get_response.assert_called_once_with(self.request)
        self.assertEqual(response.status_code, 200)

    def test_missing_cookies_returns_401(self):
        response = self.middleware(self.request)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        body = json.loads(response.content)
        self.assertEqual(body["message"], AuthErrorMessages.AUTHENTICATION_REQUIRED)
        self.get_response.assert_not_called()

    @patch("tasklist.middlewares.jwt_auth.UserRepository.get_by_id")
    def test_valid_access_token_sets_user(self, mock_get_by_id):
        mock_get_by_id.return_value = self.user
        self.request.COOKIES = {
            settings.COOKIE_SETTINGS["ACCESS_COOKIE_NAME"]: generate_access_token({"user_id": USER_ID})
        }

        response = self.middleware(self.request)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.request.user_id, USER_ID)
        self.assertEqual(get_current_user_info(self.request), {"user_id": USER_ID, "email": "owner@example.com"})

    def test_invalid_access_token_returns_401(self):
        self.request.COOKIES = {settings.COOKIE_SETTINGS["ACCESS_COOKIE_NAME"]: "garbage"}

        response = self.middleware(self.request)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.get_response.assert_not_called()

    @patch("tasklist.middlewares.jwt_auth.UserRepository.get_by_id")
    @patch("tasklist.middlewares.jwt_auth.validate_access_token")
    def test_expired_access_token_is_refreshed(self, mock_validate_access, mock_get_by_id):
        mock_validate_access.side_effect = TokenExpiredError()
        mock_get_by_id.return_value = self.user
        tokens = generate_token_pair({"user_id": USER_ID})
        self.request.COOKIES = {
            settings.COOKIE_SETTINGS["ACCESS_COOKIE_NAME"]: "expired",
            settings.COOKIE_SETTINGS["REFRESH_COOKIE_NAME"]: tokens["refresh_token"],
        }

        response = self.middleware(self.request)

        self.assertEqual(response.status_code, 200)
        self.assertIn(settings.COOKIE_SETTINGS["ACCESS_COOKIE_NAME"], response.cookies)

    @patch("tasklist.middlewares.jwt_auth.UserRepository.get_by_id")
    def test_unknown_user_returns_401(self, mock_get_by_id):
        mock_get_by_id.side_effect = UserNotFoundException()
        self.request.COOKIES = {
            settings.COOKIE_SETTINGS["ACCESS_COOKIE_NAME"]: generate_access_token({"user_id": USER_ID})
        }

        response = self.middleware(self.request)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_get_current_user_info_without_user(self):
        request = HttpRequest()

        self.assertIsNone(get_current_user_info(request))
