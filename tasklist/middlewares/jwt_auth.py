from django.conf import settings
from rest_framework import status
from django.http import JsonResponse
from tasklist.utils.jwt_utils import (
    validate_access_token,
    validate_refresh_token,
    generate_access_token,
)
from tasklist.exceptions.auth_exceptions import (
    TokenExpiredError,
    TokenInvalidError,
    RefreshTokenExpiredError,
    TokenMissingError,
    UserNotFoundException,
)
from tasklist.constants.messages import AuthErrorMessages, ApiErrors
from tasklist.dto.responses.error_response import ApiErrorResponse, ApiErrorDetail
from tasklist.repositories.user_repository import UserRepository


class JWTAuthenticationMiddleware:
    def __init__(self, get_response) -> None:
        self.get_response = get_response

    def __call__(self, request):
        path = request.path

        if self._is_public_path(path):
            return self.get_response(request)

        try:
            if self._try_authentication(request):
                response = self.get_response(request)
                return self._process_response(request, response)
            return self._unauthorized(AuthErrorMessages.AUTHENTICATION_REQUIRED)

        except (TokenMissingError, TokenExpiredError, TokenInvalidError, UserNotFoundException) as e:
            return self._unauthorized(str(e))

    def _try_authentication(self, request) -> bool:
        access_token = request.COOKIES.get(settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"))
        if access_token:
            try:
                payload = validate_access_token(access_token)
                self._set_user_data(request, payload)
                return True
            except TokenExpiredError:
                pass

        return self._try_refresh(request)

    def _try_refresh(self, request) -> bool:
        """Try to refresh access token"""
        refresh_token = request.COOKIES.get(settings.COOKIE_SETTINGS.get("REFRESH_COOKIE_NAME"))
        if not refresh_token:
            return False
        try:
            payload = validate_refresh_token(refresh_token)
        except (RefreshTokenExpiredError, TokenInvalidError):
            return False

        self._set_user_data(request, payload)

        request._new_access_token = generate_access_token({"user_id": payload["user_id"]})
        request._access_token_expires = settings.JWT_CONFIG["ACCESS_TOKEN_LIFETIME"]
        return True

    def _set_user_data(self, request, payload):
        """Set user data on request with database verification"""
        user_id = payload["user_id"]
        user = UserRepository.get_by_id(user_id)
        if not user:
            raise TokenInvalidError(AuthErrorMessages.INVALID_TOKEN)

        request.user_id = user_id
        request.user_email = user.email_id

    def _process_response(self, request, response):
        """Process response and set new cookies if token was refreshed"""
        if hasattr(request, "_new_access_token"):
            response.set_cookie(
                settings.COOKIE_SETTINGS.get("ACCESS_COOKIE_NAME"),
                request._new_access_token,
                max_age=request._access_token_expires,
                **self._get_cookie_config(),
            )
        return response

    def _get_cookie_config(self):
        return {
            "path": settings.COOKIE_SETTINGS.get("COOKIE_PATH", "/"),
            "domain": settings.COOKIE_SETTINGS.get("COOKIE_DOMAIN"),
            "secure": settings.COOKIE_SETTINGS.get("COOKIE_SECURE"),
            "httponly": settings.COOKIE_SETTINGS.get("COOKIE_HTTPONLY", True),
            "samesite": settings.COOKIE_SETTINGS.get("COOKIE_SAMESITE"),
        }

    def _is_public_path(self, path: str) -> bool:
        return any(path.startswith(public_path) for public_path in settings.PUBLIC_PATHS)

    def _unauthorized(self, detail: str):
        error_response = ApiErrorResponse(
            statusCode=status.HTTP_401_UNAUTHORIZED,
            message=detail,
            errors=[ApiErrorDetail(title=ApiErrors.AUTHENTICATION_FAILED, detail=detail)],
        )
        return JsonResponse(
            data=error_response.model_dump(mode="json", exclude_none=True),
            status=status.HTTP_401_UNAUTHORIZED,
        )


def get_current_user_info(request) -> dict:
    if not hasattr(request, "user_id"):
        return None

    user_info = {
        "user_id": request.user_id,
        "email": request.user_email,
    }

    return user_info
