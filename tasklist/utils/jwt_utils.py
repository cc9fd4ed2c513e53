import jwt
from datetime import datetime, timedelta, timezone
from django.conf import settings

from tasklist.exceptions.auth_exceptions import (
    TokenExpiredError,
    TokenInvalidError,
    RefreshTokenExpiredError,
)

from tasklist.constants.messages import AuthErrorMessages


def _generate_token(user_data: dict, token_type: str, lifetime_key: str) -> str:
    now = datetime.now(timezone.utc)
    expiry = now + timedelta(seconds=settings.JWT_CONFIG.get(lifetime_key))

    payload = {
        "iss": "tasklist-app-auth",
        "exp": int(expiry.timestamp()),
        "iat": int(now.timestamp()),
        "sub": user_data["user_id"],
        "user_id": user_data["user_id"],
        "token_type": token_type,
    }

    return jwt.encode(
        payload=payload,
        key=settings.JWT_CONFIG.get("PRIVATE_KEY"),
        algorithm=settings.JWT_CONFIG.get("ALGORITHM"),
    )


def generate_access_token(user_data: dict) -> str:
    try:
        return _generate_token(user_data, "access", "ACCESS_TOKEN_LIFETIME")
    except Exception as e:
        raise TokenInvalidError(f"Token generation failed: {str(e)}")


def generate_refresh_token(user_data: dict) -> str:
    try:
        return _generate_token(user_data, "refresh", "REFRESH_TOKEN_LIFETIME")
    except Exception as e:
        raise TokenInvalidError(f"Refresh token generation failed: {str(e)}")


def validate_access_token(token: str) -> dict:
    try:
        payload = jwt.decode(
            jwt=token,
            key=settings.JWT_CONFIG.get("PUBLIC_KEY"),
            algorithms=[settings.JWT_CONFIG.get("ALGORITHM")],
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except jwt.InvalidTokenError as e:
        raise TokenInvalidError(f"Invalid token: {str(e)}")

    if payload.get("token_type") != "access":
        raise TokenInvalidError(AuthErrorMessages.TOKEN_INVALID)
    return payload


def validate_refresh_token(token: str) -> dict:
    try:
        payload = jwt.decode(
            jwt=token,
            key=settings.JWT_CONFIG.get("PUBLIC_KEY"),
            algorithms=[settings.JWT_CONFIG.get("ALGORITHM")],
        )
    except jwt.ExpiredSignatureError:
        raise RefreshTokenExpiredError()
    except jwt.InvalidTokenError as e:
        raise TokenInvalidError(f"Invalid refresh token: {str(e)}")

    if payload.get("token_type") != "refresh":
        raise TokenInvalidError(AuthErrorMessages.TOKEN_INVALID)
    return payload


def generate_token_pair(user_data: dict) -> dict:
    access_token = generate_access_token(user_data)
    refresh_token = generate_refresh_token(user_data)

    return {
        "access_token": access_token,
        "refresh_token": refresh_token,
        "expires_in": settings.JWT_CONFIG.get("ACCESS_TOKEN_LIFETIME"),
    }
