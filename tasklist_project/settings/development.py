# Development specific settings
from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

COOKIE_SETTINGS.update(
    {
        "COOKIE_DOMAIN": None,
        "COOKIE_SECURE": False,
        "COOKIE_SAMESITE": "Lax",
    }
)

CORS_ALLOW_ALL_ORIGINS = True
