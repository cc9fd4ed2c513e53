import os
import sys
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv(
    "SECRET_KEY",
    "django-insecure-8v#q3l@x!t2m6p^k0r$e9w&z1n5y7c4b(d)h+j_u-s=f%a*g",
)

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv("DEBUG", "True").lower() == "true"

ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

MONGODB_URI = os.getenv("MONGODB_URI")
DB_NAME = os.getenv("DB_NAME")

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "corsheaders",
    "rest_framework",
    "drf_spectacular",
    "tasklist",
    "django.contrib.auth",
    "django.contrib.contenttypes",
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "tasklist.middlewares.jwt_auth.JWTAuthenticationMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "tasklist_project.urls"
WSGI_APPLICATION = "tasklist_project.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

# Task lists live in MongoDB only; no relational database is configured.
DATABASES = {}

LANGUAGE_CODE = "en-us"

TIME_ZONE = "UTC"

USE_I18N = True

USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "tasklist.exceptions.exception_handler.handle_exception",
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

TESTING = "test" in sys.argv or "pytest" in sys.modules or os.getenv("TESTING") == "True"

if TESTING:
    # Test JWT configuration (HS256 - simpler for tests)
    JWT_CONFIG = {
        "ALGORITHM": "HS256",
        "PRIVATE_KEY": "test-secret-key-for-jwt-signing-very-long-key-needed-for-security",
        "PUBLIC_KEY": "test-secret-key-for-jwt-signing-very-long-key-needed-for-security",
        "ACCESS_TOKEN_LIFETIME": int(os.getenv("ACCESS_LIFETIME", "3600")),
        "REFRESH_TOKEN_LIFETIME": int(os.getenv("REFRESH_LIFETIME", "604800")),
    }
else:
    JWT_CONFIG = {
        "ALGORITHM": "RS256",
        "PRIVATE_KEY": os.getenv("PRIVATE_KEY"),
        "PUBLIC_KEY": os.getenv("PUBLIC_KEY"),
        "ACCESS_TOKEN_LIFETIME": int(os.getenv("ACCESS_LIFETIME", "3600")),
        "REFRESH_TOKEN_LIFETIME": int(os.getenv("REFRESH_LIFETIME", "604800")),
    }

COOKIE_SETTINGS = {
    "ACCESS_COOKIE_NAME": os.getenv("ACCESS_TOKEN_COOKIE_NAME", "tasklist-access"),
    "REFRESH_COOKIE_NAME": os.getenv("REFRESH_TOKEN_COOKIE_NAME", "tasklist-refresh"),
    "COOKIE_DOMAIN": os.getenv("COOKIE_DOMAIN", "localhost"),
    "COOKIE_SECURE": os.getenv("COOKIE_SECURE", "True").lower() == "true",
    "COOKIE_HTTPONLY": os.getenv("COOKIE_HTTPONLY", "True").lower() == "true",
    "COOKIE_SAMESITE": os.getenv("COOKIE_SAMESITE", "Strict"),
    "COOKIE_PATH": "/",
}

TASK_LIST_SETTINGS = {
    "CSV_FIELDS": ["uuid", "title", "dueDate", "done"],
    "CSV_DELIMITER": ";",
    "CSV_EXPORT_FILENAME": os.getenv("CSV_EXPORT_FILENAME", "tasks.csv"),
    "TASK_UPDATE_EVENT": "task update",
}

NOTIFICATION_CHANNEL = {
    "BACKEND": os.getenv(
        "NOTIFICATION_CHANNEL_BACKEND",
        "tasklist.services.notification_service.InMemoryNotificationChannel",
    ),
}

PUBLIC_PATHS = [
    "/favicon.ico",
    "/v1/health",
    "/api/docs",
    "/api/docs/",
    "/api/schema",
    "/api/schema/",
    "/api/redoc",
    "/api/redoc/",
    "/static/",
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": os.getenv("DJANGO_LOG_LEVEL", "WARNING").upper(),
            "propagate": False,
        },
        "pymongo": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}

# Swagger/OpenAPI Configuration
SPECTACULAR_SETTINGS = {
    "TITLE": "Task List API",
    "DESCRIPTION": "Shared task lists with watchers, live task updates and CSV export",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "SCHEMA_PATH_PREFIX": "/v1/",
    "SWAGGER_UI_SETTINGS": {
        "url": os.getenv("SWAGGER_UI_PATH", "/api/schema"),
    },
    "TAGS": [
        {"name": "tasklists", "description": "Task list operations"},
        {"name": "watchers", "description": "Joining and leaving shared task lists"},
        {"name": "health", "description": "Health check endpoints"},
    ],
}

STATIC_URL = "/static/"

CORS_ALLOWED_ORIGINS = [
    origin for origin in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000").split(",") if origin
]
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOWED_HEADERS = [
    "accept",
    "accept-encoding",
    "authorization",
    "content-type",
    "dnt",
    "origin",
    "user-agent",
    "x-csrftoken",
    "x-requested-with",
]
CORS_EXPOSE_HEADERS = ["content-disposition"]
