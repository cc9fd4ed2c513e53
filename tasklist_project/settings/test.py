from .base import *

DEBUG = False

# Django's test cases still expect a "default" alias; MongoDB is provided by testcontainers.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "testdb")

LOGGING["root"]["level"] = "WARNING"
