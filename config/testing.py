import os

SECRET_KEY = "test-secret"

BACKEND_CONFIG = {
    "url": os.getenv("BACKEND_URL", "http://backend.test"),
    "timeout": 5,
}

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
