import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

BACKEND_CONFIG = {
    "url": os.getenv("BACKEND_URL", "http://localhost:8000"),
    "timeout": float(os.getenv("BACKEND_TIMEOUT", "30")),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
