import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "uniconnect_test"),
}

CORS_ORIGINS = ["http://localhost:5173"]

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTH_REQUIRED = False

AUTO_INIT_DB = False
AUTO_SEED_DB = False
