import os

from . import split_origins

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "uniconnect"),
}

CORS_ORIGINS = split_origins(
    os.getenv("CORS_ORIGINS", "http://localhost:5173,https://uniconnect-frontend.vercel.app")
)

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Role guards on /api routes. Off by default so the frontend can call admin routes directly.
AUTH_REQUIRED = bool(int(os.getenv("AUTH_REQUIRED", "0")))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
