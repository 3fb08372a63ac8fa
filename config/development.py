import os

from config.config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = Config.db_config()
STORAGE_BACKEND = Config.STORAGE_BACKEND
LOCK_TIMEOUT_SECONDS = Config.LOCK_TIMEOUT_SECONDS

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also create the default manager/care worker on startup
AUTO_SEED_DB = Config.AUTO_SEED_DB

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = Config.LOG_FORMAT
