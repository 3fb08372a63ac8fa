from config.config import Config

SECRET_KEY = "test-secret"

DB_CONFIG = Config.db_config()
STORAGE_BACKEND = "memory"
LOCK_TIMEOUT_SECONDS = 1.0

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False

LOG_LEVEL = "WARNING"
LOG_FORMAT = Config.LOG_FORMAT
