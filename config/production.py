from config.config import Config

SECRET_KEY = Config.SECRET_KEY

DB_CONFIG = Config.db_config()
STORAGE_BACKEND = "mysql"
LOCK_TIMEOUT_SECONDS = Config.LOCK_TIMEOUT_SECONDS

DEBUG = False

AUTO_INIT_DB = Config.AUTO_INIT_DB
AUTO_SEED_DB = Config.AUTO_SEED_DB

LOG_LEVEL = Config.LOG_LEVEL
LOG_FORMAT = Config.LOG_FORMAT
