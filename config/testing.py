import os

from .config import Config

SECRET_KEY = "test-secret"

DB_CONFIG = Config.db_config()

DEBUG = False
TESTING = True

AUTO_INIT_DB = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
