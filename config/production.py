import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = Config.db_config()

DEBUG = False

AUTO_INIT_DB = Config.AUTO_INIT_DB

LOG_LEVEL = Config.LOG_LEVEL
