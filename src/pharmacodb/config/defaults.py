"""
Default configuration values.
"""
import os

# Base paths
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../.."))
DATA_DIR = os.path.join(BASE_DIR, "data")

# Database defaults
DEFAULT_DB_PATH = os.path.join(DATA_DIR, "pharmacodb.db")
DEFAULT_POOL_SIZE = 5
DEFAULT_READ_ONLY = True

# Pagination defaults
DEFAULT_PAGE_LIMIT = 30
MAX_PAGE_LIMIT = 1000

# Logging / monitoring
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_SENTRY_DSN = ""

# HTTP
DEFAULT_CORS_ORIGINS = ["*"]
