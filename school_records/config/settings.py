"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
from typing import Dict
from dotenv import load_dotenv

load_dotenv()

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

# Database Configuration
class DatabaseConfig:
    DB_URL = os.getenv("DB_URL", "mongodb://localhost:27017")
    DB_NAME = os.getenv("DB_NAME", "school_records")

    MONGO_CLIENT_CONFIG = {
        'maxPoolSize': safe_int_env("MONGO_MAX_POOL_SIZE", "50"),
        'connectTimeoutMS': 10000,
        'serverSelectionTimeoutMS': 10000,
        'socketTimeoutMS': 60000,
        'retryWrites': True,
        'retryReads': True,
    }

# Collection names (one per entity)
COLLECTIONS: Dict[str, str] = {
    'registration_collection': os.getenv("REGISTRATION_COLLECTION", "registrations"),
    'payment_type_collection': os.getenv("PAYMENT_TYPE_COLLECTION", "paymenttypes"),
    'student_collection': os.getenv("STUDENT_COLLECTION", "students"),
    'parent_collection': os.getenv("PARENT_COLLECTION", "parents"),
}

# Pagination Configuration
class PaginationConfig:
    DEFAULT_PAGE = 1
    DEFAULT_PER_PAGE = safe_int_env("DEFAULT_PER_PAGE", "30")
    MAX_PER_PAGE = safe_int_env("MAX_PER_PAGE", "1000")

# Report Configuration
class ReportConfig:
    FORM_COUNT_YEARS = safe_int_env("FORM_COUNT_YEARS", "3")
    EXCEL_MIMETYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

# Logging Configuration
class LogConfig:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
    BACKUP_COUNT = 5
