"""
Logging configuration for the school records service.
Centralizes all logging setup to follow DRY and SoC principles.
"""
import os
import logging
from logging.handlers import RotatingFileHandler
from school_records.config.settings import LogConfig

ROOT_LOGGER_NAME = "school_records"
LOG_FILE_NAME = "school_records.log"

def setup_logging(log_dir=None, level=None):
    """
    Set up logging for the service.

    Args:
        log_dir: Directory for the rotating log file (defaults to LOG_DIR)
        level: Log level name (defaults to LOG_LEVEL)

    Returns:
        The package logger, configured with file and console handlers
    """
    log_dir = log_dir or LogConfig.LOG_DIR
    level = (level or LogConfig.LOG_LEVEL).upper()

    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Only configure if handlers haven't been added yet
    if logger.handlers:
        return logger

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    try:
        os.makedirs(log_dir, exist_ok=True)
        # delay=True avoids opening the file until the first record
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=LogConfig.MAX_LOG_SIZE,
            backupCount=LogConfig.BACKUP_COUNT,
            delay=True
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"Could not set up file logging: {e}")

    return logger
