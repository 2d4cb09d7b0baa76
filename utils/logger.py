import logging
import os
import sys

from config import CONFIG_DIR, CONSOLE_LOG_LEVEL, LOG_FILE_NAME, LOG_LEVEL

FILE_FORMAT = '%(asctime)s - %(levelname)s - [%(name)s] %(message)s'


def setup_logger(name="sp", log_dir=CONFIG_DIR, level=LOG_LEVEL, console_level=CONSOLE_LOG_LEVEL):
    # Configure Root Logger
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates if called multiple times
    if logger.handlers:
        logger.handlers = []

    # Console Handler, stderr since stdout carries the results
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    # File Handler, one appended log file
    if log_dir:
        try:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(log_dir, LOG_FILE_NAME), mode='a', encoding='utf-8')
        except OSError as e:
            logger.error(f"Unable to find or create a config directory: {e}")
        else:
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
            logger.addHandler(file_handler)

    return logging.getLogger(name)
