import logging
import os
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

APP_NAME = "sp"
VERSION = "1.0.0"

LOG_LEVEL = os.getenv("SP_LOG_LEVEL", "INFO").upper()
CONSOLE_LOG_LEVEL = os.getenv("SP_CONSOLE_LOG_LEVEL", "WARNING").upper()


def _default_config_dir():
    base = os.getenv("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
    return os.path.join(base, APP_NAME)


CONFIG_DIR = os.getenv("SP_CONFIG_DIR") or _default_config_dir()
LOG_FILE_NAME = f"{APP_NAME}.log"


def _int_env(name, default, minimum=None):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using default.")
        return default
    if minimum is not None and value < minimum:
        logger.warning(f"Ignoring {name}={value}: must be at least {minimum}, using default.")
        return default
    return value


# Parallel Configuration
WORKERS = _int_env("SP_WORKERS", None, minimum=1)  # None = hardware concurrency
BATCH_SIZE = _int_env("SP_BATCH_SIZE", 256, minimum=1)

# Highlighting
HIGHLIGHT_STYLE = os.getenv("SP_HIGHLIGHT_STYLE", "bold rgb(112,110,255)")
NO_COLOR = bool(os.getenv("NO_COLOR"))
