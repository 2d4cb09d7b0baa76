import os

from rich.text import Text

from config import CONFIG_DIR, LOG_FILE_NAME


def log_file_path(config_dir=CONFIG_DIR):
    return os.path.join(config_dir, LOG_FILE_NAME)


def show_log_file(config_dir=CONFIG_DIR):
    """
    Returns the log location and content for the `log` subcommand.
    Raises OSError if the log exists but cannot be read.
    """
    log_path = log_file_path(config_dir)
    if not os.path.exists(log_path):
        text = Text("No log file found: ", style="bold rgb(250,0,104)")
        text.append(log_path, style="")
        return text

    with open(log_path, 'r', encoding='utf-8') as f:
        content = f.read()

    text = Text("Log location: ", style="italic dim")
    text.append(log_path, style="")
    text.append("\n")
    text.append(content.rstrip("\n"))
    return text
