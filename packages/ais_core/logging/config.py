import logging
import logging.config
import os

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../../"))

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] [%(filename)s:%(lineno)d] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def build_logging_config(log_dir: str, console_level: str = "INFO") -> dict:
    """
    Console at `console_level`, plus every record in <log_dir>/ais.log,
    rotated at midnight with a week of history.
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": LOG_FORMAT, "datefmt": LOG_DATEFMT},
        },
        "handlers": {
            "console": {
                "level": console_level,
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
            "file": {
                "level": "DEBUG",
                "class": "logging.handlers.TimedRotatingFileHandler",
                "filename": os.path.join(log_dir, "ais.log"),
                "when": "midnight",
                "backupCount": 7,
                "encoding": "utf-8",
                "formatter": "standard",
            },
        },
        "root": {"handlers": ["console", "file"], "level": "DEBUG"},
    }


def setup_logging():
    """Apply the logging configuration. LOG_DIR and LOG_LEVEL come from the environment."""
    log_dir = os.environ.get("LOG_DIR", os.path.join(PROJECT_ROOT, "logs"))
    os.makedirs(log_dir, exist_ok=True)
    logging.config.dictConfig(build_logging_config(log_dir, os.environ.get("LOG_LEVEL", "INFO").upper()))


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        setup_logging()
    return logging.getLogger(name)
