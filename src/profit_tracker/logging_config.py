# logging_config.py

import logging
import logging.config
import os

LOG_DIR = "logs"
APP_LOGGER = "src.profit_tracker"
MAX_LOG_BYTES = 5 * 1024 * 1024


def build_logging_config(log_dir: str = LOG_DIR, debug: bool = False) -> dict:
    console_level = "DEBUG" if debug else "INFO"

    def rotating_file(filename: str, level: str) -> dict:
        return {
            "level": level,
            "class": "logging.handlers.RotatingFileHandler",
            "filename": os.path.join(log_dir, filename),
            "maxBytes": MAX_LOG_BYTES,
            "backupCount": 3,
            "encoding": "utf-8",
            "formatter": "verbose",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
            "verbose": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - "
                "%(message)s [%(filename)s:%(lineno)s]",
            },
        },
        "handlers": {
            "console": {
                "level": console_level,
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
            "file": rotating_file("app.log", "DEBUG"),
            "error_file": rotating_file("error.log", "ERROR"),
        },
        "loggers": {
            "uvicorn": {
                "level": "INFO",
                "handlers": ["console", "file"],
                "propagate": False,
            },
            APP_LOGGER: {
                "level": "DEBUG",
                "handlers": ["console", "file", "error_file"],
                "propagate": False,
            },
        },
        "root": {"level": "INFO", "handlers": ["console", "file"]},
    }


def setup_logging(debug: bool = False, log_dir: str = LOG_DIR):
    os.makedirs(log_dir, exist_ok=True)
    logging.config.dictConfig(build_logging_config(log_dir, debug))
