"""Logging setup for the DB-IP lookup service.

The library modules only obtain loggers under the `dbip` namespace; handlers
and formatters are installed by the service through configure_logging().
"""

import os
from logging import config, getLevelName, getLogger

LOGGER_NAME = "dbip"


def build_log_config(level: str | None = None) -> dict:
    """Uvicorn-formatted handlers for the `dbip` and `uvicorn` loggers."""
    log_level = getLevelName(level or os.getenv("LOG_LEVEL", "INFO"))
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": '%(levelprefix)s %(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s',
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": "%(levelprefix)s %(asctime)s [%(name)s] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "access": {"class": "logging.StreamHandler", "formatter": "access", "stream": "ext://sys.stdout"},
            "default": {"class": "logging.StreamHandler", "formatter": "default", "stream": "ext://sys.stderr"},
        },
        "loggers": {
            LOGGER_NAME: {"handlers": ["default"], "level": log_level, "propagate": False},
            "uvicorn": {"handlers": ["default"], "level": log_level, "propagate": True},
            "uvicorn.access": {"handlers": ["access"], "level": log_level, "propagate": False},
            "uvicorn.error": {"level": log_level, "propagate": False},
        },
    }


def configure_logging(level: str | None = None) -> None:
    config.dictConfig(build_log_config(level))


logger = getLogger(LOGGER_NAME)
