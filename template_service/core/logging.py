"""Process-wide logging configuration."""

from __future__ import annotations

import logging.config

from template_service.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Install the root handler; uvicorn loggers propagate into it."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": LOG_FORMAT,
                    "datefmt": settings.logging.time_format,
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                },
            },
            "root": {"level": settings.log_level, "handlers": ["console"]},
            "loggers": {
                "uvicorn": {"level": settings.log_level, "handlers": [], "propagate": True},
                "uvicorn.error": {"level": settings.log_level, "handlers": [], "propagate": True},
                "uvicorn.access": {"level": "WARNING", "handlers": [], "propagate": True},
                "sqlalchemy.engine": {
                    "level": "INFO" if settings.database.echo else "WARNING",
                    "handlers": [],
                    "propagate": True,
                },
            },
        }
    )
