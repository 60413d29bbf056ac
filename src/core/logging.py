"""Logging configuration.

structlog events and plain stdlib records (``django.request``, ``django.server``
and third-party loggers) are rendered by one ``ProcessorFormatter`` so every
line on stderr is a JSON object with the same keys.
"""

from __future__ import annotations

import logging

import structlog

SHARED_PROCESSORS = [
    structlog.processors.TimeStamper(fmt="iso", utc=True),
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def build_logging_config(level: str) -> dict:
    """Return a ``dictConfig`` mapping for Django's ``LOGGING`` setting."""
    level_name = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.JSONRenderer(default=str),
                ],
                "foreign_pre_chain": SHARED_PROCESSORS,
            },
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "json",
            },
        },
        "root": {"handlers": ["stderr"], "level": level_name},
        "loggers": {
            # Replaces Django's default console/mail_admins handlers.
            "django": {"handlers": ["stderr"], "level": level_name, "propagate": False},
            "django.server": {"handlers": ["stderr"], "level": level_name, "propagate": False},
        },
    }


def configure_logging(level: str) -> None:
    """Route structlog events into the stdlib handlers set up by ``LOGGING``."""
    level_value = logging._nameToLevel.get(level.upper(), logging.INFO)

    structlog.configure(
        processors=[*SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
