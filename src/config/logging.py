"""Structured logging setup (structlog + stdlib ``logging``).

``configure_logging()`` is called once from ``config.settings``; it wires
structlog to the stdlib logging tree so that Django, DRF and application
loggers all render through the same JSON formatter.  ``reset_logging()``
undoes the structlog configuration (used by tests and shutdown hooks).
"""

from __future__ import annotations

import re
from typing import Any, Dict

import structlog

SENSITIVE_PATTERN = re.compile(
    r"(password|passwd|secret|token|authorization)"
    r"""([=:]\s*["']?)([^\s,}"']+)""",
    re.IGNORECASE,
)

EMAIL_PATTERN = re.compile(r"([A-Za-z0-9._%+-])[A-Za-z0-9._%+-]*@([A-Za-z0-9.-]+)")

SENSITIVE_KEYS = frozenset({"password", "token", "authorization", "secret"})


def mask_sensitive_data(_, __, event_dict):
    """Processor that masks credentials, tokens and email local parts."""
    for key, value in list(event_dict.items()):
        if key in SENSITIVE_KEYS and value:
            event_dict[key] = "***MASKED***"
        elif isinstance(value, str):
            value = SENSITIVE_PATTERN.sub(r"\1\2***MASKED***", value)
            event_dict[key] = EMAIL_PATTERN.sub(r"\1***@\2", value)
    return event_dict


# Shared processors used by both structlog and stdlib logging
SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    mask_sensitive_data,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def configure_logging() -> None:
    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def reset_logging() -> None:
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


def build_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """Return the Django ``LOGGING`` dict rendering every record as JSON."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    structlog.processors.format_exc_info,
                    structlog.processors.JSONRenderer(),
                ],
                "foreign_pre_chain": SHARED_PROCESSORS,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
        "loggers": {
            "django": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
            "django.server": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
        },
    }
