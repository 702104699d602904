from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from app.core.config import settings


def _add_service(_, __, event_dict):
    event_dict.setdefault("service", settings.app_name)
    return event_dict


def setup_logging(level: Optional[str] = None):
    """JSON event logs on stdout; ``level`` defaults to ``settings.log_level``."""
    level = (level or settings.log_level).upper()
    numeric = getattr(logging, level, logging.INFO)

    root = logging.getLogger()
    root.setLevel(numeric)
    root.handlers.clear()

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(stream)

    # request lines are noise next to the event log unless debugging
    logging.getLogger("uvicorn.access").setLevel(logging.DEBUG if settings.debug else logging.WARNING)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
    )
    return structlog.get_logger()
