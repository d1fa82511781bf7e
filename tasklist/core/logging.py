import logging
import sys

import structlog

from tasklist.core.config import Environment, settings


# Structured Logging
# Every log line is an event name plus keyword context, e.g.
#   logger.info("task_created", task_id=1, user_id=2)
# Console output for humans in dev, JSON lines for log shippers in prod.
def setup_logging() -> None:
    """Configure stdlib logging and structlog. Safe to call more than once."""
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == "json" or settings.ENVIRONMENT == Environment.PRODUCTION:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*shared_processors, renderer],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


setup_logging()

logger = structlog.get_logger("tasklist")
