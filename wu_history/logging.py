import logging
import sys
from typing import Optional, TextIO

import structlog


def init_logging(
    log_level: str = "INFO",
    json_logs: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> structlog.BoundLogger:
    """Configure stdlib logging and structlog for the service and the CLI.

    JSON lines are emitted unless ``json_logs`` is False; when it is None the
    console renderer is used only at DEBUG level. Context bound through
    ``structlog.contextvars`` (the request id, for instance) is merged into
    every event. The CLI passes ``sys.stderr`` so its stdout stays clean.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    if json_logs is None:
        json_logs = level != logging.DEBUG

    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=level,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger("wu_history")
