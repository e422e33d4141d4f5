"""Logging setup for applications embedding the models.

The models only emit debug-level diagnostics through
``structlog.get_logger(__name__)``. Call ``setup_logging()`` once at startup;
set ``SOUNDTOUCH_PACKAGE_LOG_LEVEL=DEBUG`` to see them.
"""

import logging

import structlog

from soundtouch_api.config import Settings, settings


def setup_logging(config: Settings | None = None) -> None:
    """Configure structlog for structured logging."""
    config = config or settings

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if config.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(config.log_level.upper())

    # Model diagnostics stay quiet unless asked for
    logging.getLogger("soundtouch_api").setLevel(config.package_log_level.upper())
