"""Structured logging for runscript using structlog."""

import logging

import structlog
from structlog.types import FilteringBoundLogger


def configure_structlog(force: bool = False):
    """Route structlog through stdlib logging.

    Nothing is printed until a handler is attached (see setup_logging), so
    importing the library never writes to the caller's streams. An existing
    structlog configuration is left alone unless force is set.
    """
    if structlog.is_configured() and not force:
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def setup_logging(
    log_format: str = "pretty", log_colors: bool = True, level: str = "WARNING"
) -> None:
    """Attach a root handler rendering pretty or JSON output."""
    configure_structlog(force=True)

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=log_colors)

    logging.root.handlers = []
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    logging.captureWarnings(True)


# Configure structlog on module import
configure_structlog()


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a configured structlog logger."""
    return structlog.get_logger(name)
