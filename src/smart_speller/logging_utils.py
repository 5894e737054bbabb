"""
Structured logging for smart_speller using structlog.

Log lines go to stderr so command output on stdout stays machine readable.
Production runs render JSON, everything else the console renderer.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.typing import EventDict, Processor


class ServiceContext:
    """Processor stamping the service name and environment on every event."""

    def __init__(self, service_name: str, environment: str) -> None:
        self.service_name = service_name
        self.environment = environment

    def __call__(self, logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["service.name"] = self.service_name
        event_dict["deployment.environment"] = self.environment
        return event_dict


def configure_service_logging(
    service_name: str,
    environment: str = "development",
    log_level: str = "INFO",
    json_output: bool | None = None,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        service_name: Name stamped on every event (e.g., "smart_speller")
        environment: Deployment environment name
        log_level: Logging level (defaults to "INFO")
        json_output: Render JSON instead of console lines; defaults to True
            only in production
    """
    if json_output is None:
        json_output = environment == "production"

    processors: list[Processor] = [
        merge_contextvars,
        ServiceContext(service_name, environment),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if json_output:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors += [
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_service_logger(name: str | None = None) -> Any:
    """
    Create a service logger with optional name binding.

    Args:
        name: Optional logger name (e.g., "smart_speller.lookup")

    Returns:
        A lazy structlog logger; configuration is resolved on first use, so
        module level loggers pick up configure_service_logging() called later
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()


def bind_request_context(correlation_id: str, **additional_context: Any) -> None:
    """Replace the contextvars bound for the current request.

    Everything bound here is merged into every log line emitted until the next
    call.
    """
    clear_contextvars()
    bind_contextvars(correlation_id=correlation_id, **additional_context)
