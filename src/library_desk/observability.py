"""Logfire tracing for the Library Desk."""

import functools
import logging
from collections.abc import Callable
from datetime import datetime

import logfire

from .config import DeskConfig, get_config

logger = logging.getLogger(__name__)


def initialize_observability(config: DeskConfig | None = None) -> bool:
    """Configure logfire for the process.

    When tracing is enabled, spans are exported only if a logfire token is
    present in the environment. When disabled, logfire is still configured
    so command spans stay local and silent.

    Returns:
        True if tracing was enabled
    """
    config = config or get_config()

    if not config.observability_enabled:
        logfire.configure(send_to_logfire=False, console=False)
        logger.debug("Observability disabled via configuration")
        return False

    logfire.configure(
        service_name="library-desk",
        send_to_logfire="if-token-present",
        console=False,
    )
    logger.info("Logfire tracing enabled")
    return True


def trace_command(func: Callable) -> Callable:
    """Decorator to trace command dispatch in a logfire span."""

    @functools.wraps(func)
    def wrapper(desk, command, *args, **kwargs):
        with logfire.span("command {action}", action=command.action) as span:
            start_time = datetime.now()
            result = func(desk, command, *args, **kwargs)
            span.set_attribute("command.is_error", result.is_error)
            span.set_attribute(
                "command.duration_ms", (datetime.now() - start_time).total_seconds() * 1000
            )
            return result

    return wrapper
