"""Entry point for adjusted-value.

Builds one holder from the configured initial value, prints its adjusted
value as ``<label>: <n>`` on stdout, and configures structured logging on
stderr so the output line stays the only thing on stdout.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

import structlog
from pydantic import ValidationError

from adjusted_value.config import Settings, get_settings
from adjusted_value.exceptions import AdjustedValueError
from adjusted_value.holder import ValueHolder


def configure_structlog(log_level: str) -> None:
    """Configure structlog for structured logging.

    Args:
        log_level: Logging level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def format_line(label: str, value: int) -> str:
    """Render the single output line."""
    return f"{label}: {value}"


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for adjusted-value.

    Args:
        argv: Command-line arguments. Accepted for the console-script
            signature and otherwise unused.

    Returns:
        Process exit status.
    """
    try:
        settings: Settings = get_settings()
    except ValidationError as e:
        print(f"Failed to load settings: {e}", file=sys.stderr)
        return 1

    configure_structlog(settings.log_level)
    logger = structlog.get_logger(__name__)
    logger.debug(
        "Starting",
        app_name=settings.app_name,
        version=settings.app_version,
        initial_value=settings.initial_value,
        int_bits=settings.int_bits,
    )

    try:
        data = ValueHolder(settings.initial_value, bits=settings.int_bits)
        adjusted = data.adjusted_value()
    except AdjustedValueError as e:
        logger.error("Could not compute adjusted value", error=e.message)
        print(e.message, file=sys.stderr)
        return 1

    logger.debug("Adjusted value computed", value=data.value, adjusted=adjusted)
    print(format_line(settings.label, adjusted))
    return 0


def run() -> None:
    """Console-script wrapper that exits with the status from main()."""
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
