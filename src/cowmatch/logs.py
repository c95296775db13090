"""
Structured logging setup.

Library modules only call ``structlog.get_logger(__name__)``; the embedding
service decides how events are rendered by calling :func:`setup_logging`.
"""

import logging
import sys
from typing import Optional

import structlog

from cowmatch.config import MatcherConfig, get_config


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure structured logging."""
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
            structlog.processors.JSONRenderer() if json_format
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        stream=sys.stdout,
    )


def setup_logging_from_config(config: Optional[MatcherConfig] = None) -> None:
    """Configure logging from the matcher configuration."""
    config = config or get_config()
    setup_logging(config.log_level, config.log_json)
