# src/cryptocompare_client/utils/logger.py
"""Structured logging configuration using structlog.
All modules should import logger via:
    from cryptocompare_client.utils.logger import logger
"""
import logging
import sys
import structlog

LOGGER_NAME = "cryptocompare_client"


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    # Only the package logger; the host application owns the root level
    logging.getLogger(LOGGER_NAME).setLevel(getattr(logging, level.upper(), logging.INFO))
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


# Initialize at import time
configure_logging()
logger = structlog.get_logger(LOGGER_NAME)
