"""Process-wide logging configuration."""

from __future__ import annotations

import logging.config

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def config_configure_logging(log_level: str) -> None:
    """Install one stderr handler on the root logger.

    Args:
        log_level: Validated log level name, for example `INFO`.

    Returns:
        None: Configures logging as side effect.

    Raises:
        ValueError: Raised by the logging module for unknown level names.
    """

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": _LOG_FORMAT}},
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stderr",
                }
            },
            "root": {"level": log_level, "handlers": ["stderr"]},
            # httpx logs every request at INFO
            "loggers": {"httpx": {"level": "WARNING"}},
        }
    )
