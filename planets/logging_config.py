"""
Logging configuration for the Planets networking core
"""

import logging
import logging.config
import os
import re
from typing import Any, Dict, Optional

_QUERY_STRING = re.compile(r"(https?://[^\s?#]+)\?[^\s#]*")


class QueryStringFilter(logging.Filter):
    """Filter that strips query strings from URLs in log messages."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Rewrite the message with query strings removed; never drops a record."""
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            return True
        if "?" in message:
            record.msg = _QUERY_STRING.sub(r"\1?<redacted>", message)
            record.args = ()
        return True


def get_logging_config(level: Optional[str] = None) -> Dict[str, Any]:
    """Get logging configuration with query string redaction."""
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "query_string_filter": {
                "()": QueryStringFilter
            }
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stdout",
                "filters": ["query_string_filter"]
            }
        },
        "loggers": {
            "planets": {
                "handlers": ["default"],
                "level": level,
                "propagate": False
            },
            "httpx": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False
            }
        },
        "root": {
            "level": level,
            "handlers": ["default"]
        }
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the logging configuration process-wide."""
    logging.config.dictConfig(get_logging_config(level))
