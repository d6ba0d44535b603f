"""
Centralized application-specific logging using Loguru.

This module provides a function-based logging mechanism (`LOG`) that dynamically
respects the `beQuiet` flag from application settings.

Features:
- A custom `LOG` function for application-specific debug logging.
- Dynamic checking of the `beQuiet` flag to suppress logs when necessary.
- Consistent and customizable logging format.

Usage:
- Use `LOG` for internal tracing of the replacement engine and plugin.
- User-facing diagnostics go through rich consoles, not through `LOG`.

Example:
    from replacetmpl.lib.log import LOG
    LOG("Merged 3 replacement sources.")

Environment:
- Set `RTM_BEQUIET=True` to suppress detailed logging output.
"""

from loguru import logger
from typing import Any
import sys

# Create a distinct logger instance for the app
app_logger = logger.bind(app="REPLACETMPL")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >32}</yellow>::"
    "<cyan>{function: <24}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()  # Remove any default handlers
app_logger.add(sys.stderr, format=logger_format)


def LOG(*args: Any, **kwargs: Any) -> None:
    """Log engine and plugin tracing at debug level.

    Settings are looked up on every call so that `beQuiet` changes made
    after import take effect.

    Args:
        args: Positional arguments for the log message
        kwargs: Keyword arguments for additional log metadata
    """
    from replacetmpl.config.settings import appsettings

    if not appsettings.beQuiet:
        app_logger.debug(*args, **kwargs)
