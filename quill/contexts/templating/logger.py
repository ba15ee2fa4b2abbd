"""
Templating context logger.

Provides logging interface for the template gallery with automatic [gallery] prefix.
All templating modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[gallery]"


def _log_debug(message: str) -> None:
    """Log debug message with [gallery] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [gallery] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")
