"""
Logger factory for rid.

Provides:
- get_logger(): Get a configured logger instance
"""

import structlog
from structlog.stdlib import BoundLogger


def get_logger(name: str) -> BoundLogger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        structlog BoundLogger instance

    Example:
        >>> from rid.logger import get_logger
        >>> log = get_logger(__name__)
        >>> log.debug("stream_reseeded", reseed_count=3)
    """
    return structlog.get_logger(name)

