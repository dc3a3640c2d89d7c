"""Utility functions for htmlprune."""

import logging
from typing import Any

from htmlprune.exceptions import generate_correlation_id


def log_with_correlation(
    logger: logging.Logger,
    level: int,
    message: str,
    correlation_id: str | None = None,
    **kwargs: Any,
) -> str:
    """
    Emit a structured log record tagged with a correlation ID.

    Context values travel in the record's ``extra`` so handlers and tests can
    read them as attributes. Nothing is built when ``level`` is disabled.

    Args:
        logger: Logger instance to use.
        level: Logging level (e.g., logging.DEBUG).
        message: Log message.
        correlation_id: ID shared by related records. Generated when None.
        **kwargs: Context values attached to the record.

    Returns:
        The correlation ID used, for tagging follow-up records.
    """
    corr_id = correlation_id or generate_correlation_id()
    if logger.isEnabledFor(level):
        logger.log(level, message, extra={"correlation_id": corr_id, **kwargs})
    return corr_id
