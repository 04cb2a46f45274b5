"""
Structured logging helpers for data gateway diagnostics.

Values attached to log records are reduced to short strings so a large
collection or an unprintable object never breaks a log call.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_VALUE_LENGTH = 300


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Reduce a value to a bounded string for a log record.

    Sequences and mappings are summarized by size rather than dumped.

    Args:
        value: Any value
        max_length: Length after which text is cut

    Returns:
        str: Loggable representation
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple, set)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"
    try:
        text = value if isinstance(value, str) else str(value)
    except Exception as e:
        return f"<unprintable {type(value).__name__}: {type(e).__name__}>"
    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log a caught exception at ERROR level with sanitized context fields.

    The record carries ``error_type`` and ``error_msg`` plus every context
    key, so handlers with structured output can index on them.

    Args:
        logger: Logger instance
        message: Summary of what was attempted
        exc: Caught exception
        **context: Extra fields such as backend, operation or table
    """
    fields = {key: safe_log_value(val) for key, val in context.items()}
    fields["error_type"] = type(exc).__name__
    fields["error_msg"] = safe_log_value(str(exc))
    logger.error(f"{message}: {fields['error_msg']}", extra=fields)
