"""
Error handling utilities for standardized error logging.

Commands catch errors at the top level and report them through these helpers,
then exit with a non-zero status. Nothing is retried.
"""

import logging
import traceback

from ..exceptions import GenericRepoError, RemoteStatusError

# Longest server body echoed into the error log
MAX_BODY_PREVIEW = 500


def _preview(body: str) -> str:
    """Truncate a response body for logging."""
    if len(body) > MAX_BODY_PREVIEW:
        return body[:MAX_BODY_PREVIEW] + "..."
    return body


def handle_http_status_error(error: RemoteStatusError, operation: str) -> None:
    """
    Log a non-2xx response with a hint based on the status code.

    Args:
        error: The status error to report
        operation: Description of the operation that failed
    """
    status = error.status_code
    target = error.target or "unknown target"

    if status == 401:
        logging.error(
            "Authentication failed during %s (%s): invalid credentials. "
            "Please check [auth] username and token in the configuration file.",
            operation,
            target,
        )
    elif status == 403:
        logging.error(
            "Authentication failed during %s (%s): you don't have permission to access this resource.",
            operation,
            target,
        )
    elif status == 404:
        logging.error("Resource not found during %s: %s", operation, target)
    elif status >= 500:
        logging.error("Server error during %s (%s): HTTP %d", operation, target, status)
    else:
        logging.error("HTTP error during %s (%s): HTTP %d", operation, target, status)

    if error.body:
        logging.error("Response body: %s", _preview(error.body))


def handle_tool_error(error: GenericRepoError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Log a genrepo-tool error with standardized formatting.

    Args:
        error: The error to report
        operation: Description of the command that failed
        log_traceback: Whether to log the full traceback at debug level
    """
    if isinstance(error, RemoteStatusError):
        handle_http_status_error(error, error.operation or operation)
    else:
        logging.error("%s failed: %s", operation.capitalize(), error)

    if error.__cause__ is not None:
        logging.debug("Caused by: %r", error.__cause__)
    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle unexpected errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())


__all__ = [
    "handle_http_status_error",
    "handle_tool_error",
    "handle_generic_error",
]
