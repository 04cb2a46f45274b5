"""
Error handling utilities for the console API.

Provides a decorator that maps domain exceptions to HTTP responses, and
a helper that turns a failed store result into an exception.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError

from gm_tracker.core.exceptions import (
    AuthenticationError,
    NotFoundError,
    RemoteBackendError,
    StoreError,
    UnsupportedOperationError,
)
from gm_tracker.models.common import StoreResult

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])
T = TypeVar("T")


def raise_for_result(result: StoreResult[T], operation: str, table: str | None = None) -> T | None:
    """
    Return the result value, or raise StoreError if the call failed.

    Args:
        result: Store call outcome
        operation: Operation name for the error context
        table: Collection involved

    Returns:
        The result value

    Raises:
        StoreError: If the result is not ok
    """
    if not result.ok:
        raise StoreError(result.error or "Store operation failed", operation=operation, table=table)
    return result.value


def handle_tracker_errors(func: F) -> F:
    """
    Decorator to transform domain errors into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except AuthenticationError as e:
            logger.warning("Authentication failed", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

        except UnsupportedOperationError as e:
            logger.warning("Unsupported operation", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail=e.message)

        except NotFoundError as e:
            logger.warning("Resource not found", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except (StoreError, RemoteBackendError) as e:
            logger.error("Data store operation failed", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

        except ValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=422,
                detail=e.errors(include_url=False, include_context=False),
            )

        except ValueError as e:
            logger.warning("Invalid request (ValueError)", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except Exception as e:
            logger.exception("Unexpected failure in console operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred: {str(e)}",
            )

    return wrapper  # type: ignore
