"""
Feedback session error handling utilities.

Provides a decorator for consistent error handling across feedback
session API endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError

from feedback_backend.core.exceptions import (
    InvalidHttpRequestBodyError,
    QuestionCopyError,
    UnauthorizedAccessError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_feedback_session_errors(func: F) -> F:
    """
    Decorator to translate domain errors into HTTPExceptions.

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

        except UnauthorizedAccessError as e:
            logger.warning("Unauthorized feedback session access", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=str(e)
            )

        except QuestionCopyError as e:
            logger.warning(
                "Question copy failed",
                extra={"error": str(e), **e.details}
            )
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": str(e), **e.details}
            )

        except InvalidHttpRequestBodyError as e:
            logger.warning("Invalid feedback session request", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )

        except ValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.errors(include_url=False, include_context=False, include_input=False)
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in feedback session operation",
                extra={"error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during feedback session operation"
            )

    return wrapper  # type: ignore
