"""
Service exceptions and error responses.

Defines custom exceptions and a standard error payload for callers that
turn service failures into responses.
"""

from http import HTTPStatus
from typing import Any, Dict, Optional

from .logging import get_logger

logger = get_logger(__name__)


class QuizServiceError(Exception):
    """Base exception for quiz service errors"""

    def __init__(
        self,
        message: str,
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = int(status_code)
        self.details = details or {}
        super().__init__(self.message)


class QuestionNotFoundError(QuizServiceError):
    """Raised when a question is not in the question bank"""

    def __init__(self, question_id: str):
        super().__init__(
            message=f"Question '{question_id}' not found",
            status_code=HTTPStatus.NOT_FOUND,
            details={"question_id": question_id}
        )


class TemplateNotFoundError(QuizServiceError):
    """Raised when a quiz template is missing or inactive"""

    def __init__(self, template_id: str):
        super().__init__(
            message=f"Quiz template '{template_id}' not found or inactive",
            status_code=HTTPStatus.NOT_FOUND,
            details={"template_id": template_id}
        )


class AttemptAlreadyCompletedError(QuizServiceError):
    """Raised when an attempt that is no longer in progress is submitted"""

    def __init__(self, attempt_id: str, status: str):
        super().__init__(
            message=f"Attempt '{attempt_id}' is already {status}",
            status_code=HTTPStatus.BAD_REQUEST,
            details={"attempt_id": attempt_id, "status": status}
        )


class AttemptNotCompletedError(QuizServiceError):
    """Raised when results are requested for an unfinished attempt"""

    def __init__(self, attempt_id: str):
        super().__init__(
            message=f"Attempt '{attempt_id}' is not completed yet",
            status_code=HTTPStatus.BAD_REQUEST,
            details={"attempt_id": attempt_id}
        )


class AttemptLimitExceededError(QuizServiceError):
    """Raised when a user has used up the attempts a template allows"""

    def __init__(self, template_id: str, used: int, allowed: int):
        super().__init__(
            message=f"No attempts left for '{template_id}': {used}/{allowed} used",
            status_code=HTTPStatus.FORBIDDEN,
            details={"template_id": template_id, "used": used, "allowed": allowed}
        )


class SubmissionValidationError(QuizServiceError):
    """Raised for malformed submissions"""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            details=details
        )


class GradingError(QuizServiceError):
    """Raised when grading an attempt fails unexpectedly"""

    def __init__(self, attempt_id: str, error: str):
        super().__init__(
            message=f"Failed to grade attempt '{attempt_id}': {error}",
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            details={"attempt_id": attempt_id, "error": error}
        )


def error_response(error: Exception, include_details: bool = True) -> tuple[int, Dict[str, Any]]:
    """
    Build the standard error payload.

    Args:
        error: Exception to describe
        include_details: Add QuizServiceError details to the payload

    Returns:
        Tuple of (status_code, payload)
    """
    if isinstance(error, QuizServiceError):
        status_code = error.status_code
        message = error.message
    else:
        status_code = int(HTTPStatus.INTERNAL_SERVER_ERROR)
        message = "An internal error occurred"

    error_data: Dict[str, Any] = {
        "error": {
            "type": error.__class__.__name__,
            "message": message,
        }
    }

    if isinstance(error, QuizServiceError) and include_details:
        error_data["error"]["details"] = error.details

    logger.error(
        f"Error occurred: {error}",
        extra_data={
            "error_type": error.__class__.__name__,
            "status_code": status_code,
            **(error.details if isinstance(error, QuizServiceError) else {})
        },
        exc_info=not isinstance(error, QuizServiceError)
    )

    return status_code, error_data
