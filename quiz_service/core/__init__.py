"""Core utilities package"""

from .config import settings, get_settings
from .logging import setup_logging, get_logger
from .errors import (
    QuizServiceError,
    QuestionNotFoundError,
    TemplateNotFoundError,
    AttemptAlreadyCompletedError,
    AttemptNotCompletedError,
    AttemptLimitExceededError,
    SubmissionValidationError,
    GradingError,
    error_response,
)

__all__ = [
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "QuizServiceError",
    "QuestionNotFoundError",
    "TemplateNotFoundError",
    "AttemptAlreadyCompletedError",
    "AttemptNotCompletedError",
    "AttemptLimitExceededError",
    "SubmissionValidationError",
    "GradingError",
    "error_response",
]
