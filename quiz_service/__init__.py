"""
quiz_service - Attempt submission service around the quizgrade engine

Loads questions and quiz templates, opens attempts, grades submissions and
builds the result view. Routing, authentication and attempt storage belong
to the caller.
"""

from .core import get_logger, settings, setup_logging
from .models import Attempt, AttemptStatus, QuizTemplate, SubmissionResult
from .services import GradingService, QuestionService

__all__ = [
    "settings",
    "setup_logging",
    "get_logger",
    "Attempt",
    "AttemptStatus",
    "QuizTemplate",
    "SubmissionResult",
    "GradingService",
    "QuestionService",
]
