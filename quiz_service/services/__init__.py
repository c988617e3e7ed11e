"""Services package"""

from .question_service import QuestionService, get_question_service
from .grading_service import GradingService, get_grading_service

__all__ = [
    "QuestionService",
    "get_question_service",
    "GradingService",
    "get_grading_service",
]
