"""
quizgrade - Scoring engine for online quizzes

Grades submitted answers for nine question types and rolls the per-question
results into a score summary. Grading is pure: no I/O, no clock, no shared
state, so it is safe to call from any number of threads at once.
"""

from .answer import (
    QuestionResult,
    ScoreSummary,
    calculate_total_score,
    grade_question,
    grade_questions,
    grade_submission,
)
from .question import Question, QuestionType

__version__ = "1.0.0"

__all__ = [
    "Question",
    "QuestionType",
    "QuestionResult",
    "ScoreSummary",
    "calculate_total_score",
    "grade_question",
    "grade_questions",
    "grade_submission",
]
