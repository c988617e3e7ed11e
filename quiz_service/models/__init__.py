"""Domain models package"""

from .domain import (
    Attempt,
    AttemptStatus,
    QuizTemplate,
    SubmissionResult,
)

__all__ = [
    "Attempt",
    "AttemptStatus",
    "QuizTemplate",
    "SubmissionResult",
]
