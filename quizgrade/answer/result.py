"""
Per-question grading result.

This module provides the QuestionResult class which encapsulates the
outcome of grading one question:
- Correctness flag
- Earned and maximum points
- Earned percentage
- Per-blank correctness for cloze questions
- Metadata for debugging

Results serialize with camelCase keys (``isCorrect``, ``maxScore``) because
that is the shape the quiz client reads.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .helpers import percentage_of


class QuestionResult(BaseModel):
    """
    Result of grading a single question.

    Attributes:
        question_id: ID of the graded question (string form)
        type: Question type the grader handled
        is_correct: True only for a fully correct answer
        score: Earned points (0 <= score <= max_score)
        max_score: Points the question is worth
        percentage: Earned share of max_score, 0-100
        answered: False when no answer was submitted
        blank_results: Per-blank correctness (cloze questions only)
        metadata: Grader-specific counters (hits, misses, reason, ...)
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    question_id: str = ""
    type: str = "unknown"
    is_correct: StrictBool = False
    score: float = 0.0
    max_score: float = 0.0
    percentage: float = 0.0
    answered: bool = True
    blank_results: Optional[dict[str, bool]] = None
    metadata: dict[str, Any] = {}

    @field_validator("score", "max_score")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        """Scores are never negative."""
        if v < 0:
            raise ValueError("score values must be non-negative")
        return float(v)

    @model_validator(mode="after")
    def validate_score_bounds(self) -> QuestionResult:
        """Keep score within the question's points."""
        if self.score > self.max_score:
            raise ValueError(f"score {self.score} exceeds max_score {self.max_score}")
        return self

    def is_partial_credit(self) -> bool:
        """Check if the answer earned some but not all points."""
        return 0.0 < self.score < self.max_score

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Returns:
            camelCase dictionary suitable for JSON responses
        """
        return self.model_dump(by_alias=True, exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuestionResult:
        """Create a QuestionResult from a camelCase or snake_case dictionary."""
        return cls.model_validate(data)

    @classmethod
    def answer_correct(
        cls,
        max_score: float,
        question_type: str = "unknown",
        **fields: Any,
    ) -> QuestionResult:
        """
        Create a full-credit result (convenience factory).

        Args:
            max_score: Points the question is worth
            question_type: Type of question
            **fields: Extra fields (metadata, blank_results, ...)

        Returns:
            QuestionResult with score == max_score
        """
        return cls(
            is_correct=True,
            score=max_score,
            max_score=max_score,
            percentage=percentage_of(max_score, max_score),
            type=question_type,
            **fields,
        )

    @classmethod
    def answer_incorrect(
        cls,
        max_score: float,
        question_type: str = "unknown",
        **fields: Any,
    ) -> QuestionResult:
        """Create a zero-credit result for a wrong answer."""
        return cls(
            is_correct=False,
            score=0.0,
            max_score=max_score,
            percentage=0.0,
            type=question_type,
            **fields,
        )

    @classmethod
    def answer_partial(
        cls,
        score: float,
        max_score: float,
        percentage: float,
        is_correct: bool = False,
        question_type: str = "unknown",
        **fields: Any,
    ) -> QuestionResult:
        """
        Create a proportional-credit result (convenience factory).

        Args:
            score: Earned points, already rounded
            max_score: Points the question is worth
            percentage: Earned percentage computed from the unrounded score
            is_correct: Whether the answer counts as fully correct
            question_type: Type of question
            **fields: Extra fields

        Returns:
            QuestionResult with the given score
        """
        return cls(
            is_correct=is_correct,
            score=score,
            max_score=max_score,
            percentage=percentage,
            type=question_type,
            **fields,
        )

    @classmethod
    def unanswered(
        cls,
        max_score: float,
        question_type: str = "unknown",
        question_id: str = "",
    ) -> QuestionResult:
        """Create the zero-score result for a question with no answer."""
        return cls(
            question_id=question_id,
            type=question_type,
            is_correct=False,
            score=0.0,
            max_score=max_score,
            percentage=0.0,
            answered=False,
        )
