"""
Quiz graders for combining per-question results.

Graders roll a list of QuestionResults into one ScoreSummary. Two
percentages come out of every summary and are kept apart on purpose:

- ``percentage``: earned points over available points (partial credit counts)
- ``pass_percentage``: fully correct questions over all questions, rounded
  to a whole number; this is the figure pass/fail has been decided on
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from .helpers import percentage_of, round2, round_half_up
from .result import QuestionResult

PassBasis = Literal["count", "score"]


class ScoreSummary(BaseModel):
    """
    Totals for one graded submission.

    Attributes:
        total_score: Sum of earned points, rounded to 2 decimals
        max_score: Sum of available points
        percentage: Weighted score percentage (0 when max_score is 0)
        correct_count: Number of fully correct questions
        total_questions: Number of graded questions
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    total_score: float = 0.0
    max_score: float = 0.0
    percentage: float = 0.0
    correct_count: int = Field(default=0, ge=0)
    total_questions: int = Field(default=0, ge=0)

    @computed_field
    @property
    def pass_percentage(self) -> float:
        """Count-based percentage: ``round(correct_count / total_questions * 100)``."""
        if self.total_questions == 0:
            return 0.0
        return round_half_up(self.correct_count / self.total_questions * 100)

    def is_passed(self, passing_score: float, basis: PassBasis = "count") -> bool:
        """
        Decide pass/fail against a threshold.

        Args:
            passing_score: Minimum percentage needed to pass
            basis: "count" compares pass_percentage, "score" compares percentage

        Returns:
            True if the chosen percentage is at least passing_score
        """
        if basis == "count":
            return self.pass_percentage >= passing_score
        if basis == "score":
            return self.percentage >= passing_score
        raise ValueError(f"basis must be 'count' or 'score', got {basis!r}")

    def to_dict(self) -> dict:
        """camelCase dictionary including both percentages."""
        data = self.model_dump(by_alias=True, exclude={"pass_percentage"})
        data["passPercentage"] = self.pass_percentage
        return data


class ScoreGrader(BaseModel):
    """
    Standard quiz grader.

    Sums question scores; each question counts with its own points.
    """

    model_config = ConfigDict(frozen=True)

    def grade(self, results: list[QuestionResult]) -> ScoreSummary:
        """
        Compute totals from individual question results.

        Args:
            results: One QuestionResult per question, in question order

        Returns:
            ScoreSummary for the whole submission
        """
        total_score = sum(result.score for result in results)
        max_score = sum(result.max_score for result in results)

        return ScoreSummary(
            total_score=round2(total_score),
            max_score=max_score,
            percentage=percentage_of(total_score, max_score),
            correct_count=sum(1 for result in results if result.is_correct),
            total_questions=len(results),
        )


def calculate_total_score(results: list[QuestionResult]) -> ScoreSummary:
    """Aggregate question results with the standard grader."""
    return ScoreGrader().grade(results)
