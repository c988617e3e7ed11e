"""
Numeric answer evaluator.

Handles evaluation of numeric-input answers with an absolute tolerance.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ..evaluator import AnswerEvaluator
from ..helpers import parse_number
from ..result import QuestionResult


class NumericInputEvaluator(AnswerEvaluator):
    """
    Evaluator for numeric-input answers.

    The answer may be a number or a string. Strings are parsed from their
    leading numeric prefix (``"10.5 cm"`` reads as 10.5). Blank or
    unparsable input is graded as incorrect rather than raising.

    An answer is correct when ``abs(answer - correct_answer) <= tolerance``;
    the boundary itself is inside the tolerance.
    """

    question_type = "numeric_input"

    correct_answer: float
    tolerance: float = Field(default=0.0, ge=0, description="Allowed absolute deviation")

    def evaluate(self, answer: Any) -> QuestionResult:
        """
        Evaluate numeric answer.

        Args:
            answer: Number or numeric string

        Returns:
            QuestionResult with full points or zero
        """
        value = parse_number(answer)
        if value is None:
            return self.all_or_nothing(False, metadata={"reason": "unparsable"})

        is_correct = abs(value - self.correct_answer) <= self.tolerance
        return self.all_or_nothing(
            is_correct,
            metadata={"parsed_value": value, "tolerance": self.tolerance},
        )
