"""
Text answer evaluators.

Fill-in-the-blank and cloze (several blanks in one passage). Answers are
trimmed and, unless the question is case-sensitive, lower-cased before
being compared with each acceptable variant.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from ..evaluator import AnswerEvaluator
from ..helpers import matches_any
from ..result import QuestionResult


class FillBlankEvaluator(AnswerEvaluator):
    """
    Evaluator for fill-in-the-blank questions.

    Supports:
    - Several acceptable answers (any one matches)
    - Case-insensitive matching (default)
    - Trimming whitespace

    Scoring is all-or-nothing; near misses earn nothing.
    """

    question_type = "fill_blank"

    correct_answers: list[str]
    case_sensitive: bool = Field(default=False, description="Compare case-sensitively")

    def evaluate(self, answer: Optional[str]) -> QuestionResult:
        """Evaluate a text answer."""
        if not isinstance(answer, str):
            return self.no_answer()

        is_correct = matches_any(answer, self.correct_answers, self.case_sensitive)
        return self.all_or_nothing(is_correct, metadata={"case_sensitive": self.case_sensitive})


class ClozeTestEvaluator(AnswerEvaluator):
    """
    Evaluator for cloze tests.

    Every blank is graded on its own with the fill-in-the-blank rule. The
    question earns ``points * correct_blanks / total_blanks`` and is correct
    only when all blanks are. Per-blank outcomes are returned in
    ``blank_results`` for display.
    """

    question_type = "cloze_test"

    correct_answers: dict[str, list[str]]
    case_sensitive: bool = Field(default=False, description="Compare case-sensitively")

    def grade_blanks(self, answers: dict[str, Any]) -> dict[str, bool]:
        """Correctness of each blank, keyed by blank ID."""
        outcome = {}
        for blank_id, accepted in self.correct_answers.items():
            given = answers.get(blank_id)
            outcome[blank_id] = bool(given) and isinstance(given, str) and matches_any(
                given, accepted, self.case_sensitive
            )
        return outcome

    def evaluate(self, answer: Optional[dict[str, Any]]) -> QuestionResult:
        """Evaluate a mapping of blank ID to text answer."""
        if answer is None:
            return self.no_answer()

        blank_results = self.grade_blanks(answer)
        correct_blanks = sum(blank_results.values())
        total_blanks = len(blank_results)
        return self.proportional(
            correct_blanks,
            total_blanks,
            is_correct=correct_blanks == total_blanks,
            blank_results=blank_results,
        )
