"""True/false answer evaluator."""

from __future__ import annotations

from typing import Any

from pydantic import StrictBool

from ..evaluator import AnswerEvaluator
from ..result import QuestionResult


class TrueFalseEvaluator(AnswerEvaluator):
    """Evaluator for true/false questions. No partial credit."""

    question_type = "true_false"

    correct_answer: StrictBool

    def evaluate(self, answer: Any) -> QuestionResult:
        """Full points only when ``answer`` is the same boolean."""
        return self.all_or_nothing(isinstance(answer, bool) and answer is self.correct_answer)
