"""
Ordering and matching answer evaluators.

Both award linear partial credit: each item in the right position (or each
pair matched correctly) is worth an equal share of the question's points.
"""

from __future__ import annotations

from typing import Optional

from ..evaluator import AnswerEvaluator, OptionId
from ..helpers import same_id
from ..result import QuestionResult


class OrderingEvaluator(AnswerEvaluator):
    """
    Evaluator for ordering questions.

    Items are compared position by position over the shorter of the two
    sequences. The answer is correct only when every position of the
    correct order is matched.
    """

    question_type = "ordering"

    correct_order: list[OptionId]

    def evaluate(self, answer: Optional[list[OptionId]]) -> QuestionResult:
        """
        Grade a submitted order.

        Args:
            answer: Item identifiers in the order the user arranged them

        Returns:
            QuestionResult worth ``points * correct_positions / len(correct_order)``
        """
        if not answer:
            return self.no_answer()

        correct_positions = sum(
            1 for expected, given in zip(self.correct_order, answer) if same_id(expected, given)
        )
        return self.proportional(
            correct_positions,
            len(self.correct_order),
            is_correct=correct_positions == len(self.correct_order),
            metadata={"correct_positions": correct_positions},
        )


class MatchingEvaluator(AnswerEvaluator):
    """
    Evaluator for matching questions.

    Only the left-hand keys of the answer key are checked; extra keys in the
    submission are ignored.
    """

    question_type = "matching"

    correct_matches: dict[str, OptionId]

    def evaluate(self, answer: Optional[dict[str, OptionId]]) -> QuestionResult:
        """Grade a left-key to right-key mapping."""
        if not answer:
            return self.no_answer()

        correct_pairs = sum(
            1
            for left, right in self.correct_matches.items()
            if left in answer and same_id(answer[left], right)
        )
        total_pairs = len(self.correct_matches)
        return self.proportional(
            correct_pairs,
            total_pairs,
            is_correct=correct_pairs == total_pairs,
            metadata={"correct_pairs": correct_pairs, "total_pairs": total_pairs},
        )
