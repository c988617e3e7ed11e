"""
Choice answer evaluators.

Single-choice, multi-choice and image-choice questions. Image choice has no
rules of its own: it grades exactly like single or multi choice.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import Field

from ..evaluator import AnswerEvaluator, OptionId
from ..helpers import clamp_score, percentage_of, round2, same_id
from ..result import QuestionResult

# Flat multiplier applied when any wrong option is picked, regardless of how many
WRONG_SELECTION_PENALTY = 0.5


class SingleChoiceEvaluator(AnswerEvaluator):
    """
    Evaluator for single-choice questions.

    The selected option must equal the correct option exactly; ``"1"`` and
    ``1`` are different IDs. Callers that mix ID types should normalize them
    before grading.
    """

    question_type = "single_choice"

    correct_option_id: OptionId

    def evaluate(self, answer: Optional[OptionId]) -> QuestionResult:
        """Full points for the correct option, zero otherwise."""
        return self.all_or_nothing(same_id(answer, self.correct_option_id))


class MultiChoiceEvaluator(AnswerEvaluator):
    """
    Evaluator for multi-select questions.

    Supports partial credit:
    - accuracy is the share of correct options that were picked
    - picking any wrong option halves the score (one flat penalty, not one
      per wrong pick)
    - correct when the correct picks equal the number of correct options and
      no wrong option was picked

    Every selected ID is counted, repeats included; the score never exceeds
    the question's points.
    """

    question_type = "multi_choice"

    correct_option_ids: list[OptionId]

    def _is_correct_option(self, option_id: Any) -> bool:
        return any(same_id(option_id, correct) for correct in self.correct_option_ids)

    def evaluate(self, answer: Optional[list[OptionId]]) -> QuestionResult:
        """
        Grade a list of selected option IDs.

        Args:
            answer: Selected option IDs (may be empty)

        Returns:
            QuestionResult with proportional, penalized score
        """
        if not answer:
            return self.no_answer()

        total = len(self.correct_option_ids)
        if total == 0:
            return self.no_answer()

        hits = sum(1 for option_id in answer if self._is_correct_option(option_id))
        wrong = len(answer) - hits

        accuracy = hits / total
        penalty = WRONG_SELECTION_PENALTY if wrong > 0 else 1
        raw = clamp_score(self.points * accuracy * penalty, self.points)

        return QuestionResult.answer_partial(
            score=clamp_score(round2(raw), self.points),
            max_score=self.points,
            percentage=percentage_of(raw, self.points),
            is_correct=hits == total and wrong == 0,
            question_type=self.question_type,
            metadata={"correct_count": hits, "incorrect_count": wrong},
        )


class ImageChoiceEvaluator(AnswerEvaluator):
    """
    Evaluator for image-choice questions.

    Delegates to SingleChoiceEvaluator or MultiChoiceEvaluator depending on
    ``multiple``. Scalars and lists are accepted on both sides: the single
    variant uses the first element of a list, the multiple variant wraps a
    scalar in a list.
    """

    question_type = "image_choice"

    correct_answer: Union[OptionId, list[OptionId]]
    multiple: bool = Field(default=False, description="Grade as multi-select")

    def _result_type(self) -> str:
        return "image_choice_multiple" if self.multiple else "image_choice"

    def evaluate(self, answer: Union[OptionId, list[OptionId], None]) -> QuestionResult:
        """Grade an image selection with single- or multi-choice rules."""
        if self.multiple:
            result = self._evaluate_multiple(answer)
        else:
            result = self._evaluate_single(answer)
        return result.model_copy(update={"type": self._result_type()})

    def _evaluate_multiple(self, answer: Any) -> QuestionResult:
        correct_ids = self.correct_answer if isinstance(self.correct_answer, list) else [self.correct_answer]
        if isinstance(answer, list):
            selected = answer
        else:
            selected = [] if answer is None or answer == "" else [answer]

        evaluator = MultiChoiceEvaluator(correct_option_ids=correct_ids, points=self.points)
        return evaluator.evaluate(selected)

    def _evaluate_single(self, answer: Any) -> QuestionResult:
        if isinstance(self.correct_answer, list):
            if not self.correct_answer:
                return self.no_answer()
            correct_id = self.correct_answer[0]
        else:
            correct_id = self.correct_answer

        if isinstance(answer, list):
            answer = answer[0] if answer else None

        evaluator = SingleChoiceEvaluator(correct_option_id=correct_id, points=self.points)
        return evaluator.evaluate(answer)


class ImageChoiceMultipleEvaluator(ImageChoiceEvaluator):
    """Image choice with several correct images."""

    question_type = "image_choice_multiple"

    multiple: bool = True
