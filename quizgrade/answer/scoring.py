"""
Scoring convenience functions.

One function per question type, taking the answer key, the user's answer
and the question's points, and returning a QuestionResult. Each builds the
matching evaluator and grades one answer with it.

These functions do no type normalization: callers that mix string and
integer IDs should go through ``dispatch.grade_question`` instead.
"""

from __future__ import annotations

from typing import Any

from .evaluators import (
    ClozeTestEvaluator,
    FillBlankEvaluator,
    ImageChoiceEvaluator,
    MatchingEvaluator,
    MultiChoiceEvaluator,
    NumericInputEvaluator,
    OrderingEvaluator,
    SingleChoiceEvaluator,
    TrueFalseEvaluator,
)
from .graders import calculate_total_score
from .result import QuestionResult


def score_single_choice(
    correct_option_id: str | int,
    selected_option_id: str | int | None,
    points: float = 1,
) -> QuestionResult:
    """
    Score a single-choice question.

    Examples:
        >>> score_single_choice(5, 5, 10).score
        10.0
        >>> score_single_choice(5, 3, 10).is_correct
        False
    """
    return SingleChoiceEvaluator(correct_option_id=correct_option_id, points=points).evaluate(
        selected_option_id
    )


def score_multi_choice(
    correct_option_ids: list[str | int],
    selected_option_ids: list[str | int],
    points: float = 1,
) -> QuestionResult:
    """
    Score a multi-choice question with partial credit.

    Examples:
        >>> score_multi_choice([1, 2, 3], [1, 2], 9).score
        6.0
        >>> score_multi_choice([1, 2, 3], [1, 2, 3, 4], 9).score
        4.5
    """
    return MultiChoiceEvaluator(correct_option_ids=correct_option_ids, points=points).evaluate(
        selected_option_ids
    )


def score_true_false(
    correct_answer: bool,
    selected_answer: bool | None,
    points: float = 1,
) -> QuestionResult:
    """Score a true/false question."""
    return TrueFalseEvaluator(correct_answer=correct_answer, points=points).evaluate(selected_answer)


def score_ordering(
    correct_order: list[str],
    selected_order: list[str],
    points: float = 1,
) -> QuestionResult:
    """
    Score an ordering question by items in the right position.

    Examples:
        >>> score_ordering(["a", "b", "c", "d"], ["a", "x", "c", "d"], 8).score
        6.0
    """
    return OrderingEvaluator(correct_order=correct_order, points=points).evaluate(selected_order)


def score_matching(
    correct_matches: dict[str, str],
    selected_matches: dict[str, str],
    points: float = 1,
) -> QuestionResult:
    """Score a matching question by correctly matched pairs."""
    return MatchingEvaluator(correct_matches=correct_matches, points=points).evaluate(selected_matches)


def score_fill_blank(
    correct_answers: list[str],
    selected_answer: str,
    case_sensitive: bool = False,
    points: float = 1,
) -> QuestionResult:
    """
    Score a fill-in-the-blank question.

    Examples:
        >>> score_fill_blank(["Paris"], "  paris ").is_correct
        True
    """
    return FillBlankEvaluator(
        correct_answers=correct_answers,
        case_sensitive=case_sensitive,
        points=points,
    ).evaluate(selected_answer)


def score_image_choice(
    correct_answer: str | int | list[str | int],
    selected_answer: str | int | list[str | int] | None,
    points: float = 1,
    is_multiple: bool = False,
) -> QuestionResult:
    """Score an image-choice question with single- or multi-choice rules."""
    return ImageChoiceEvaluator(
        correct_answer=correct_answer,
        multiple=is_multiple,
        points=points,
    ).evaluate(selected_answer)


def score_numeric_input(
    correct_answer: float,
    selected_answer: str | float | None,
    tolerance: float = 0,
    points: float = 1,
) -> QuestionResult:
    """
    Score a numeric-input question within an absolute tolerance.

    Examples:
        >>> score_numeric_input(10, "10.5", tolerance=0.5).is_correct
        True
        >>> score_numeric_input(10, "10.51", tolerance=0.5).is_correct
        False
    """
    return NumericInputEvaluator(
        correct_answer=correct_answer,
        tolerance=tolerance,
        points=points,
    ).evaluate(selected_answer)


def score_cloze_test(
    correct_answers: dict[str, list[str]],
    selected_answers: dict[str, Any] | None,
    case_sensitive: bool = False,
    points: float = 1,
) -> QuestionResult:
    """Score a cloze test blank by blank."""
    return ClozeTestEvaluator(
        correct_answers=correct_answers,
        case_sensitive=case_sensitive,
        points=points,
    ).evaluate(selected_answers)


__all__ = [
    "score_single_choice",
    "score_multi_choice",
    "score_true_false",
    "score_ordering",
    "score_matching",
    "score_fill_blank",
    "score_image_choice",
    "score_numeric_input",
    "score_cloze_test",
    "calculate_total_score",
]
